"""Inventory and free-ID detection for AL extension objects."""

from .errors import InvalidArgumentError
from .extractor import extract_fields, get_extension_inventory, process_file
from .gaps import find_free_ids, sort_records, summarize_categories
from .models import CategorySummary, ExtensionRecord, FreeIdEntry

__version__ = "0.1.0"

__all__ = [
    "CategorySummary",
    "ExtensionRecord",
    "FreeIdEntry",
    "InvalidArgumentError",
    "extract_fields",
    "find_free_ids",
    "get_extension_inventory",
    "process_file",
    "sort_records",
    "summarize_categories",
]
