"""Record types produced by the extractor and the gap finder."""
from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class ExtensionRecord:
    file_path: str
    object_name: str
    identifier: int
    category: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class FreeIdEntry:
    identifier: int
    category: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class CategorySummary:
    """Observed ID range of one category: first/last ID, used and free counts."""

    category: str
    first_id: int
    last_id: int
    used: int
    free: int

    def to_dict(self) -> dict:
        return asdict(self)
