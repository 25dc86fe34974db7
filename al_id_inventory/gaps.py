"""
gaps.py — Free ID detection within each category's observed ID range.

Records are walked in (category, identifier) order. Every integer strictly
between two consecutive identifiers of the same category is a free ID; the
jump from one category to the next never produces one.
"""
from __future__ import annotations

import logging
from itertools import groupby
from typing import Iterable, List

from .models import CategorySummary, ExtensionRecord, FreeIdEntry

log = logging.getLogger(__name__)


def record_sort_key(record: ExtensionRecord):
    """Case-insensitive category, then numeric identifier."""
    return record.category.casefold(), record.identifier


def sort_records(records: Iterable[ExtensionRecord]) -> List[ExtensionRecord]:
    return sorted(records, key=record_sort_key)


def find_free_ids(records: Iterable[ExtensionRecord]) -> List[FreeIdEntry]:
    """
    Return the unused identifiers between consecutive records of each category.

    The input is re-sorted with record_sort_key; sorting is stable, so a list
    already in that order is walked as given.
    """
    free: List[FreeIdEntry] = []
    previous_identifier = None
    previous_category = None

    for record in sort_records(records):
        category = record.category.casefold()
        # A leading 0 is indistinguishable from "no predecessor yet"
        if previous_identifier and category == previous_category:
            if record.identifier - previous_identifier != 1:
                for identifier in range(previous_identifier + 1, record.identifier):
                    free.append(FreeIdEntry(identifier=identifier, category=record.category))
        previous_identifier = record.identifier
        previous_category = category

    log.info(f"Found {len(free)} free identifiers")
    return free


def summarize_categories(records: Iterable[ExtensionRecord]) -> List[CategorySummary]:
    """One CategorySummary per category: observed first/last ID, used and free counts."""
    records = sort_records(records)
    free_by_category = {}
    for entry in find_free_ids(records):
        key = entry.category.casefold()
        free_by_category[key] = free_by_category.get(key, 0) + 1

    summaries = []
    for key, group in groupby(records, key=lambda r: r.category.casefold()):
        group = list(group)
        summaries.append(CategorySummary(
            category=group[0].category,
            first_id=group[0].identifier,
            last_id=group[-1].identifier,
            used=len(group),
            free=free_by_category.get(key, 0),
        ))
    return summaries
