"""
extractor.py — Field extraction for AL extension objects.

Reads each supplied .al file, locates the first line carrying a number and
turns it into an ExtensionRecord: the leading token of that line is the
category (pageextension, tableextension, ...), the number is the identifier
and the text after "extends " (or after "<prefix> - " in the file name) is the
name of the extended object.

    pageextension 50100 "PEX50292 Customer Card" extends "Customer Card"

yields category "pageextension", identifier 50100 (or 50292 when the
identifier is taken from the object name) and object name "Customer Card".
"""
from __future__ import annotations

import logging
import os
import re
from typing import Iterable, List, Optional, Tuple

from .errors import InvalidArgumentError
from .gaps import find_free_ids, sort_records
from .models import ExtensionRecord

log = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

SOURCE_EXTENSION = ".al"

EXTENDS_KEYWORD = "extends "

# Standalone integer token: pageextension 50100 "..."
NUMBER_TOKEN_RE = re.compile(r"\b(\d+)\b")

# Letter run immediately followed by a digit run: "PEX50292 Customer Card"
NAMED_NUMBER_RE = re.compile(r"[A-Za-z]+(\d+)")

CATEGORY_RE = re.compile(r"^\w+")

# "<prefix>[digits] - <object name>" in the file name
FILE_NAME_OBJECT_RE = re.compile(r"\w+\d* - ")


# ---------------------------------------------------------------------------
# Line matching
# ---------------------------------------------------------------------------

def match_number_token(line: str) -> Optional[re.Match]:
    return NUMBER_TOKEN_RE.search(line)


def match_named_number(line: str) -> Optional[re.Match]:
    return NAMED_NUMBER_RE.search(line)


def find_matching_line(lines: Iterable[str], identifier_from_name: bool = False):
    """Return (line, match) for the first line matching the identifier pattern, or None."""
    matcher = match_named_number if identifier_from_name else match_number_token
    for line in lines:
        match = matcher(line)
        if match:
            return line, match
    return None


# ---------------------------------------------------------------------------
# Field extraction
# ---------------------------------------------------------------------------

def category_from_line(line: str) -> str:
    match = CATEGORY_RE.match(line)
    return match.group(0) if match else ""


def object_name_from_line(line: str) -> str:
    """Text after the extends keyword with double quotes removed, or ""."""
    idx = line.find(EXTENDS_KEYWORD)
    if idx < 0:
        return ""
    return line[idx + len(EXTENDS_KEYWORD):].replace('"', "").rstrip()


def object_name_from_path(file_name: str) -> str:
    """Text after the first "<word> - " separator of the base name, or ""."""
    stem = os.path.splitext(os.path.basename(file_name))[0]
    match = FILE_NAME_OBJECT_RE.search(stem)
    if not match:
        return ""
    return stem[match.end():].strip()


def extract_fields(
    text: str,
    file_name: str = "",
    identifier_from_name: bool = False,
    object_name_from_file_name: bool = False,
) -> Optional[Tuple[str, int, str]]:
    """
    Extract (object_name, identifier, category) from one file's content.
    Returns None when no line carries an identifier.
    """
    found = find_matching_line(text.splitlines(), identifier_from_name)
    if found is None:
        return None
    line, match = found

    identifier = int(match.group(1))
    category = category_from_line(line)
    if object_name_from_file_name:
        object_name = object_name_from_path(file_name)
    else:
        object_name = object_name_from_line(line)
    return object_name, identifier, category


# ---------------------------------------------------------------------------
# File processing
# ---------------------------------------------------------------------------

def is_source_file(entry) -> bool:
    """True for non-directory entries whose extension is exactly .al."""
    if entry.is_dir():
        return False
    return os.path.splitext(entry.name)[1] == SOURCE_EXTENSION


def process_file(entry, identifier_from_name=False, object_name_from_file_name=False):
    """Build the record for a single file. Returns (record, error_msg)."""
    file_path = os.fspath(entry)

    try:
        with open(file_path, "r", encoding="utf-8-sig", errors="replace") as f:
            text = f.read()
    except OSError as e:
        return None, f"Cannot read file: {e}"

    fields = extract_fields(
        text,
        file_name=entry.name,
        identifier_from_name=identifier_from_name,
        object_name_from_file_name=object_name_from_file_name,
    )
    if fields is None:
        pattern = NAMED_NUMBER_RE if identifier_from_name else NUMBER_TOKEN_RE
        return None, f"No line matches '{pattern.pattern}'"

    object_name, identifier, category = fields
    record = ExtensionRecord(
        file_path=file_path,
        object_name=object_name,
        identifier=identifier,
        category=category,
    )
    return record, None


def _check_file_list(files) -> list:
    """Materialize the collection, failing if it is not made of file objects."""
    if isinstance(files, (str, bytes, os.PathLike)):
        raise InvalidArgumentError(
            f"Expected a collection of file objects, got {type(files).__name__}"
        )
    try:
        entries = list(files)
    except TypeError:
        raise InvalidArgumentError(
            f"Expected a collection of file objects, got {type(files).__name__}"
        ) from None
    for entry in entries:
        if not isinstance(entry, os.PathLike) or not callable(getattr(entry, "is_dir", None)):
            raise InvalidArgumentError(
                f"Expected file objects exposing is_dir() and name (e.g. pathlib.Path "
                f"or os.DirEntry), got {type(entry).__name__}: {entry!r}"
            )
    return entries


def get_extension_inventory(
    files,
    identifier_from_name: bool = False,
    object_name_from_file_name: bool = False,
    return_only_free_identifiers: bool = False,
) -> list:
    """
    Extract one ExtensionRecord per .al file, sorted by (category, identifier).

    With return_only_free_identifiers the sorted records are handed to
    find_free_ids and the resulting FreeIdEntry list is returned instead.
    Files without a matching line are skipped with a warning.
    """
    entries = _check_file_list(files)

    records: List[ExtensionRecord] = []
    skipped = 0
    for entry in entries:
        if not is_source_file(entry):
            log.debug(f"Ignoring {os.fspath(entry)}: not a {SOURCE_EXTENSION} file")
            continue

        record, error = process_file(
            entry,
            identifier_from_name=identifier_from_name,
            object_name_from_file_name=object_name_from_file_name,
        )
        if error:
            log.warning(f"Skipping {os.fspath(entry)}: {error}")
            skipped += 1
            continue
        records.append(record)

    records = sort_records(records)
    log.info(f"Extracted {len(records)} extension records ({skipped} skipped)")

    if return_only_free_identifiers:
        return find_free_ids(records)
    return records
