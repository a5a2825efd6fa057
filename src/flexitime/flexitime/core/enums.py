from __future__ import annotations

from enum import Enum


class RecordSchema(str, Enum):
    """Layout version of a stored day row."""

    CURRENT = "CURRENT"
    LEGACY = "LEGACY"


class BlockStatus(str, Enum):
    """Outcome of reading a data block from a document."""

    FOUND = "FOUND"
    NO_BLOCK = "NO_BLOCK"
    NO_DOCUMENT = "NO_DOCUMENT"
