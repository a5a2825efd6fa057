from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import BlockRead, TableBlock


class DocumentStore(Protocol):
    """Plain-text documents addressed by name (no extension)."""

    def list_names(self, pattern: str) -> Sequence[str]:
        """Names matching a glob pattern, sorted ascending."""

        raise NotImplementedError

    def read_text(self, name: str) -> Optional[str]:
        """Raw document text, or None when the document does not exist."""

        raise NotImplementedError

    def read_block(self, name: str, *, block: str) -> BlockRead:
        raise NotImplementedError

    def write_block(self, name: str, *, block: str, table: TableBlock) -> None:
        """Replace the named block (or append it), creating the document if needed."""

        raise NotImplementedError
