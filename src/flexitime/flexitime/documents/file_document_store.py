from __future__ import annotations

import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Optional, Sequence

from ..core.enums import BlockStatus
from .markup import read_block_rows, replace_block
from .model import BlockRead, TableBlock
from .repository import DocumentStore

logger = logging.getLogger(__name__)


def _default_file_mode() -> int:
    # os.umask can only be read by setting it
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


class FileDocumentStore(DocumentStore):
    """Documents as `<name><ext>` files in one directory."""

    def __init__(self, directory: Path | str, *, ext: str = ".org"):
        self._directory = Path(directory)
        self._ext = ext if ext.startswith(".") else f".{ext}"

    @property
    def directory(self) -> Path:
        return self._directory

    def _path(self, name: str) -> Path:
        return self._directory / f"{name}{self._ext}"

    def list_names(self, pattern: str) -> Sequence[str]:
        if not self._directory.is_dir():
            return []
        return sorted(p.name[: -len(self._ext)] for p in self._directory.glob(f"{pattern}{self._ext}") if p.is_file())

    def read_text(self, name: str) -> Optional[str]:
        path = self._path(name)
        if not path.is_file():
            return None
        return path.read_text(encoding="utf-8")

    def read_block(self, name: str, *, block: str) -> BlockRead:
        text = self.read_text(name)
        if text is None:
            return BlockRead(status=BlockStatus.NO_DOCUMENT)

        rows = read_block_rows(text, block)
        if not rows:
            return BlockRead(status=BlockStatus.NO_BLOCK)
        return BlockRead(status=BlockStatus.FOUND, rows=tuple(rows))

    def write_block(self, name: str, *, block: str, table: TableBlock) -> None:
        path = self._path(name)
        text = self.read_text(name) or ""
        self._directory.mkdir(parents=True, exist_ok=True)

        # Write a sibling file and rename it so readers never see a partial document.
        fd, tmp = tempfile.mkstemp(dir=self._directory, prefix=f".{name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(replace_block(text, block, table))
            if path.exists():
                shutil.copymode(path, tmp)
            else:
                os.chmod(tmp, _default_file_mode())
            os.replace(tmp, path)
        except Exception:
            if os.path.exists(tmp):
                os.remove(tmp)
            raise
        logger.debug("Wrote block %s to %s", block, path)
