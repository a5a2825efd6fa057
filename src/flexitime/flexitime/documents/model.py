from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from ..core.enums import BlockStatus


@dataclass(frozen=True)
class TableBlock:
    """Content of a generated data block: one header, data rows, optional formulas."""

    header: Sequence[str]
    rows: Sequence[Sequence[str]] = field(default_factory=tuple)
    formulas: Sequence[str] = field(default_factory=tuple)


@dataclass(frozen=True)
class BlockRead:
    """Read-model of a data block: header and separator rows are already stripped."""

    status: BlockStatus
    rows: tuple[tuple[str, ...], ...] = ()

    @property
    def found(self) -> bool:
        return self.status == BlockStatus.FOUND
