from __future__ import annotations

from dataclasses import dataclass, field

from ..model import Style
from .styles import new_registry


@dataclass(slots=True)
class DecodeContext:
    """Mutable state owned by a single load call."""

    styles: dict[str, Style] = field(default_factory=new_registry)
    column_styles: dict[int, Style] = field(default_factory=dict)
    row_styles: dict[int, Style] = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)

    def lookup_style(self, name: str | None) -> Style | None:
        if name is None:
            return None
        return self.styles.get(name)

    def reset_sheet_maps(self) -> None:
        self.column_styles = {}
        self.row_styles = {}
