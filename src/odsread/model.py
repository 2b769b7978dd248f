from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Iterator, Union

CellValue = Union[str, int, float, None]

_HEX_COLOR_RE = re.compile(r"^#([0-9a-fA-F]{6}|[0-9a-fA-F]{3})$")


@dataclass(slots=True)
class LoadOptions:
    strict_parts: bool = False
    scan_suffix: str = ".xml"


@dataclass(frozen=True, slots=True)
class Color:
    red: int
    green: int
    blue: int

    @classmethod
    def from_hex(cls, value: str) -> Color:
        match = _HEX_COLOR_RE.match(value.strip())
        if not match:
            raise ValueError(f"Invalid color: {value!r}")
        digits = match.group(1)
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    def __str__(self) -> str:
        return f"#{self.red:02X}{self.green:02X}{self.blue:02X}"


@dataclass(slots=True)
class Style:
    """Formatting bundle; ``None`` on any field means unset (inherit)."""

    bold: bool | None = None
    italic: bool | None = None
    underline: bool | None = None
    font_color: Color | None = None
    font_size: int | None = None
    background_color: Color | None = None


@dataclass(slots=True)
class Cell:
    value: CellValue = None
    style: Style | None = None
    formula: str | None = None


class Sheet:
    """A rectangular grid of cells addressed by zero-based (row, column)."""

    def __init__(self, name: str, rows: int = 1, columns: int = 1) -> None:
        if rows < 0 or columns < 0:
            raise ValueError("rows/columns must be >= 0")
        self.name = name
        self._rows = rows
        self._columns = columns
        self._cells: dict[tuple[int, int], Cell] = {}

    def __repr__(self) -> str:
        return f"Sheet(name={self.name!r}, rows={self._rows}, columns={self._columns})"

    @property
    def max_rows(self) -> int:
        return self._rows

    @property
    def max_columns(self) -> int:
        return self._columns

    def append_row(self) -> None:
        self.append_rows(1)

    def append_rows(self, count: int) -> None:
        if count < 0:
            raise ValueError("count must be >= 0")
        self._rows += count

    def append_column(self) -> None:
        self.append_columns(1)

    def append_columns(self, count: int) -> None:
        if count < 0:
            raise ValueError("count must be >= 0")
        self._columns += count

    def delete_row(self, index: int) -> None:
        self._check_row(index)
        shifted: dict[tuple[int, int], Cell] = {}
        for (row, col), cell in self._cells.items():
            if row == index:
                continue
            shifted[(row - 1 if row > index else row, col)] = cell
        self._cells = shifted
        self._rows -= 1

    def delete_column(self, index: int) -> None:
        self._check_column(index)
        shifted: dict[tuple[int, int], Cell] = {}
        for (row, col), cell in self._cells.items():
            if col == index:
                continue
            shifted[(row, col - 1 if col > index else col)] = cell
        self._cells = shifted
        self._columns -= 1

    def cell(self, row: int, col: int) -> Cell:
        self._check_row(row)
        self._check_column(col)
        key = (row, col)
        cell = self._cells.get(key)
        if cell is None:
            cell = Cell()
            self._cells[key] = cell
        return cell

    def get_value(self, row: int, col: int) -> CellValue:
        self._check_row(row)
        self._check_column(col)
        cell = self._cells.get((row, col))
        return cell.value if cell is not None else None

    def get_style(self, row: int, col: int) -> Style | None:
        self._check_row(row)
        self._check_column(col)
        cell = self._cells.get((row, col))
        return cell.style if cell is not None else None

    def iter_rows(self) -> Iterator[list[CellValue]]:
        for row in range(self._rows):
            yield [self.get_value(row, col) for col in range(self._columns)]

    def iter_cells(self) -> Iterator[tuple[int, int, Cell]]:
        for (row, col) in sorted(self._cells):
            yield row, col, self._cells[(row, col)]

    def _check_row(self, index: int) -> None:
        if not 0 <= index < self._rows:
            raise IndexError(f"Row {index} out of range (sheet has {self._rows} rows)")

    def _check_column(self, index: int) -> None:
        if not 0 <= index < self._columns:
            raise IndexError(f"Column {index} out of range (sheet has {self._columns} columns)")


@dataclass(slots=True)
class SpreadSheet:
    sheets: list[Sheet] = field(default_factory=list)

    @property
    def num_sheets(self) -> int:
        return len(self.sheets)

    @property
    def sheet_names(self) -> list[str]:
        return [sheet.name for sheet in self.sheets]

    def append_sheet(self, sheet: Sheet) -> None:
        self.sheets.append(sheet)

    def get_sheet(self, name: str) -> Sheet | None:
        for sheet in self.sheets:
            if sheet.name == name:
                return sheet
        return None


@dataclass(slots=True)
class ManifestEntry:
    full_path: str
    media_type: str | None
    has_encryption: bool = False


@dataclass(slots=True)
class ManifestInfo:
    entries: list[ManifestEntry] = field(default_factory=list)
    main_path: str | None = None


@dataclass(slots=True)
class PartFailure:
    path: str
    message: str


@dataclass(slots=True)
class LoadReport:
    manifest: ManifestInfo
    parts_scanned: list[str] = field(default_factory=list)
    failures: list[PartFailure] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    summary: dict[str, Any] = field(default_factory=dict)
