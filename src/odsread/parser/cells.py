from __future__ import annotations

from xml.etree import ElementTree as ET

from ..model import CellValue, Sheet, Style
from .context import DecodeContext
from .utils import get_attr, iter_children, parse_count, qname, text_content
from .values import coerce


def decode_row_cells(row_elem: ET.Element, sheet: Sheet, row: int, context: DecodeContext) -> int:
    """Decode the ``table:table-cell`` children of a row into ``sheet``.

    Returns the column cursor after the last written position.
    """
    column = 0
    for cell_elem in list(row_elem):
        if not isinstance(cell_elem.tag, str) or qname(cell_elem.tag) != "table:table-cell":
            continue

        value_type = get_attr(cell_elem, "office:value-type", "string") or "string"
        formula = get_attr(cell_elem, "table:formula")
        value = _cell_value(cell_elem, value_type)
        style = _resolve_style(cell_elem, column, row, context)

        _write(sheet, row, column, value, style, formula)
        column += 1

        repeated = parse_count(
            get_attr(cell_elem, "table:number-columns-repeated"),
            0,
            attr="table:number-columns-repeated",
        )
        for _ in range(repeated - 1):
            _write(sheet, row, column, value, style, None)
            column += 1
    return column


def _cell_value(cell_elem: ET.Element, value_type: str) -> CellValue:
    explicit = get_attr(cell_elem, "office:value")
    if explicit is not None:
        return coerce(explicit, value_type)

    paragraphs = list(iter_children(cell_elem, "text:p"))
    if not paragraphs:
        return None
    return coerce(text_content(paragraphs[-1]), value_type)


def _resolve_style(cell_elem: ET.Element, column: int, row: int, context: DecodeContext) -> Style | None:
    style = context.lookup_style(get_attr(cell_elem, "table:style-name"))
    if style is None:
        style = context.column_styles.get(column)
    if style is None:
        style = context.row_styles.get(row)
    return style


def _write(
    sheet: Sheet,
    row: int,
    column: int,
    value: CellValue,
    style: Style | None,
    formula: str | None,
) -> None:
    if column >= sheet.max_columns:
        sheet.append_columns(column - sheet.max_columns + 1)
    cell = sheet.cell(row, column)
    cell.formula = formula
    if style is not None:
        cell.style = style
    cell.value = value
