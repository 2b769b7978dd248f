from __future__ import annotations

import logging
from xml.etree import ElementTree as ET

from ..errors import FormatError
from ..model import Sheet, SpreadSheet
from .cells import decode_row_cells
from .context import DecodeContext
from .utils import find_first, get_attr, iter_children, parse_count, qname

logger = logging.getLogger(__name__)


def build_tables(root: ET.Element, spreadsheet: SpreadSheet, context: DecodeContext) -> int:
    body = find_first(root, "office:body")
    if body is None:
        return 0

    count = 0
    for content in iter_children(body, "office:spreadsheet"):
        for table_elem in iter_children(content, "table:table"):
            spreadsheet.append_sheet(build_sheet(table_elem, context))
            count += 1
    return count


def build_sheet(table_elem: ET.Element, context: DecodeContext) -> Sheet:
    name = get_attr(table_elem, "table:name")
    if name is None:
        raise FormatError("table:table element without a table:name attribute")

    sheet = Sheet(name)
    sheet.delete_row(0)
    sheet.delete_column(0)
    context.reset_sheet_maps()

    for child in list(table_elem):
        if not isinstance(child.tag, str):
            continue
        tag = qname(child.tag)
        if tag == "table:table-column":
            _append_columns(child, sheet, context)
        elif tag == "table:table-row":
            _append_row(child, sheet, context)

    logger.debug("Built sheet %r with %d rows and %d columns", name, sheet.max_rows, sheet.max_columns)
    return sheet


def _append_columns(column_elem: ET.Element, sheet: Sheet, context: DecodeContext) -> None:
    repeated = parse_count(
        get_attr(column_elem, "table:number-columns-repeated"),
        1,
        attr="table:number-columns-repeated",
    )
    repeated = max(repeated, 1)

    style = context.lookup_style(get_attr(column_elem, "table:default-cell-style-name"))
    if style is not None:
        start = sheet.max_columns
        for index in range(start, start + repeated):
            context.column_styles[index] = style
    sheet.append_columns(repeated)


def _append_row(row_elem: ET.Element, sheet: Sheet, context: DecodeContext) -> None:
    row = sheet.max_rows
    style = context.lookup_style(get_attr(row_elem, "table:default-cell-style-name"))
    if style is not None:
        context.row_styles[row] = style
    # Rows are never expanded by table:number-rows-repeated.
    sheet.append_row()
    decode_row_cells(row_elem, sheet, row, context)
