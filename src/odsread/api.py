from __future__ import annotations

from collections.abc import Mapping

from .model import LoadOptions, LoadReport, SpreadSheet
from .parser.container import Source
from .parser.ods import OdsWorkbookReader
from .render_markdown import render_spreadsheet_markdown


def read_ods(
    source: Source | Mapping[str, bytes],
    spreadsheet: SpreadSheet,
    *,
    options: LoadOptions | None = None,
) -> LoadReport:
    reader = OdsWorkbookReader(source, options)
    return reader.read_into(spreadsheet)


def load_ods(source: Source | Mapping[str, bytes], *, options: LoadOptions | None = None) -> SpreadSheet:
    spreadsheet = SpreadSheet()
    read_ods(source, spreadsheet, options=options)
    return spreadsheet


def convert_ods_to_markdown(source: Source | Mapping[str, bytes], *, options: LoadOptions | None = None) -> str:
    spreadsheet = SpreadSheet()
    report = read_ods(source, spreadsheet, options=options)
    return render_spreadsheet_markdown(spreadsheet, report)
