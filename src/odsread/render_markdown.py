from __future__ import annotations

import json

from .model import CellValue, LoadReport, Sheet, SpreadSheet
from .parser.utils import index_to_col


def render_spreadsheet_markdown(spreadsheet: SpreadSheet, report: LoadReport | None = None) -> str:
    lines: list[str] = []

    lines.append("# Spreadsheet")
    lines.append("")

    if report is not None:
        lines.append("## Extraction Summary")
        lines.append("")
        _append_key_value_table(lines, report.summary)
        lines.append("")

    for sheet in spreadsheet.sheets:
        lines.append(f"## Sheet: {sheet.name}")
        lines.append("")
        _append_sheet_table(lines, sheet)
        lines.append("")

    if report is not None and (report.failures or report.warnings):
        lines.append("## Warnings")
        lines.append("")
        for failure in report.failures:
            lines.append(f"- skipped part `{failure.path}`: {failure.message}")
        for warning in report.warnings:
            lines.append(f"- {warning}")

    return "\n".join(lines).rstrip() + "\n"


def _append_sheet_table(lines: list[str], sheet: Sheet) -> None:
    if sheet.max_rows == 0 or sheet.max_columns == 0:
        lines.append("(empty)")
        return

    width = _used_width(sheet)
    if width == 0:
        lines.append("(empty)")
        return

    lines.append("| row | " + " | ".join(index_to_col(col + 1) for col in range(width)) + " |")
    lines.append("|---:|" + "---|" * width)
    for row_idx, values in enumerate(sheet.iter_rows(), start=1):
        cells = [_esc(_display(value)) for value in values[:width]]
        lines.append(f"| {row_idx} | " + " | ".join(cells) + " |")


def _used_width(sheet: Sheet) -> int:
    width = 0
    for _, col, cell in sheet.iter_cells():
        if cell.value is not None or cell.formula:
            width = max(width, col + 1)
    return width


def _display(value: CellValue) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _append_key_value_table(lines: list[str], payload: dict) -> None:
    lines.append("| key | value |")
    lines.append("|---|---|")
    for key, value in payload.items():
        lines.append(f"| {_esc(str(key))} | {_esc(_compact(value))} |")


def _compact(value) -> str:
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def _esc(value: str) -> str:
    return value.replace("|", "\\|").replace("\n", "<br>")
