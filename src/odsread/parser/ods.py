from __future__ import annotations

import logging
from collections.abc import Mapping
from xml.etree import ElementTree as ET

from ..errors import PartDecodeError
from ..model import LoadOptions, LoadReport, PartFailure, SpreadSheet
from .container import Source, unpack, validate
from .context import DecodeContext
from .styles import collect_styles
from .tables import build_tables

logger = logging.getLogger(__name__)


class OdsWorkbookReader:
    def __init__(self, source: Source | Mapping[str, bytes], options: LoadOptions | None = None) -> None:
        self.source = source
        self.options = options or LoadOptions()

    def read_into(self, spreadsheet: SpreadSheet) -> LoadReport:
        container = self._container()
        manifest = validate(container)
        report = LoadReport(manifest=manifest)
        context = DecodeContext(warnings=report.warnings)

        for path, payload in container.items():
            if not path.endswith(self.options.scan_suffix):
                continue
            report.parts_scanned.append(path)
            failure = self._process_part(path, payload, spreadsheet, context)
            if failure is not None:
                report.failures.append(failure)

        report.summary = self._build_summary(spreadsheet, context, report)
        return report

    def _container(self) -> Mapping[str, bytes]:
        if isinstance(self.source, Mapping):
            return self.source
        return unpack(self.source)

    def _process_part(
        self,
        path: str,
        payload: bytes,
        spreadsheet: SpreadSheet,
        context: DecodeContext,
    ) -> PartFailure | None:
        if not payload:
            return None

        try:
            root = ET.fromstring(payload)
        except (ET.ParseError, LookupError) as exc:
            if self.options.strict_parts:
                raise PartDecodeError(path, str(exc)) from exc
            logger.warning("Skipping unparseable part %s: %s", path, exc)
            return PartFailure(path=path, message=str(exc))

        style_count = collect_styles(root, context.styles, context.warnings)
        table_count = build_tables(root, spreadsheet, context)
        logger.debug("Part %s: %d styles, %d tables", path, style_count, table_count)
        return None

    def _build_summary(self, spreadsheet: SpreadSheet, context: DecodeContext, report: LoadReport) -> dict[str, int]:
        cells = [cell for sheet in spreadsheet.sheets for _, _, cell in sheet.iter_cells()]
        return {
            "sheet_count": spreadsheet.num_sheets,
            "row_count": sum(sheet.max_rows for sheet in spreadsheet.sheets),
            "cell_count": len(cells),
            "formula_count": sum(1 for cell in cells if cell.formula),
            "style_count": len(context.styles),
            "failure_count": len(report.failures),
        }
