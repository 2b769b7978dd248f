from __future__ import annotations

from pathlib import Path

import pytest

from odsread.api import convert_ods_to_markdown, load_ods, read_ods
from odsread.cli import main
from odsread.errors import PartDecodeError, UnsupportedFeatureError
from odsread.model import Color, LoadOptions, SpreadSheet
from tests.helpers import as_container, content_xml, ods_entries, write_ods

STYLED_CONTENT = content_xml(
    styles="""
<style:style style:name="ce1" style:family="table-cell">
  <style:text-properties fo:font-weight="bold" fo:font-size="14pt" fo:color="#112233"/>
</style:style>
<style:style style:name="co1" style:family="table-cell">
  <style:table-cell-properties fo:background-color="#FFFF00"/>
</style:style>
""",
    tables="""
<table:table table:name="Data">
  <table:table-column table:number-columns-repeated="2" table:default-cell-style-name="co1"/>
  <table:table-column/>
  <table:table-row>
    <table:table-cell table:style-name="ce1" office:value-type="string"><text:p>Name</text:p></table:table-cell>
    <table:table-cell office:value-type="string"><text:p>Qty</text:p></table:table-cell>
    <table:table-cell office:value-type="string"><text:p>Price</text:p></table:table-cell>
  </table:table-row>
  <table:table-row>
    <table:table-cell office:value-type="string"><text:p>Widget</text:p></table:table-cell>
    <table:table-cell office:value-type="integer" office:value="1,234"><text:p>1,234</text:p></table:table-cell>
    <table:table-cell office:value-type="float" office:value="3.14" table:formula="of:=[.B2]*0"><text:p>3.14</text:p></table:table-cell>
  </table:table-row>
</table:table>
<table:table table:name="Empty"/>
""",
)


def test_hello_document(hello_ods: Path) -> None:
    book = load_ods(hello_ods)

    assert book.sheet_names == ["Sheet1"]
    sheet = book.sheets[0]
    assert (sheet.max_rows, sheet.max_columns) == (1, 1)
    assert sheet.get_value(0, 0) == "Hello"


def test_styled_document(tmp_path: Path) -> None:
    path = write_ods(tmp_path / "styled.ods", ods_entries(STYLED_CONTENT))
    book = SpreadSheet()

    report = read_ods(path, book)

    assert book.sheet_names == ["Data", "Empty"]
    data = book.get_sheet("Data")
    assert data is not None
    assert (data.max_rows, data.max_columns) == (2, 3)
    assert list(data.iter_rows()) == [["Name", "Qty", "Price"], ["Widget", 1234, 3.14]]

    header = data.get_style(0, 0)
    assert header is not None and header.bold is True and header.font_size == 14
    assert header.font_color == Color(0x11, 0x22, 0x33)
    assert data.get_style(1, 1).background_color == Color(255, 255, 0)
    assert data.get_style(1, 2) is None
    assert data.cell(1, 2).formula == "of:=[.B2]*0"

    empty = book.get_sheet("Empty")
    assert empty is not None and (empty.max_rows, empty.max_columns) == (0, 0)

    assert report.manifest.main_path == "/"
    assert report.parts_scanned == ["META-INF/manifest.xml", "content.xml"]
    assert report.failures == []
    assert report.summary["sheet_count"] == 2
    assert report.summary["formula_count"] == 1
    assert report.summary["style_count"] == 3


def test_malformed_part_is_skipped(tmp_path: Path) -> None:
    entries = ods_entries(
        STYLED_CONTENT,
        **{"broken.xml": "<office:document-content><office:body>"},
    )
    book = SpreadSheet()

    report = read_ods(as_container(entries), book)

    assert book.sheet_names == ["Data", "Empty"]
    assert [failure.path for failure in report.failures] == ["broken.xml"]
    assert report.summary["failure_count"] == 1


def test_part_with_unknown_encoding_is_skipped() -> None:
    entries = ods_entries(
        STYLED_CONTENT,
        **{"zz_bad.xml": b'<?xml version="1.0" encoding="bogus-enc"?><a/>'},
    )
    book = SpreadSheet()

    report = read_ods(as_container(entries), book)

    assert book.sheet_names == ["Data", "Empty"]
    assert [failure.path for failure in report.failures] == ["zz_bad.xml"]


def test_part_with_unknown_encoding_in_strict_mode() -> None:
    entries = ods_entries(STYLED_CONTENT, **{"zz_bad.xml": b'<?xml version="1.0" encoding="bogus-enc"?><a/>'})

    with pytest.raises(PartDecodeError) as excinfo:
        load_ods(as_container(entries), options=LoadOptions(strict_parts=True))

    assert excinfo.value.path == "zz_bad.xml"


def test_malformed_part_in_strict_mode(tmp_path: Path) -> None:
    entries = ods_entries(STYLED_CONTENT, **{"broken.xml": "<oops"})

    with pytest.raises(PartDecodeError) as excinfo:
        load_ods(as_container(entries), options=LoadOptions(strict_parts=True))

    assert excinfo.value.path == "broken.xml"


def test_non_xml_and_empty_parts_are_ignored(tmp_path: Path) -> None:
    entries = ods_entries(
        STYLED_CONTENT,
        **{"Thumbnails/thumbnail.png": b"\x89PNG\r\n", "empty.xml": b""},
    )

    report = read_ods(as_container(entries), SpreadSheet())

    assert "Thumbnails/thumbnail.png" not in report.parts_scanned
    assert report.failures == []


def test_unsupported_font_size_aborts_whole_load(tmp_path: Path) -> None:
    styles = '<style:style style:name="ce1"><style:text-properties fo:font-size="12px"/></style:style>'
    path = write_ods(tmp_path / "px.ods", ods_entries(content_xml(styles=styles)))

    with pytest.raises(UnsupportedFeatureError):
        load_ods(path)


def test_convert_to_markdown(hello_ods: Path) -> None:
    markdown = convert_ods_to_markdown(hello_ods)

    assert markdown.startswith("# Spreadsheet")
    assert "## Extraction Summary" in markdown
    assert "## Sheet: Sheet1" in markdown
    assert "| 1 | Hello |" in markdown


def test_cli_writes_markdown(hello_ods: Path, tmp_path: Path) -> None:
    output = tmp_path / "out.md"

    assert main([str(hello_ods), "-o", str(output)]) == 0
    assert "| row | A |" in output.read_text(encoding="utf-8")


def test_cli_reports_invalid_package(tmp_path: Path, capsys) -> None:
    path = write_ods(tmp_path / "bad.ods", {"mimetype": "text/plain"})

    assert main([str(path)]) == 1
    assert "error:" in capsys.readouterr().err
