from __future__ import annotations

from pathlib import Path

import pytest

from tests.helpers import content_xml, ods_entries, write_ods

HELLO_TABLE = """
<table:table table:name="Sheet1">
  <table:table-column/>
  <table:table-row>
    <table:table-cell office:value-type="string"><text:p>Hello</text:p></table:table-cell>
  </table:table-row>
</table:table>
"""


@pytest.fixture
def hello_ods(tmp_path: Path) -> Path:
    return write_ods(tmp_path / "hello.ods", ods_entries(content_xml(HELLO_TABLE)))
