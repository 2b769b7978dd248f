from __future__ import annotations

from pathlib import Path
from zipfile import ZIP_DEFLATED, ZIP_STORED, ZipFile

ODS_MIMETYPE = "application/vnd.oasis.opendocument.spreadsheet"

DOC_NS = (
    'xmlns:office="urn:oasis:names:tc:opendocument:xmlns:office:1.0" '
    'xmlns:style="urn:oasis:names:tc:opendocument:xmlns:style:1.0" '
    'xmlns:text="urn:oasis:names:tc:opendocument:xmlns:text:1.0" '
    'xmlns:table="urn:oasis:names:tc:opendocument:xmlns:table:1.0" '
    'xmlns:fo="urn:oasis:names:tc:opendocument:xmlns:xsl-fo-compatible:1.0"'
)
MANIFEST_NS = 'xmlns:manifest="urn:oasis:names:tc:opendocument:xmlns:manifest:1.0"'


def manifest_xml(*entries: str) -> str:
    if not entries:
        entries = (
            f'<manifest:file-entry manifest:full-path="/" manifest:media-type="{ODS_MIMETYPE}"/>',
            '<manifest:file-entry manifest:full-path="content.xml" manifest:media-type="text/xml"/>',
        )
    body = "\n  ".join(entries)
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<manifest:manifest {MANIFEST_NS} manifest:version="1.2">
  {body}
</manifest:manifest>
"""


def content_xml(tables: str = "", styles: str = "") -> str:
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<office:document-content {DOC_NS} office:version="1.2">
  <office:automatic-styles>{styles}</office:automatic-styles>
  <office:body>
    <office:spreadsheet>{tables}</office:spreadsheet>
  </office:body>
</office:document-content>
"""


def ods_entries(content: str | None = None, **extra: str | bytes) -> dict[str, str | bytes]:
    entries: dict[str, str | bytes] = {
        "mimetype": ODS_MIMETYPE,
        "META-INF/manifest.xml": manifest_xml(),
    }
    if content is not None:
        entries["content.xml"] = content
    entries.update(extra)
    return entries


def write_ods(path: Path, entries: dict[str, str | bytes]) -> Path:
    with ZipFile(path, "w") as zf:
        for name, payload in entries.items():
            compress = ZIP_STORED if name == "mimetype" else ZIP_DEFLATED
            zf.writestr(name, payload, compress_type=compress)
    return path


def as_container(entries: dict[str, str | bytes]) -> dict[str, bytes]:
    return {name: payload.encode("utf-8") if isinstance(payload, str) else payload for name, payload in entries.items()}
