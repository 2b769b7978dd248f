from __future__ import annotations

import io
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import BinaryIO
from xml.etree import ElementTree as ET
from zipfile import BadZipFile, ZipFile

from ..errors import FormatError, UnsupportedFeatureError
from ..model import ManifestEntry, ManifestInfo
from .utils import get_attr, has_attr, qname

logger = logging.getLogger(__name__)

ODS_MIMETYPE = "application/vnd.oasis.opendocument.spreadsheet"
MIMETYPE_PATH = "mimetype"
MANIFEST_PATH = "META-INF/manifest.xml"
MANIFEST_ROOT = "manifest:manifest"
ENCRYPTION_MARKER = "manifest:encryption-data"

Source = str | Path | bytes | bytearray | BinaryIO


def unpack(source: Source) -> dict[str, bytes]:
    if isinstance(source, (bytes, bytearray)):
        handle: str | Path | BinaryIO = io.BytesIO(bytes(source))
    else:
        handle = source

    try:
        with ZipFile(handle) as zip_file:
            return {info.filename: zip_file.read(info) for info in zip_file.infolist() if not info.is_dir()}
    except BadZipFile as exc:
        raise FormatError(f"Not a readable ODS archive: {exc}") from exc


def validate(container: Mapping[str, bytes]) -> ManifestInfo:
    _check_mimetype(container)
    manifest_bytes = container.get(MANIFEST_PATH)
    if manifest_bytes is None:
        raise FormatError(f"Missing {MANIFEST_PATH}; this does not look like an ODS file")
    return _read_manifest(manifest_bytes)


def _check_mimetype(container: Mapping[str, bytes]) -> None:
    raw = container.get(MIMETYPE_PATH)
    if raw is None:
        raise FormatError("This file doesn't contain a mimetype entry")

    mimetype = raw.decode("utf-8", errors="replace")
    if mimetype != ODS_MIMETYPE:
        raise FormatError(f"This file doesn't look like an ODS file. Mimetype: {mimetype}")


def _read_manifest(payload: bytes) -> ManifestInfo:
    try:
        root = ET.fromstring(payload)
    except (ET.ParseError, LookupError) as exc:
        raise FormatError(f"Malformed manifest: {exc}") from exc

    if qname(root.tag) != MANIFEST_ROOT:
        raise FormatError("The signature of the manifest is not valid. Is it an ODS file?")

    info = ManifestInfo()
    for elem in root.iter():
        if not isinstance(elem.tag, str) or qname(elem.tag) != "manifest:file-entry":
            continue
        entry = ManifestEntry(
            full_path=get_attr(elem, "manifest:full-path", "") or "",
            media_type=get_attr(elem, "manifest:media-type"),
            has_encryption=_is_encrypted(elem),
        )
        if entry.has_encryption:
            raise UnsupportedFeatureError(
                f"Entry {entry.full_path!r} is encrypted; encrypted packages are not supported"
            )
        if entry.media_type == ODS_MIMETYPE:
            info.main_path = entry.full_path
        info.entries.append(entry)

    logger.debug("Manifest lists %d entries, main path %r", len(info.entries), info.main_path)
    return info


def _is_encrypted(entry: ET.Element) -> bool:
    if has_attr(entry, ENCRYPTION_MARKER):
        return True
    return any(isinstance(child.tag, str) and qname(child.tag) == ENCRYPTION_MARKER for child in entry)
