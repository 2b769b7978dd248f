from __future__ import annotations

from typing import Iterator
from xml.etree import ElementTree as ET

from ..errors import FormatError
from .namespaces import PREFIXES


def qname(tag: str) -> str:
    if tag.startswith("{") and "}" in tag:
        uri, local = tag[1:].split("}", 1)
        prefix = PREFIXES.get(uri)
        if prefix is not None:
            return f"{prefix}:{local}"
    return tag


def get_attr(elem: ET.Element, name: str, default: str | None = None) -> str | None:
    for key, value in elem.attrib.items():
        if qname(key) == name:
            return value
    return default


def has_attr(elem: ET.Element, name: str) -> bool:
    return any(qname(key) == name for key in elem.attrib)


def iter_children(elem: ET.Element, name: str) -> Iterator[ET.Element]:
    for child in list(elem):
        if isinstance(child.tag, str) and qname(child.tag) == name:
            yield child


def find_first(root: ET.Element, name: str) -> ET.Element | None:
    for elem in root.iter():
        if isinstance(elem.tag, str) and qname(elem.tag) == name:
            return elem
    return None


def text_content(elem: ET.Element) -> str:
    return "".join(elem.itertext())


def parse_count(raw: str | None, default: int, *, attr: str) -> int:
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise FormatError(f"Invalid {attr} value: {raw!r}") from None


def index_to_col(index: int) -> str:
    if index < 1:
        raise ValueError("Column index must be >= 1")
    result: list[str] = []
    value = index
    while value > 0:
        value, rem = divmod(value - 1, 26)
        result.append(chr(65 + rem))
    return "".join(reversed(result))
