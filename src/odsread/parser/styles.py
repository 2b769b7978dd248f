from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from xml.etree import ElementTree as ET

from ..errors import FormatError, UnsupportedFeatureError
from ..model import Color, Style
from .utils import find_first, get_attr, iter_children

logger = logging.getLogger(__name__)

DEFAULT_STYLE_NAME = "Default"


def new_registry() -> dict[str, Style]:
    return {DEFAULT_STYLE_NAME: Style()}


def collect_styles(root: ET.Element, registry: dict[str, Style], warnings: list[str]) -> int:
    automatic = find_first(root, "office:automatic-styles")
    if automatic is None:
        return 0

    count = 0
    for style_elem in iter_children(automatic, "style:style"):
        name = get_attr(style_elem, "style:name")
        if name is None:
            continue
        registry[name] = build_style(style_elem, warnings)
        count += 1
    return count


def build_style(style_elem: ET.Element, warnings: list[str]) -> Style:
    style = Style()
    for props in iter_children(style_elem, "style:text-properties"):
        weight = get_attr(props, "fo:font-weight")
        if weight is not None:
            style.bold = weight == "bold"
        font_style = get_attr(props, "fo:font-style")
        if font_style is not None:
            style.italic = font_style == "italic"
        underline = get_attr(props, "style:text-underline-style")
        if underline is not None:
            style.underline = underline == "solid"
        color = get_attr(props, "fo:color")
        if color is not None:
            style.font_color = _parse_color(color, warnings)
        font_size = get_attr(props, "fo:font-size")
        if font_size is not None:
            style.font_size = parse_font_size(font_size)

    for props in iter_children(style_elem, "style:table-cell-properties"):
        background = get_attr(props, "fo:background-color")
        if background is not None:
            style.background_color = _parse_color(background, warnings)
    return style


def parse_font_size(raw: str) -> int:
    value = raw.strip()
    if not value.endswith("pt"):
        raise UnsupportedFeatureError(f"Font size {raw!r} is not measured in pt")
    try:
        return int(Decimal(value[: -len("pt")]))
    except (InvalidOperation, ValueError, OverflowError):
        raise FormatError(f"Invalid font size: {raw!r}") from None


def _parse_color(raw: str, warnings: list[str]) -> Color | None:
    if raw.strip() == "transparent":
        return None
    try:
        return Color.from_hex(raw)
    except ValueError:
        message = f"Ignoring unparseable color {raw!r}"
        logger.warning(message)
        warnings.append(message)
        return None
