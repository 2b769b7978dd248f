from .api import convert_ods_to_markdown, load_ods, read_ods
from .errors import FormatError, OdsError, PartDecodeError, UnsupportedFeatureError
from .model import Cell, Color, LoadOptions, LoadReport, Sheet, SpreadSheet, Style

__all__ = [
    "Cell",
    "Color",
    "FormatError",
    "LoadOptions",
    "LoadReport",
    "OdsError",
    "PartDecodeError",
    "Sheet",
    "SpreadSheet",
    "Style",
    "UnsupportedFeatureError",
    "convert_ods_to_markdown",
    "load_ods",
    "read_ods",
]
