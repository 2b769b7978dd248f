from __future__ import annotations


class OdsError(Exception):
    """Base class for errors raised while decoding an ODS package."""


class FormatError(OdsError):
    """The package is not a well-formed ODS spreadsheet."""


class UnsupportedFeatureError(OdsError):
    """The package uses a feature this reader does not handle (encryption, non-pt font sizes)."""


class PartDecodeError(OdsError):
    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path
        self.message = message
