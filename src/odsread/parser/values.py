from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation

from ..model import CellValue

# Fixed en_US conventions: "," groups digits, "." separates decimals.
_NUMBER_PREFIX_RE = re.compile(
    r"-?(?:\d[\d,]*(?:\.\d*)?|\.\d+)(?:E-?\d+)?",
)
_INT64_MIN = Decimal(-(2**63))
_INT64_MAX = Decimal(2**63 - 1)


def parse_number(raw: str) -> Decimal | None:
    """Parse the longest numeric prefix of ``raw`` under the fixed locale.

    Returns ``None`` when ``raw`` does not start with a number.
    """
    match = _NUMBER_PREFIX_RE.match(raw)
    if not match:
        return None
    token = match.group(0).replace(",", "")
    if token.endswith("."):
        token = token[:-1]
    try:
        return Decimal(token)
    except InvalidOperation:
        return None


def coerce(raw: str, value_type: str) -> CellValue:
    if value_type not in {"integer", "float"}:
        return raw

    number = parse_number(raw)
    if number is None:
        return raw
    if value_type == "integer":
        return int(max(_INT64_MIN, min(_INT64_MAX, number)))
    return float(number)
