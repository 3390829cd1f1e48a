#!/usr/bin/env python3
"""
ALB2JSON UNFORMATTERS - Typed Value Conversion
----------------------------------------------
Turns a raw string field into a JSON-representable value.
Every converter takes a single string and either returns the typed value
or raises ValueError describing why the string does not fit.

Lists are split on their delimiter and each item is run through the item
converter, so one bad item fails the whole field.

Author: alb2json Team
Date: 2026-10-19
"""

import math
import re
from typing import Any, Callable, Dict, List, Optional, Tuple

from alb2json.core.models import FieldKind

Unformatter = Callable[[str], Any]

ABSENT_MARKERS = ("", "-")

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)
_INF_WORDS = ("inf", "infinity")

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


class HostPortError(ValueError):
    """Raised when an address cannot be split into host and port."""

    def __init__(self, address: str, reason: str):
        self.address = address
        self.reason = reason
        super().__init__(f"address {address}: {reason}")


def unformat_string(s: str) -> str:
    return s


def unformat_int(s: str) -> Optional[int]:
    if s in ABSENT_MARKERS:
        return None
    if not _INT_RE.fullmatch(s):
        raise ValueError(f"invalid integer {s!r}")
    value = int(s)
    if not INT64_MIN <= value <= INT64_MAX:
        raise ValueError(f"integer {s!r} out of range")
    return value


def unformat_float(s: str) -> Optional[float]:
    if s in ABSENT_MARKERS:
        return None
    if not _FLOAT_RE.fullmatch(s):
        raise ValueError(f"invalid float {s!r}")
    value = float(s)
    if math.isinf(value) and s.lstrip("+-").lower() not in _INF_WORDS:
        raise ValueError(f"float {s!r} out of range")
    return value


def split_host_port(address: str) -> Tuple[str, str]:
    """
    Splits 'host:port', '[v6host]:port' or '[v6host%zone]:port'.
    The port is whatever follows the last colon and may be empty.
    """
    i = address.rfind(":")
    if i < 0:
        raise HostPortError(address, "missing port in address")

    if address.startswith("["):
        end = address.find("]")
        if end < 0:
            raise HostPortError(address, "missing ']' in address")
        if end + 1 == len(address):
            raise HostPortError(address, "missing port in address")
        if end + 1 != i:
            # Either ']' is followed by a colon that is not the last one, or by junk
            if address[end + 1] == ":":
                raise HostPortError(address, "too many colons in address")
            raise HostPortError(address, "missing port in address")
        host = address[1:end]
        open_from, close_from = 1, end + 1
    else:
        host = address[:i]
        if ":" in host:
            raise HostPortError(address, "too many colons in address")
        open_from, close_from = 0, i + 1

    if "[" in address[open_from:]:
        raise HostPortError(address, "unexpected '[' in address")
    if "]" in address[close_from:]:
        raise HostPortError(address, "unexpected ']' in address")

    return host, address[i + 1:]


def unformat_host_port(s: str) -> Dict[str, str]:
    host, port = split_host_port(s)
    return {"host": host, "port": port}


def unformat_list(s: str, delimiter: str, item: Unformatter) -> List[Any]:
    """Splits on delimiter; the absent markers stand for an empty list."""
    if s in ABSENT_MARKERS:
        return []
    return [item(part) for part in s.split(delimiter)]


def unformat_csv(s: str) -> List[Any]:
    return unformat_list(s, ",", unformat_string)


def unformat_host_port_list(s: str) -> List[Any]:
    return unformat_list(s, " ", unformat_host_port)


def unformat_status_code_list(s: str) -> List[Any]:
    return unformat_list(s, " ", unformat_int)


# Registry of conversion strategies, one per schema kind
UNFORMATTERS: Dict[FieldKind, Unformatter] = {
    FieldKind.STRING: unformat_string,
    FieldKind.INTEGER: unformat_int,
    FieldKind.FLOAT: unformat_float,
    FieldKind.HOST_PORT: unformat_host_port,
    FieldKind.COMMA_LIST: unformat_csv,
    FieldKind.HOST_PORT_LIST: unformat_host_port_list,
    FieldKind.INTEGER_LIST: unformat_status_code_list,
}


def unformat(kind: FieldKind, s: str) -> Any:
    """Dispatches a raw value to the converter registered for its kind."""
    return UNFORMATTERS[kind](s)
