"""
Keyed-Map Codec — enum-keyed mappings as JSON objects.

A mapping ``{HandKeypoint.Wrist: Point(...)}`` travels as
``{"Wrist": {"x": ..., "y": ...}}``: each key is written under its enum's
canonical symbol and read back through the enum's total ``parse``.

Behavioral Contract:
- decode never fails on a key name; unknown names coerce to the enum's fallback
- encode writes each key under its symbol, verbatim
- decode(encode(m)) == m whenever m holds no fallback key
- distinct unknown names collapse into one fallback entry; the last one read wins
"""

import logging
from typing import Any, Callable, Dict, Mapping, Optional, TypeVar

logger = logging.getLogger(__name__)

K = TypeVar("K")          # A CodedEnum member type
V = TypeVar("V")


def decode(
    data: Mapping[str, Any],
    parse_key: Callable[[Any], K],
    parse_value: Optional[Callable[[Any], V]] = None,
) -> Dict[K, V]:
    """Build an enum-keyed dict from a JSON object."""
    result: Dict[K, V] = {}
    for name, raw in data.items():
        key = parse_key(name)
        value = parse_value(raw) if parse_value is not None else raw
        if key in result and key.symbol != name:
            logger.warning(
                "keyed map: %r collapses onto %s.%s and replaces an earlier entry",
                name, type(key).__name__, key.name,
            )
        result[key] = value
    return result


def encode(
    mapping: Mapping[K, V],
    dump_value: Optional[Callable[[V], Any]] = None,
) -> Dict[str, Any]:
    """Write an enum-keyed mapping as a JSON object keyed by symbol."""
    return {
        key.symbol: dump_value(value) if dump_value is not None else value
        for key, value in mapping.items()
    }
