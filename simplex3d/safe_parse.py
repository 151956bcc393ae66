from __future__ import annotations
"""Coercion helpers for noise configuration values.

Noise parameters often arrive from loosely typed sources (JSON settings, UI
sliders, scripts).  These helpers turn such values into finite numbers and
fall back to a default when that is not possible.  A warning names the
offending option so a bad setting can be traced without the noise query path
ever raising.
"""

from typing import Any, Optional
import math
import numbers
import logging

logger = logging.getLogger(__name__)


def to_int(value: Any, default: int, name: str = "value") -> int:
    """Coerce ``value`` to ``int``.

    ``None`` silently yields ``default``.  Finite floats are floored, strings
    holding an integer or float literal are parsed.  Anything else is logged
    and replaced with ``default``.
    """
    if value is None:
        return default
    if isinstance(value, bool):
        logger.warning("%s: refusing boolean %r, using %r", name, value, default)
        return default
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real) and math.isfinite(value):
        return int(math.floor(value))
    if isinstance(value, str):
        s = value.strip()
        if s and (s.isdigit() or (s[0] in {"+", "-"} and s[1:].isdigit())):
            return int(s)
        f = _parse_float(s)
        if f is not None:
            return int(math.floor(f))
    logger.warning("%s: coercing %r to default %r", name, value, default)
    return default


def to_float(value: Any, default: float, name: str = "value") -> float:
    """Coerce ``value`` to a finite ``float`` or return ``default``."""
    if value is None:
        return default
    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        f = float(value)
        if math.isfinite(f):
            return f
    elif isinstance(value, str):
        f = _parse_float(value.strip())
        if f is not None:
            return f
    logger.warning("%s: coercing %r to default %r", name, value, default)
    return default


def clamp(value: float, lo: float, hi: float) -> float:
    return min(max(value, lo), hi)


def _parse_float(s: str) -> Optional[float]:
    try:
        f = float(s)
    except ValueError:
        return None
    return f if math.isfinite(f) else None
