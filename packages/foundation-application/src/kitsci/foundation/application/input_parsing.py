"""Input-parsing boundary for user-entered setting values.

The settings models never validate assignments. Raw text typed by a user is
turned into model values here, and only here:

- Limits accept plain integers, exponent notation (``1e6``) and the
  ``K``/``M``/``G``/``T`` suffixes (powers of 1000). Infinity and negative
  numbers become ``UNLIMITED``.
- Percentages (triggers, consume rates) are clamped to ``[0, 1]``.

``None`` input means the user cancelled the prompt and yields ``None``.
"""

from __future__ import annotations

import math
import re

from kitsci.foundation.domain.exceptions import InvalidSettingValueError
from kitsci.foundation.domain.limits import UNLIMITED, is_unlimited

_SUFFIXES = ("", "K", "M", "G", "T")
_INFINITY_WORDS = frozenset({"inf", "infinity", "∞"})
_NUMBER_PATTERN = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")


def _parse_number(raw: str, field: str) -> float:
    text = raw.strip()
    word = text.lower()
    sign = -1.0 if word.startswith("-") else 1.0
    if (word[1:] if word[:1] in ("+", "-") else word) in _INFINITY_WORDS:
        return sign * math.inf
    if not _NUMBER_PATTERN.match(text):
        raise InvalidSettingValueError(field, f"{raw!r} is not a number", raw=raw)
    return float(text)


def parse_limit(raw: str | None) -> float | None:
    """Parse a user-entered quantity limit.

    Without an exponent or suffix the value is truncated to an integer.

    Args:
        raw: Text as typed by the user, or ``None`` if cancelled.

    Returns:
        The parsed limit, ``UNLIMITED`` for unbounded input, ``None`` if cancelled.

    Raises:
        InvalidSettingValueError: If ``raw`` is not a number.

    Example:
        >>> parse_limit("2.5K")
        2500.0
        >>> parse_limit("-3")
        -1
    """
    if raw is None:
        return None

    text = raw.strip()
    suffix = text[-1:].upper() if text[-1:].upper() in _SUFFIXES[1:] else ""
    base = text[: len(text) - len(suffix)]

    value = _parse_number(base, "max")
    if suffix:
        value *= 1000 ** _SUFFIXES.index(suffix)
    elif "e" not in base.lower() and not math.isinf(value):
        value = float(math.trunc(value))

    if is_unlimited(value):
        return UNLIMITED
    return value


def parse_percentage(raw: str | None, field: str = "trigger") -> float | None:
    """Parse a user-entered fraction and clamp it to ``[0, 1]``.

    Args:
        raw: Text as typed by the user, or ``None`` if cancelled.
        field: Name of the value, for error reporting.

    Returns:
        The clamped value, or ``None`` if cancelled.

    Raises:
        InvalidSettingValueError: If ``raw`` is not a number.

    Example:
        >>> parse_percentage("1.5")
        1.0
    """
    if raw is None:
        return None
    value = _parse_number(raw, field)
    return max(0.0, min(1.0, value))


def render_limit(value: float) -> str:
    """Render a limit for display, using suffixes for large values."""
    if is_unlimited(value):
        return "∞"
    top = len(_SUFFIXES) - 1
    exponent = 0
    while exponent < top and value >= 1000 ** (exponent + 1):
        exponent += 1
    if exponent == 0:
        return f"{value:g}"

    scaled = float(f"{value / 1000**exponent:.3g}")
    # 999_999 rounds to 1000K, which is shown as 1M.
    if scaled >= 1000 and exponent < top:
        exponent += 1
        scaled = float(f"{value / 1000**exponent:.3g}")
    return f"{scaled:g}{_SUFFIXES[exponent]}"


def render_percentage(value: float) -> str:
    """Render a fraction with three decimals."""
    return f"{value:.3f}"
