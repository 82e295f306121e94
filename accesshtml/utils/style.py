"""Inline ``style`` attribute helpers.

Only declarations written directly on an element are understood. Rules from
``<style>`` blocks or linked stylesheets are never resolved.
"""

from __future__ import annotations

import re

_PX_PER_INCH = 96
_PT_PER_INCH = 72
_SIZE_PATTERN = re.compile(r"^\s*([0-9]*\.?[0-9]+)\s*(px|pt)?\s*$", re.IGNORECASE)


def parse_inline_style(style: str | None) -> dict[str, str]:
    """Parse ``"color: red; font-size: 20px"`` into a property dict.

    Property names are lowercased, values stripped and ``!important`` dropped.
    Later declarations win, as in CSS.
    """
    declarations: dict[str, str] = {}
    if not style:
        return declarations
    for chunk in style.split(";"):
        name, sep, value = chunk.partition(":")
        if not sep:
            continue
        name = name.strip().lower()
        value = value.replace("!important", "").strip()
        if name and value:
            declarations[name] = value
    return declarations


def font_size_px(value: str | None, default: float = 16.0) -> float:
    """Convert a ``font-size`` value in px or pt to pixels.

    Relative units (em, rem, %, keywords) fall back to *default*.
    """
    if not value:
        return default
    match = _SIZE_PATTERN.match(value)
    if match is None:
        return default
    size = float(match.group(1))
    if (match.group(2) or "px").lower() == "pt":
        size = size * _PX_PER_INCH / _PT_PER_INCH
    return size


def is_bold(value: str | None) -> bool:
    """True for ``bold``, ``bolder`` or a numeric weight of at least 700."""
    if not value:
        return False
    v = value.strip().lower()
    if v in ("bold", "bolder"):
        return True
    try:
        return int(v) >= 700
    except ValueError:
        return False
