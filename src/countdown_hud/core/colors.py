"""Colour translator between the host engine and the display layer.

The host speaks 0–1 floats per channel (``FLinearColor``-style struct
strings, JSON objects, bare ``RRGGBBAA`` hex).  The display speaks CSS
strings.  Both directions are total: every input produces a usable colour.

Host → display detection order (first match wins):

1. Object with ``R``/``G``/``B``   → ``rgba(r, g, b, a)``
2. ``"(R=…,G=…,B=…[,A=…])"``       → ``rgba(r, g, b, a)``
3. 3/6/8 bare hex digits           → ``#`` + digits
4. Anything else                   → passed through unchanged
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict

_log = logging.getLogger(__name__)

DEFAULT_DISPLAY_COLOR = "white"

_STRUCT_FIELD = r"{}=(\d+(?:\.\d*)?|\.\d+)"
_STRUCT_PATTERNS = {
    channel: re.compile(_STRUCT_FIELD.format(channel)) for channel in ("R", "G", "B", "A")
}
_BARE_HEX = re.compile(r"[0-9A-Fa-f]+")
_HEX_LENGTHS = (3, 6, 8)
_NUMBER = re.compile(r"\d+(?:\.\d*)?|\.\d+")


class ComponentColor(BaseModel):
    """Host-native colour: each channel a float in 0–1."""

    model_config = ConfigDict(frozen=True)

    R: float
    G: float
    B: float
    A: float = 1.0


DEFAULT_COMPONENT_COLOR = ComponentColor(R=1.0, G=1.0, B=1.0, A=1.0)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _to_byte(value: Any) -> int:
    """Scale a 0–1 channel to 0–255, rounding half up (0.5 → 128)."""
    try:
        scaled = float(value or 0) * 255 + 0.5
    except (TypeError, ValueError, OverflowError):
        return 0
    if not math.isfinite(scaled):
        return 0
    return math.floor(scaled)


def _format_number(value: float) -> str:
    if value == int(value):
        return str(int(value))
    return repr(value)


def format_rgba(r: int, g: int, b: int, a: Any = 1.0) -> str:
    """Render ``rgba(r, g, b, a)``; integral alpha prints without decimals.

    Integers too large for a float render as ``inf``, like any other
    non-finite alpha.
    """
    if isinstance(a, (int, float)) and not isinstance(a, bool):
        try:
            alpha_value = float(a)
        except OverflowError:
            alpha_value = math.inf
        alpha = _format_number(alpha_value) if math.isfinite(alpha_value) else str(alpha_value)
    else:
        alpha = str(a)
    return f"rgba({r}, {g}, {b}, {alpha})"


def _component_fields(value: Any) -> Mapping[str, Any] | None:
    if isinstance(value, ComponentColor):
        return value.model_dump()
    if isinstance(value, Mapping) and all(k in value for k in ("R", "G", "B")):
        return value
    return None


def _from_components(fields: Mapping[str, Any]) -> str:
    alpha = fields.get("A")
    return format_rgba(
        _to_byte(fields["R"]),
        _to_byte(fields["G"]),
        _to_byte(fields["B"]),
        1.0 if alpha is None else alpha,
    )


def _from_struct_string(text: str) -> str | None:
    matches = {ch: pattern.search(text) for ch, pattern in _STRUCT_PATTERNS.items()}
    if not (matches["R"] and matches["G"] and matches["B"]):
        return None
    alpha = float(matches["A"].group(1)) if matches["A"] else 1.0
    return format_rgba(
        _to_byte(matches["R"].group(1)),
        _to_byte(matches["G"].group(1)),
        _to_byte(matches["B"].group(1)),
        alpha,
    )


# ---------------------------------------------------------------------------
# Host → display
# ---------------------------------------------------------------------------

def to_display_color(value: Any) -> str:
    """Translate a host colour value into a CSS colour string.

    Never raises.  Empty or unsupported values yield
    :data:`DEFAULT_DISPLAY_COLOR`.

    Examples::

        to_display_color({"R": 1, "G": 0, "B": 0})          # 'rgba(255, 0, 0, 1)'
        to_display_color("(R=0.5,G=0.5,B=0.5,A=0.25)")       # 'rgba(128, 128, 128, 0.25)'
        to_display_color("FF0000FF")                         # '#FF0000FF'
        to_display_color("blue")                             # 'blue'
    """
    if value is None or value is False or value == "":
        return DEFAULT_DISPLAY_COLOR

    fields = _component_fields(value)
    if fields is not None:
        return _from_components(fields)

    if not isinstance(value, str):
        return DEFAULT_DISPLAY_COLOR

    text = value.strip()
    if not text:
        return DEFAULT_DISPLAY_COLOR

    if text.startswith("(") and text.endswith(")"):
        parsed = _from_struct_string(text)
        if parsed is not None:
            return parsed

    if len(text) in _HEX_LENGTHS and _BARE_HEX.fullmatch(text):
        return "#" + text

    return text


# ---------------------------------------------------------------------------
# Display → host
# ---------------------------------------------------------------------------

def _from_hex(body: str) -> ComponentColor | None:
    if len(body) not in _HEX_LENGTHS or not _BARE_HEX.fullmatch(body):
        return None
    if len(body) == 3:
        body = "".join(digit * 2 for digit in body)
    r, g, b = (int(body[i:i + 2], 16) / 255 for i in (0, 2, 4))
    alpha = int(body[6:8], 16) / 255 if len(body) == 8 else 1.0
    return ComponentColor(R=r, G=g, B=b, A=alpha)


def _from_functional(text: str) -> ComponentColor | None:
    parts = _NUMBER.findall(text)
    if len(parts) < 3:
        return None
    # Alpha is already 0–1 in CSS functional notation; only RGB are bytes.
    return ComponentColor(
        R=float(parts[0]) / 255,
        G=float(parts[1]) / 255,
        B=float(parts[2]) / 255,
        A=float(parts[3]) if len(parts) > 3 else 1.0,
    )


def to_component_color(value: Any) -> ComponentColor:
    """Translate a CSS colour string back into a host :class:`ComponentColor`.

    Supports ``#RGB``, ``#RRGGBB``, ``#RRGGBBAA``, ``rgb(...)`` and
    ``rgba(...)``.  Named colours are not looked up: they return
    :data:`DEFAULT_COMPONENT_COLOR` and log a warning.
    """
    if value is None or value == "":
        return DEFAULT_COMPONENT_COLOR

    text = value.strip() if isinstance(value, str) else ""
    result: ComponentColor | None = None
    if text.startswith("#"):
        result = _from_hex(text[1:])
    elif text.startswith("rgb"):
        result = _from_functional(text)

    if result is None:
        _log.warning("Cannot convert colour %r to components without a lookup table", value)
        return DEFAULT_COMPONENT_COLOR
    return result
