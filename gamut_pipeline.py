# -*- coding: utf-8 -*-
"""
Gamut: Rendering intents from sRGB through CIELAB to CMYK
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: gamut_pipeline.py — Hex in, one rendering per intent out.

Forward:
    hex -> sRGB -> linear RGB -> XYZ (D65) -> XYZ (D50) -> Lab (D50)

Per intent:
    Lab -> intent remap -> XYZ (D50) -> XYZ (D65) -> linear RGB (clamped)
        -> CMYK -> display RGB (clamped) -> #rrggbb

``evaluate`` is the only entry point adapters need.  It validates the hex
string before any numeric stage runs and holds no state between calls.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Final, Iterable, Tuple, TypeAlias

import numpy as np

from gamut_cmyk import CmykCodec
from gamut_colorengine import ArrayFloat, ChromaticAdaptation, ColorSpaceEngine
from gamut_intents import INTENT_ORDER, IntentTransform, RenderIntent

__all__ = [
    "InvalidHexError",
    "LabDecomposition",
    "IntentResult",
    "parse_hex",
    "to_hex",
    "format_lab",
    "format_percent",
    "hex_to_lab",
    "render_intent",
    "evaluate_all_intents",
    "evaluate",
]

Triplet: TypeAlias = Tuple[float, float, float]
Quadruplet: TypeAlias = Tuple[float, float, float, float]

_HEX_PATTERN: Final[re.Pattern[str]] = re.compile(r"#?([0-9a-fA-F]{6})")


class InvalidHexError(ValueError):
    """Raised when input is not 6 hex digits with an optional leading '#'."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Invalid hex color {value!r}: expected 6 hex digits, optionally prefixed with '#'")


# ---------------------------------------------------------------------------
# Result records
# ---------------------------------------------------------------------------
@dataclass(slots=True, frozen=True)
class LabDecomposition:
    """Every intermediate of the forward chain for one hex colour."""
    srgb:       Triplet
    linear_rgb: Triplet
    xyz_d65:    Triplet
    xyz_d50:    Triplet
    lab:        Triplet


@dataclass(slots=True, frozen=True)
class IntentResult:
    """One rendered intent: swatch colour, adjusted Lab and the CMYK behind it."""
    intent:      RenderIntent
    display_hex: str
    lab:         Triplet
    cmyk:        Quadruplet

    @property
    def name(self) -> str:
        return self.intent.label


def _as_tuple(arr: ArrayFloat) -> Tuple[float, ...]:
    return tuple(float(v) for v in arr)


# ---------------------------------------------------------------------------
# Parsing & formatting
# ---------------------------------------------------------------------------
def parse_hex(value: Any) -> ArrayFloat:
    """
    Parses ``#rrggbb`` / ``rrggbb`` (any case) into sRGB in [0, 1].

    Surrounding whitespace is ignored.

    Raises:
        InvalidHexError: On any other shape of input.
    """
    if not isinstance(value, str):
        raise InvalidHexError(value)
    match = _HEX_PATTERN.fullmatch(value.strip())
    if match is None:
        raise InvalidHexError(value)
    digits = match.group(1)
    channels = [int(digits[i:i + 2], 16) for i in (0, 2, 4)]
    return np.array(channels, dtype=np.float64) / 255.0


def _round_half_up(values: ArrayFloat) -> ArrayFloat:
    return np.floor(values + 0.5)


def to_hex(rgb: Iterable[float]) -> str:
    """Formats display RGB as ``#rrggbb``, clamping each channel to [0, 1]."""
    rgb_arr = np.clip(np.asarray(tuple(rgb), dtype=np.float64), 0.0, 1.0)
    if rgb_arr.shape != (3,):
        raise ValueError(f"Expected 3 channels, got shape {rgb_arr.shape}")
    return "#" + "".join(f"{int(v):02x}" for v in _round_half_up(rgb_arr * 255.0))


def format_lab(lab: Iterable[float]) -> str:
    """``"L 59.3, a -28.1, b 21.6"``"""
    L, a, b = lab
    return f"L {L:.1f}, a {a:.1f}, b {b:.1f}"


def format_percent(fraction: float) -> int:
    """0..1 fraction -> whole percent, rounded half up."""
    return int(_round_half_up(np.float64(fraction) * 100.0))


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------
def hex_to_lab(value: str, strict: bool = False) -> LabDecomposition:
    """
    Runs the forward chain hex -> Lab (D50).

    Args:
        value: Hex colour string.
        strict: If True, run the strict IEEE 754 kernels.

    Returns:
        LabDecomposition with every intermediate stage.

    Raises:
        InvalidHexError: If ``value`` is not a valid hex colour.
    """
    srgb = parse_hex(value)
    linear = ColorSpaceEngine.srgb_to_linear(srgb, strict=strict)
    xyz_d65 = ColorSpaceEngine.linear_to_xyz(linear)
    xyz_d50 = ChromaticAdaptation.d65_to_d50(xyz_d65)
    lab = ColorSpaceEngine.xyz_to_lab(xyz_d50, strict=strict)
    return LabDecomposition(
        srgb=_as_tuple(srgb),
        linear_rgb=_as_tuple(linear),
        xyz_d65=_as_tuple(xyz_d65),
        xyz_d50=_as_tuple(xyz_d50),
        lab=_as_tuple(lab),
    )


def render_intent(lab: Iterable[float], intent: RenderIntent, strict: bool = False) -> IntentResult:
    """
    Applies ``intent`` to a base Lab (D50) colour and renders it for display.

    Args:
        lab: Base Lab triplet.
        intent: Rendering intent to apply.
        strict: If True, run the strict IEEE 754 kernels.

    Returns:
        IntentResult with the adjusted Lab, CMYK and display hex.
    """
    lab_t = IntentTransform.apply(np.asarray(tuple(lab), dtype=np.float64), intent)
    linear = ColorSpaceEngine.lab_to_linear(lab_t, clip=True, strict=strict)
    cmyk = CmykCodec.from_linear_rgb(linear, strict=strict)
    display = np.clip(CmykCodec.to_rgb(cmyk), 0.0, 1.0)
    return IntentResult(
        intent=intent,
        display_hex=to_hex(display),
        lab=_as_tuple(lab_t),
        cmyk=_as_tuple(cmyk),
    )


def evaluate_all_intents(value: str, intents: Iterable[RenderIntent] = INTENT_ORDER,
                         strict: bool = False) -> Tuple[IntentResult, ...]:
    """
    Converts a hex colour once and renders it under each intent in order.

    Args:
        value: Hex colour string.
        intents: Intents to render (default: all five, in presentation order).
        strict: If True, run the strict IEEE 754 kernels for this call.

    Returns:
        Tuple of IntentResult, one per intent.

    Raises:
        InvalidHexError: Before any computation if ``value`` is invalid.
    """
    base = hex_to_lab(value, strict=strict)
    return tuple(render_intent(base.lab, intent, strict=strict) for intent in intents)


def evaluate(value: str, strict: bool = False) -> Tuple[IntentResult, ...]:
    """Every intent, in presentation order, for one hex colour."""
    return evaluate_all_intents(value, strict=strict)
