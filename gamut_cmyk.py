# -*- coding: utf-8 -*-
"""
Gamut: Rendering intents from sRGB through CIELAB to CMYK
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: gamut_cmyk.py — Educational CMYK with gray component removal.

The conversion works in display (gamma-encoded) space:
    r, g, b  = clip(OETF(linear), 0, 1)
    C, M, Y  = 1 - r, 1 - g, 1 - b
    K        = min(C, M, Y)
    C' = (C - K) / (1 - K)   (same for M, Y)

Near-black input (K >= 1 - BLACK_TOLERANCE) short-circuits to pure key
(0, 0, 0, 1) instead of dividing by ~0.

This is device-independent and illustrative only.  It does not consult a
printer profile and makes no claim of press accuracy.
"""

import numpy as np
from typing import Final

from gamut_colorengine import ArrayFloat, ColorSpaceEngine, handle_shapes, shape_guard

__all__ = ["BLACK_TOLERANCE", "CmykCodec"]

BLACK_TOLERANCE: Final[float] = 1e-6

handle_cmyk_shapes = shape_guard(4)


class CmykCodec:
    """Linear RGB <-> CMYK via simple GCR."""

    @staticmethod
    def _from_linear_rgb_raw(linear: ArrayFloat, strict: bool = False) -> ArrayFloat:
        """Raw linear RGB → CMYK.  *linear* must be (N, 3) float64."""
        display = ColorSpaceEngine.linear_to_srgb(linear, clip=True, strict=strict)
        cmy = 1.0 - display
        k = np.min(cmy, axis=-1)

        black = k >= 1.0 - BLACK_TOLERANCE
        # Placeholder denominator on black rows; those rows are overwritten below
        denom = np.where(black, 1.0, 1.0 - k)

        out = np.empty((linear.shape[0], 4), dtype=np.float64)
        out[:, :3] = (cmy - k[:, None]) / denom[:, None]
        out[:, 3] = k
        out[black] = (0.0, 0.0, 0.0, 1.0)
        return out

    @staticmethod
    def _to_rgb_raw(cmyk: ArrayFloat) -> ArrayFloat:
        """Raw CMYK → display RGB.  *cmyk* must be (N, 4) float64."""
        return (1.0 - cmyk[:, :3]) * (1.0 - cmyk[:, 3:4])

    @staticmethod
    @handle_shapes
    def from_linear_rgb(linear: ArrayFloat, strict: bool = False) -> ArrayFloat:
        """
        Converts linear RGB to CMYK.

        Args:
            linear: Linear RGB, shape (3,) or (N, 3).  Values outside [0, 1]
                are clamped after encoding.
            strict: If True, encode with the strict IEEE 754 kernel.

        Returns:
            CMYK in [0, 1], shape (4,) or (N, 4).
        """
        return CmykCodec._from_linear_rgb_raw(linear, strict)

    @staticmethod
    @handle_cmyk_shapes
    def to_rgb(cmyk: ArrayFloat) -> ArrayFloat:
        """
        Converts CMYK back to display RGB.

        r = (1 - C)(1 - K), g = (1 - M)(1 - K), b = (1 - Y)(1 - K)

        Args:
            cmyk: CMYK values, shape (4,) or (N, 4).

        Returns:
            Display RGB, unclipped, shape (3,) or (N, 3).
        """
        return CmykCodec._to_rgb_raw(cmyk)
