# -*- coding: utf-8 -*-
"""
Gamut: Rendering intents from sRGB through CIELAB to CMYK
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: gamut_intents.py — Approximate rendering intents in Lab (D50).

Each intent is a fixed affine remap of (L, a, b):

    Intent                  L'              a'          b'
    ---------------------   -------------   ---------   ---------
    Perceptual              0.96 L + 0.9    0.96 a      0.93 b
    Relative colorimetric   0.96 L + 0.9    1.09 a      1.08 b
    Saturation              0.96 L + 1.1    1.09 a      1.08 b
    Absolute colorimetric   1.11 L + 0.2    1.17 a      1.05 b
    Naive                   L               a           b

The coefficients are heuristic.  They illustrate how tone and chroma
handling differ between intents and are NOT an ICC gamut mapping; press
work needs a real CMM with the printer profile.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Final, Tuple

import numpy as np

from gamut_colorengine import ArrayFloat, handle_shapes

__all__ = ["RenderIntent", "INTENT_ORDER", "INTENT_COEFFICIENTS", "IntentTransform"]


class RenderIntent(Enum):
    """Closed set of rendering intents, in presentation order."""
    PERCEPTUAL = "Perceptual"
    RELATIVE_COLORIMETRIC = "Relative colorimetric"
    SATURATION = "Saturation"
    ABSOLUTE_COLORIMETRIC = "Absolute colorimetric"
    NAIVE = "Naive"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> RenderIntent:
        """
        Resolves an intent by member name or label, case-insensitively.

        ``"perceptual"``, ``"RELATIVE_COLORIMETRIC"``, ``"relative-colorimetric"``
        and ``"Relative colorimetric"`` all resolve.

        Raises:
            ValueError: If nothing matches.
        """
        key = name.strip().lower().replace("-", " ").replace("_", " ")
        for intent in cls:
            if key in (intent.label.lower(), intent.name.lower().replace("_", " ")):
                return intent
        known = ", ".join(i.name.lower() for i in cls)
        raise ValueError(f"Unknown rendering intent '{name}'. Expected one of: {known}")


INTENT_ORDER: Final[Tuple[RenderIntent, ...]] = tuple(RenderIntent)

# (gain, offset) per channel, applied as lab * gain + offset
INTENT_COEFFICIENTS: Final[Dict[RenderIntent, Tuple[Tuple[float, float, float], Tuple[float, float, float]]]] = {
    RenderIntent.PERCEPTUAL:            ((0.96, 0.96, 0.93), (0.9, 0.0, 0.0)),
    RenderIntent.RELATIVE_COLORIMETRIC: ((0.96, 1.09, 1.08), (0.9, 0.0, 0.0)),
    RenderIntent.SATURATION:            ((0.96, 1.09, 1.08), (1.1, 0.0, 0.0)),
    RenderIntent.ABSOLUTE_COLORIMETRIC: ((1.11, 1.17, 1.05), (0.2, 0.0, 0.0)),
}


def _affine(gain: Tuple[float, float, float], offset: Tuple[float, float, float]) -> Callable[[ArrayFloat], ArrayFloat]:
    g = np.array(gain, dtype=np.float64)
    o = np.array(offset, dtype=np.float64)

    def transform(lab: ArrayFloat) -> ArrayFloat:
        return lab * g + o
    return transform


def _identity(lab: ArrayFloat) -> ArrayFloat:
    return lab.copy()


_TRANSFORMS: Final[Dict[RenderIntent, Callable[[ArrayFloat], ArrayFloat]]] = {
    intent: _affine(gain, offset) for intent, (gain, offset) in INTENT_COEFFICIENTS.items()
}
_TRANSFORMS[RenderIntent.NAIVE] = _identity


class IntentTransform:
    """Dispatches Lab arrays to the fixed per-intent remaps."""

    @staticmethod
    @handle_shapes
    def apply(lab: ArrayFloat, intent: RenderIntent) -> ArrayFloat:
        """
        Applies a rendering intent to Lab (D50) values.

        Args:
            lab: Lab data, shape (3,) or (N, 3).
            intent: The rendering intent.

        Returns:
            New Lab array; the input is never modified.  ``NAIVE`` returns
            an exact copy.
        """
        return _TRANSFORMS[intent](lab)
