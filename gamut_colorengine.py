# -*- coding: utf-8 -*-
"""
Gamut: Rendering intents from sRGB through CIELAB to CMYK
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Colour Engine
=============
Stateless colorimetric core for the sRGB -> XYZ -> CIELAB chain and back.

Pipeline (forward):
    sRGB [0..1] -> linear RGB -> XYZ (D65) -> Bradford -> XYZ (D50) -> Lab (D50)

Pipeline (inverse):
    Lab (D50) -> XYZ (D50) -> Bradford -> XYZ (D65) -> linear RGB -> sRGB

Design Notes:
- All matrices are fixed tabulated constants (7 decimals), including the
  inverse Bradford matrix.  Nothing is derived at import time.
- Public transforms accept a single triplet ``(3,)`` or a batch ``(N, 3)``
  and return the same shape (see ``handle_shapes``).
- Transfer functions run as Numba kernels.  Passing ``strict=True`` to a
  transform runs the ``fastmath=False`` variants for that call only.
- Every function is pure.  No result is cached between calls.

References:
    - IEC 61966-2-1:1999 (sRGB Standard)
    - CIE 15:2004 "Colorimetry"
    - Lam, K. M. (1985). "Metamerism and colour constancy" (Bradford CAT).
    - Lindbloom, B. "Chromatic Adaptation", brucelindbloom.com
"""

import functools
import numpy as np
from numba import njit
from typing import Final, TypeAlias, Callable, Any

__all__ = [
    # --- Type Aliases ---
    "ArrayFloat",

    # --- Constants ---
    "REF_WHITE_D65",
    "REF_WHITE_D50",
    "LAB_EPSILON",
    "LAB_KAPPA",

    # --- Configuration ---

    # --- Matrices ---
    "M_SRGB_TO_XYZ",
    "M_XYZ_TO_SRGB",
    "M_BRADFORD",
    "M_BRADFORD_INV",

    # --- Decorators ---
    "handle_shapes",
    "shape_guard",

    # --- Functions ---
    "mat3_mul",

    # --- Classes ---
    "TransferFunction",
    "ChromaticAdaptation",
    "ColorSpaceEngine",
]

# --- Type Aliases ---
ArrayFloat: TypeAlias = np.typing.NDArray[np.floating]

# --- Constants ---

# Standard Illuminants (Y=1.0)
# D65: Average daylight (approx 6500K), the sRGB white
REF_WHITE_D65: Final[ArrayFloat] = np.array([0.95047, 1.00000, 1.08883], dtype=np.float64)
# D50: Horizon daylight (approx 5000K), standard for print viewing (ICC PCS)
REF_WHITE_D50: Final[ArrayFloat] = np.array([0.96422, 1.00000, 0.82521], dtype=np.float64)

# sRGB Matrices, IEC 61966-2-1 (linear RGB <-> XYZ D65)
M_SRGB_TO_XYZ: Final[ArrayFloat] = np.array([
    [ 0.4124564,  0.3575761,  0.1804375],
    [ 0.2126729,  0.7151522,  0.0721750],
    [ 0.0193339,  0.1191920,  0.9503041]
], dtype=np.float64)

M_XYZ_TO_SRGB: Final[ArrayFloat] = np.array([
    [ 3.2404542, -1.5371385, -0.4985314],
    [-0.9692660,  1.8760108,  0.0415560],
    [ 0.0556434, -0.2040259,  1.0572252]
], dtype=np.float64)

# Bradford cone-response ("sharpened" LMS) matrix and its tabulated inverse
M_BRADFORD: Final[ArrayFloat] = np.array([
    [ 0.8951000,  0.2664000, -0.1614000],
    [-0.7502000,  1.7135000,  0.0367000],
    [ 0.0389000, -0.0685000,  1.0296000]
], dtype=np.float64)

M_BRADFORD_INV: Final[ArrayFloat] = np.array([
    [ 0.9869929, -0.1470543,  0.1599627],
    [ 0.4323053,  0.5183603,  0.0492912],
    [-0.0085287,  0.0400428,  0.9684867]
], dtype=np.float64)

# --- Exact Rational Math Constants ---
# CIE 1976 Lab breakpoint: epsilon = (6/29)^3, kappa = (29/3)^3
LAB_EPSILON: Final[float] = 216.0 / 24389.0  # ~0.008856
LAB_KAPPA: Final[float]   = 24389.0 / 27.0   # ~903.296

# sRGB transfer breakpoints
_SRGB_DECODE_THRESHOLD: Final[float] = 0.04045
_SRGB_ENCODE_THRESHOLD: Final[float] = 0.0031308


# =============================================================================
# 1. SHAPE DECORATORS
# =============================================================================

def shape_guard(width: int) -> Callable[[Callable[..., ArrayFloat]], Callable[..., ArrayFloat]]:
    """
    Builds a decorator that normalizes inputs to contiguous float64 (N, width).

    Single vectors are treated as a batch of one internally and unwrapped
    again on the way out:
        - If input is (width,), returns the first row of the result
        - If input is (N, width), returns the full batch
    """
    def decorator(func: Callable[..., ArrayFloat]) -> Callable[..., ArrayFloat]:
        @functools.wraps(func)
        def wrapper(arr: Any, *args: Any, **kwargs: Any) -> ArrayFloat:
            arr_in = np.ascontiguousarray(np.atleast_2d(arr), dtype=np.float64)

            if arr_in.ndim != 2 or arr_in.shape[-1] != width:
                raise ValueError(
                    f"Expected shape ({width},) or (N, {width}), got {np.shape(arr)}"
                )

            res = func(arr_in, *args, **kwargs)

            if np.ndim(arr) == 1:
                return res[0]
            return res
        return wrapper
    return decorator

handle_shapes = shape_guard(3)


# =============================================================================
# 2. LOW-LEVEL MATH KERNELS (Numba Optimized)
# =============================================================================
# NOTE: fastmath=True allows reassociation and relaxed IEEE compliance.
# Results stay bit-identical between calls within one mode.

@njit(cache=True, fastmath=True)
def _fast_decode_srgb(srgb: ArrayFloat) -> ArrayFloat:
    """
    Applies the sRGB EOTF (companding removal).

    Standard: IEC 61966-2-1
    """
    out = np.empty_like(srgb)
    srgb_flat = srgb.ravel()
    out_flat = out.ravel()

    for i in range(srgb.size):
        v = srgb_flat[i]
        if v <= _SRGB_DECODE_THRESHOLD:
            out_flat[i] = v / 12.92
        else:
            out_flat[i] = ((v + 0.055) / 1.055) ** 2.4
    return out

@njit(cache=True, fastmath=True)
def _fast_encode_srgb(linear: ArrayFloat) -> ArrayFloat:
    """
    Applies the sRGB OETF (gamma companding to display space).

    Standard: IEC 61966-2-1
    """
    out = np.empty_like(linear)
    linear_flat = linear.ravel()
    out_flat = out.ravel()

    for i in range(linear.size):
        v = linear_flat[i]
        # IEC 61966-2-1 defines the slope as exactly 12.92
        if v <= _SRGB_ENCODE_THRESHOLD:
            out_flat[i] = 12.92 * v
        else:
            out_flat[i] = 1.055 * (v ** (1.0 / 2.4)) - 0.055
    return out

@njit(cache=True, fastmath=True)
def _xyz_to_lab_f(t: ArrayFloat) -> ArrayFloat:
    """
    Non-linear transfer function f(t) for CIELAB.

    Cube root above epsilon, linear segment below it so the slope stays
    finite near black.
    """
    out = np.empty_like(t)
    t_flat = t.ravel()
    out_flat = out.ravel()

    for i in range(t.size):
        v = t_flat[i]
        if v > LAB_EPSILON:
            out_flat[i] = v ** (1.0 / 3.0)
        else:
            out_flat[i] = (LAB_KAPPA * v + 16.0) / 116.0
    return out

@njit(cache=True, fastmath=True)
def _lab_to_xyz_f_inv(t: ArrayFloat) -> ArrayFloat:
    """
    Inverse non-linear transfer function for CIELAB.

    The branch tests t^3 against epsilon, mirroring the forward test on t.
    """
    out = np.empty_like(t)
    t_flat = t.ravel()
    out_flat = out.ravel()

    for i in range(t.size):
        v = t_flat[i]
        v3 = v * v * v
        if v3 > LAB_EPSILON:
            out_flat[i] = v3
        else:
            out_flat[i] = (116.0 * v - 16.0) / LAB_KAPPA
    return out


# --- Strict IEEE 754 kernel variants (fastmath=False) ---

@njit(cache=True, fastmath=False)
def _fast_decode_srgb_strict(srgb: ArrayFloat) -> ArrayFloat:
    """sRGB EOTF — strict IEEE 754 variant."""
    out = np.empty_like(srgb)
    srgb_flat = srgb.ravel()
    out_flat = out.ravel()
    for i in range(srgb.size):
        v = srgb_flat[i]
        if v <= _SRGB_DECODE_THRESHOLD:
            out_flat[i] = v / 12.92
        else:
            out_flat[i] = ((v + 0.055) / 1.055) ** 2.4
    return out

@njit(cache=True, fastmath=False)
def _fast_encode_srgb_strict(linear: ArrayFloat) -> ArrayFloat:
    """sRGB OETF — strict IEEE 754 variant."""
    out = np.empty_like(linear)
    linear_flat = linear.ravel()
    out_flat = out.ravel()
    for i in range(linear.size):
        v = linear_flat[i]
        if v <= _SRGB_ENCODE_THRESHOLD:
            out_flat[i] = 12.92 * v
        else:
            out_flat[i] = 1.055 * (v ** (1.0 / 2.4)) - 0.055
    return out

@njit(cache=True, fastmath=False)
def _xyz_to_lab_f_strict(t: ArrayFloat) -> ArrayFloat:
    """Lab f(t) — strict IEEE 754 variant."""
    out = np.empty_like(t)
    t_flat = t.ravel()
    out_flat = out.ravel()
    for i in range(t.size):
        v = t_flat[i]
        if v > LAB_EPSILON:
            out_flat[i] = v ** (1.0 / 3.0)
        else:
            out_flat[i] = (LAB_KAPPA * v + 16.0) / 116.0
    return out

@njit(cache=True, fastmath=False)
def _lab_to_xyz_f_inv_strict(t: ArrayFloat) -> ArrayFloat:
    """Lab f_inv(t) — strict IEEE 754 variant."""
    out = np.empty_like(t)
    t_flat = t.ravel()
    out_flat = out.ravel()
    for i in range(t.size):
        v = t_flat[i]
        v3 = v * v * v
        if v3 > LAB_EPSILON:
            out_flat[i] = v3
        else:
            out_flat[i] = (116.0 * v - 16.0) / LAB_KAPPA
    return out


# --- Kernel dispatchers ---
# ``strict`` selects the fastmath=False variant for a single call.

def _decode_srgb(srgb: ArrayFloat, strict: bool = False) -> ArrayFloat:
    if strict:
        return _fast_decode_srgb_strict(srgb)
    return _fast_decode_srgb(srgb)

def _encode_srgb(linear: ArrayFloat, strict: bool = False) -> ArrayFloat:
    if strict:
        return _fast_encode_srgb_strict(linear)
    return _fast_encode_srgb(linear)

def _lab_f(t: ArrayFloat, strict: bool = False) -> ArrayFloat:
    if strict:
        return _xyz_to_lab_f_strict(t)
    return _xyz_to_lab_f(t)

def _lab_f_inv(t: ArrayFloat, strict: bool = False) -> ArrayFloat:
    if strict:
        return _lab_to_xyz_f_inv_strict(t)
    return _lab_to_xyz_f_inv(t)


# =============================================================================
# 3. MATRIX MATH
# =============================================================================

@handle_shapes
def _rows_times_transpose(vec: ArrayFloat, matrix: ArrayFloat) -> ArrayFloat:
    """Row-vector form of M @ v.  *vec* is validated (N, 3) float64."""
    return np.dot(vec, matrix.T)

def mat3_mul(matrix: ArrayFloat, vec: ArrayFloat) -> ArrayFloat:
    """
    Computes M @ v for a fixed 3x3 matrix and one or more 3-vectors.

    A batch is a stack of row vectors, each mapped independently.

    Args:
        matrix: 3x3 matrix.
        vec: Input vector(s), shape (3,) or (N, 3).

    Returns:
        Transformed vector(s), same shape as ``vec``.
    """
    m = np.asarray(matrix, dtype=np.float64)
    if m.shape != (3, 3):
        raise ValueError(f"Expected a 3x3 matrix, got shape {m.shape}")
    return _rows_times_transpose(vec, m)


# =============================================================================
# 4. TRANSFER FUNCTIONS
# =============================================================================

def _elementwise(kernel: Callable[..., ArrayFloat], values: Any, strict: bool = False) -> Any:
    """Runs a 1-D kernel over any shape; scalars in, scalars out."""
    arr = np.ascontiguousarray(np.atleast_1d(np.asarray(values, dtype=np.float64)))
    out = kernel(arr.ravel(), strict).reshape(arr.shape)
    if np.ndim(values) == 0:
        return float(out[0])
    return out

class TransferFunction:
    """
    sRGB companding, applied independently per channel.

    Neither direction clamps.  Callers clamp where display values are
    produced.
    """

    @staticmethod
    def to_linear(srgb: Any, strict: bool = False) -> Any:
        """
        Removes the sRGB transfer function.

        c / 12.92 for c <= 0.04045, else ((c + 0.055) / 1.055) ** 2.4

        Args:
            srgb: Encoded value(s) in [0, 1]; scalar or array of any shape.
            strict: If True, run the strict IEEE 754 kernel.

        Returns:
            Linear-light value(s), same shape as the input.
        """
        return _elementwise(_decode_srgb, srgb, strict)

    @staticmethod
    def to_encoded(linear: Any, strict: bool = False) -> Any:
        """
        Applies the sRGB transfer function.

        12.92 * c for c <= 0.0031308, else 1.055 * c ** (1 / 2.4) - 0.055

        Args:
            linear: Linear-light value(s); scalar or array of any shape.
            strict: If True, run the strict IEEE 754 kernel.

        Returns:
            Encoded display value(s), same shape as the input.
        """
        return _elementwise(_encode_srgb, linear, strict)


# =============================================================================
# 5. CHROMATIC ADAPTATION
# =============================================================================

class ChromaticAdaptation:
    """Handles White Point Adaptation (Bradford Method)."""

    @staticmethod
    def cone_gains(src_white: ArrayFloat, dst_white: ArrayFloat) -> ArrayFloat:
        """
        Per-channel von Kries gains in Bradford cone space.

        Args:
            src_white: Source white point (XYZ).
            dst_white: Destination white point (XYZ).

        Returns:
            (3,) array of dst/src cone responses.
        """
        src_lms = mat3_mul(M_BRADFORD, src_white)
        dst_lms = mat3_mul(M_BRADFORD, dst_white)
        return dst_lms / src_lms

    @staticmethod
    def _adapt_raw(xyz_array: ArrayFloat, src_white: ArrayFloat, dst_white: ArrayFloat) -> ArrayFloat:
        """Raw adaptation.  *xyz_array* must be (N, 3) float64."""
        lms = np.dot(xyz_array, M_BRADFORD.T)
        lms = lms * ChromaticAdaptation.cone_gains(src_white, dst_white)
        return np.dot(lms, M_BRADFORD_INV.T)

    @staticmethod
    @handle_shapes
    def adapt(xyz: ArrayFloat, src_white: ArrayFloat, dst_white: ArrayFloat) -> ArrayFloat:
        """
        Adapts XYZ color(s) from a source to a destination white point.

        The input and both whites are projected into Bradford cone space,
        scaled channel-wise by dst/src and projected back with the inverse
        matrix.  Swapping src and dst undoes the adaptation.

        Args:
            xyz: Input XYZ colors, shape (3,) or (N, 3).
            src_white: Source white point.
            dst_white: Destination white point.

        Returns:
            Adapted XYZ colors.
        """
        return ChromaticAdaptation._adapt_raw(xyz, src_white, dst_white)

    @staticmethod
    def d65_to_d50(xyz: ArrayFloat) -> ArrayFloat:
        """XYZ relative to D65 -> XYZ relative to D50."""
        return ChromaticAdaptation.adapt(xyz, REF_WHITE_D65, REF_WHITE_D50)

    @staticmethod
    def d50_to_d65(xyz: ArrayFloat) -> ArrayFloat:
        """XYZ relative to D50 -> XYZ relative to D65."""
        return ChromaticAdaptation.adapt(xyz, REF_WHITE_D50, REF_WHITE_D65)


# =============================================================================
# 6. COLOR SPACE ENGINE
# =============================================================================

class ColorSpaceEngine:
    """Static utility class for the sRGB / XYZ / CIELAB transforms.

    Core transforms provide a public ``@handle_shapes`` API and an internal
    ``_raw`` fast path that assumes validated (N, 3) float64 input.  The
    convenience pipelines chain the ``_raw`` variants.
    """

    # =====================================================================
    #  Internal _raw fast-path methods  (assume validated (N, 3) float64)
    # =====================================================================

    @staticmethod
    def _linear_to_xyz_raw(linear: ArrayFloat) -> ArrayFloat:
        """Raw linear RGB → XYZ (D65)."""
        return np.dot(linear, M_SRGB_TO_XYZ.T)

    @staticmethod
    def _xyz_to_linear_raw(xyz_array: ArrayFloat, clip: bool = True) -> ArrayFloat:
        """Raw XYZ (D65) → linear RGB."""
        linear = np.dot(xyz_array, M_XYZ_TO_SRGB.T)
        if clip:
            linear = np.clip(linear, 0.0, 1.0)
        return linear

    @staticmethod
    def _xyz_to_lab_raw(xyz_array: ArrayFloat, illuminant: ArrayFloat = REF_WHITE_D50,
                        strict: bool = False) -> ArrayFloat:
        """Raw XYZ → Lab."""
        xyz_norm = np.ascontiguousarray(xyz_array / illuminant)
        f_xyz = _lab_f(xyz_norm, strict)

        out = np.empty_like(xyz_array)
        out[..., 0] = 116.0 * f_xyz[..., 1] - 16.0
        out[..., 1] = 500.0 * (f_xyz[..., 0] - f_xyz[..., 1])
        out[..., 2] = 200.0 * (f_xyz[..., 1] - f_xyz[..., 2])
        return out

    @staticmethod
    def _lab_to_xyz_raw(lab_array: ArrayFloat, illuminant: ArrayFloat = REF_WHITE_D50,
                        strict: bool = False) -> ArrayFloat:
        """Raw Lab → XYZ."""
        L, a, b = lab_array[..., 0], lab_array[..., 1], lab_array[..., 2]

        f = np.empty_like(lab_array)
        f[..., 1] = (L + 16.0) / 116.0
        f[..., 0] = f[..., 1] + a / 500.0
        f[..., 2] = f[..., 1] - b / 200.0

        return _lab_f_inv(f, strict) * illuminant

    # =====================================================================
    #  Public API  (shape-safe wrappers)
    # =====================================================================

    @staticmethod
    @handle_shapes
    def srgb_to_linear(rgb_array: ArrayFloat, strict: bool = False) -> ArrayFloat:
        """
        Converts encoded sRGB [0..1] to linear RGB.

        Args:
            rgb_array: Input sRGB data, shape (N, 3) or (3,).
            strict: If True, run the strict IEEE 754 kernel.

        Returns:
            Linear RGB, unclipped.
        """
        return _decode_srgb(rgb_array, strict)

    @staticmethod
    @handle_shapes
    def linear_to_srgb(linear: ArrayFloat, clip: bool = True, strict: bool = False) -> ArrayFloat:
        """
        Converts linear RGB to encoded sRGB.

        Args:
            linear: Linear RGB data, shape (N, 3) or (3,).
            clip: If True (default), clamps the encoded result to [0, 1].
            strict: If True, run the strict IEEE 754 kernel.

        Returns:
            Encoded sRGB values.
        """
        srgb = _encode_srgb(linear, strict)
        if clip:
            srgb = np.clip(srgb, 0.0, 1.0)
        return srgb

    @staticmethod
    @handle_shapes
    def linear_to_xyz(linear: ArrayFloat) -> ArrayFloat:
        """
        Converts linear RGB to XYZ relative to D65.

        Args:
            linear: Linear RGB data, shape (N, 3) or (3,).

        Returns:
            XYZ (D65).
        """
        return ColorSpaceEngine._linear_to_xyz_raw(linear)

    @staticmethod
    @handle_shapes
    def xyz_to_linear(xyz_array: ArrayFloat, clip: bool = True) -> ArrayFloat:
        """
        Converts XYZ relative to D65 to linear RGB.

        Args:
            xyz_array: XYZ (D65) data, shape (N, 3) or (3,).
            clip: If True (default), clamps linear RGB to [0, 1].

        Returns:
            Linear RGB.
        """
        return ColorSpaceEngine._xyz_to_linear_raw(xyz_array, clip=clip)

    @staticmethod
    @handle_shapes
    def xyz_to_lab(xyz_array: ArrayFloat, illuminant: ArrayFloat = REF_WHITE_D50,
                   strict: bool = False) -> ArrayFloat:
        """
        Converts XYZ to CIELAB (L*a*b*).

        Args:
            xyz_array: Input XYZ data, shape (N, 3) or (3,).
            illuminant: Reference white the XYZ values are relative to
                (default D50).
            strict: If True, run the strict IEEE 754 kernel.

        Returns:
            Lab coordinates.
        """
        return ColorSpaceEngine._xyz_to_lab_raw(xyz_array, illuminant, strict)

    @staticmethod
    @handle_shapes
    def lab_to_xyz(lab_array: ArrayFloat, illuminant: ArrayFloat = REF_WHITE_D50,
                   strict: bool = False) -> ArrayFloat:
        """
        Converts CIELAB to XYZ.

        Args:
            lab_array: Input Lab data, shape (N, 3) or (3,).
            illuminant: Reference white point (default D50).
            strict: If True, run the strict IEEE 754 kernel.

        Returns:
            XYZ coordinates relative to ``illuminant``.
        """
        return ColorSpaceEngine._lab_to_xyz_raw(lab_array, illuminant, strict)

    # =====================================================================
    #  Convenience pipelines
    # =====================================================================

    @staticmethod
    @handle_shapes
    def srgb_to_lab(rgb_array: ArrayFloat, strict: bool = False) -> ArrayFloat:
        """Direct conversion sRGB -> Lab (D50) via Bradford-adapted XYZ."""
        linear = _decode_srgb(rgb_array, strict)
        xyz_d65 = ColorSpaceEngine._linear_to_xyz_raw(linear)
        xyz_d50 = ChromaticAdaptation._adapt_raw(xyz_d65, REF_WHITE_D65, REF_WHITE_D50)
        return ColorSpaceEngine._xyz_to_lab_raw(xyz_d50, strict=strict)

    @staticmethod
    @handle_shapes
    def lab_to_linear(lab_array: ArrayFloat, clip: bool = True, strict: bool = False) -> ArrayFloat:
        """Direct conversion Lab (D50) -> linear RGB, clamped by default."""
        xyz_d50 = ColorSpaceEngine._lab_to_xyz_raw(lab_array, strict=strict)
        xyz_d65 = ChromaticAdaptation._adapt_raw(xyz_d50, REF_WHITE_D50, REF_WHITE_D65)
        return ColorSpaceEngine._xyz_to_linear_raw(xyz_d65, clip=clip)


# =============================================================================
# 7. SELF-TEST
# =============================================================================

if __name__ == "__main__":
    print("Gamut Colour Engine — Self-Test")
    rng = np.random.default_rng(7)

    print("1. Transfer function round trip...")
    c = rng.random(1000)
    err = np.max(np.abs(TransferFunction.to_encoded(TransferFunction.to_linear(c)) - c))
    print(f"   Max Error: {err:.2e} {'[PASS]' if err < 1e-6 else '[FAIL]'}")

    print("2. Bradford round trip (D65 -> D50 -> D65)...")
    xyz = rng.random((1000, 3))
    back = ChromaticAdaptation.d50_to_d65(ChromaticAdaptation.d65_to_d50(xyz))
    err = np.max(np.abs(back - xyz))
    print(f"   Max Error: {err:.2e} {'[PASS]' if err < 1e-6 else '[FAIL]'}")

    print("3. Lab round trip...")
    xyz_d50 = ChromaticAdaptation.d65_to_d50(
        ColorSpaceEngine.linear_to_xyz(ColorSpaceEngine.srgb_to_linear(rng.random((1000, 3))))
    )
    back = ColorSpaceEngine.lab_to_xyz(ColorSpaceEngine.xyz_to_lab(xyz_d50))
    err = np.max(np.abs(back - xyz_d50))
    print(f"   Max Error: {err:.2e} {'[PASS]' if err < 1e-6 else '[FAIL]'}")

    print("4. White point maps to L=100...")
    lab_white = ColorSpaceEngine.srgb_to_lab(np.array([1.0, 1.0, 1.0]))
    print(f"   Lab: {lab_white} {'[PASS]' if abs(lab_white[0] - 100.0) < 1e-3 else '[FAIL]'}")

    print("5. Strict IEEE mode agreement...")
    lab_fast = ColorSpaceEngine.xyz_to_lab(xyz_d50)
    lab_strict = ColorSpaceEngine.xyz_to_lab(xyz_d50, strict=True)
    diff = np.max(np.abs(lab_fast - lab_strict))
    print(f"   Max diff (fast vs strict): {diff:.2e} {'[PASS]' if diff < 1e-10 else '[INFO]'}")
