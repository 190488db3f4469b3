"""Tests for the colorimetric core.

Covers:
    - sRGB transfer functions (round trip, breakpoints, shapes)
    - 3x3 matrix multiply and the fixed constants
    - Bradford adaptation between D65 and D50
    - XYZ <-> Lab (D50)
    - per-call strict IEEE kernels

Run:
    pytest tests/test_colorengine.py -v
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose, assert_array_equal

import gamut_colorengine as ce
from gamut_colorengine import (
    M_BRADFORD,
    M_BRADFORD_INV,
    M_SRGB_TO_XYZ,
    M_XYZ_TO_SRGB,
    REF_WHITE_D50,
    REF_WHITE_D65,
    ChromaticAdaptation,
    ColorSpaceEngine,
    TransferFunction,
    mat3_mul,
)


@pytest.fixture
def rng():
    return np.random.default_rng(20260101)


# ---------------------------------------------------------------------------
# Transfer functions
# ---------------------------------------------------------------------------
def test_gamma_round_trip(rng):
    c = rng.uniform(0.0, 1.0, 1000)
    back = TransferFunction.to_encoded(TransferFunction.to_linear(c))
    assert np.max(np.abs(back - c)) < 1e-6


def test_gamma_endpoints():
    assert TransferFunction.to_linear(0.0) == 0.0
    assert TransferFunction.to_linear(1.0) == pytest.approx(1.0, abs=1e-12)
    assert TransferFunction.to_encoded(0.0) == 0.0
    assert TransferFunction.to_encoded(1.0) == pytest.approx(1.0, abs=1e-12)


def test_gamma_linear_segment():
    assert TransferFunction.to_linear(0.04045) == pytest.approx(0.04045 / 12.92, rel=1e-12)
    assert TransferFunction.to_linear(0.02) == pytest.approx(0.02 / 12.92, rel=1e-12)
    assert TransferFunction.to_encoded(0.0031308) == pytest.approx(12.92 * 0.0031308, rel=1e-12)
    assert TransferFunction.to_encoded(0.001) == pytest.approx(0.01292, rel=1e-12)


def test_gamma_power_segment():
    assert TransferFunction.to_linear(0.5) == pytest.approx(((0.5 + 0.055) / 1.055) ** 2.4, rel=1e-9)
    assert TransferFunction.to_encoded(0.5) == pytest.approx(1.055 * 0.5 ** (1 / 2.4) - 0.055, rel=1e-9)


def test_gamma_does_not_clamp():
    assert TransferFunction.to_encoded(-0.01) < 0.0
    assert TransferFunction.to_encoded(1.5) > 1.0


def test_gamma_preserves_shape():
    values = np.linspace(0.0, 1.0, 10).reshape(2, 5)
    assert TransferFunction.to_linear(values).shape == (2, 5)
    assert isinstance(TransferFunction.to_linear(0.25), float)


# ---------------------------------------------------------------------------
# Matrix math & constants
# ---------------------------------------------------------------------------
def test_mat3_mul_identity():
    v = np.array([0.2, 0.4, 0.6])
    assert_array_equal(mat3_mul(np.eye(3), v), v)


def test_mat3_mul_rows_are_dot_products():
    m = np.arange(9, dtype=float).reshape(3, 3)
    v = np.array([1.0, 2.0, 3.0])
    assert_allclose(mat3_mul(m, v), [8.0, 26.0, 44.0])


def test_mat3_mul_is_matrix_times_vector():
    m = np.array([[1.0, 2.0, 0.0], [0.0, 1.0, 5.0], [3.0, 0.0, 1.0]])
    v = np.array([1.0, -1.0, 2.0])
    assert_allclose(mat3_mul(m, v), m @ v)
    assert_allclose(mat3_mul(m, v), [-1.0, 9.0, 5.0])
    # transposed product differs for a non-symmetric matrix
    assert not np.allclose(mat3_mul(m, v), m.T @ v)


def test_mat3_mul_batch_rows_match_single():
    m = np.array([[1.0, 2.0, 0.0], [0.0, 1.0, 5.0], [3.0, 0.0, 1.0]])
    vecs = np.array([[1.0, -1.0, 2.0], [0.5, 0.0, 0.25]])
    out = mat3_mul(m, vecs)
    assert_allclose(out[0], m @ vecs[0])
    assert_allclose(out[1], m @ vecs[1])


def test_mat3_mul_batch():
    vecs = np.ones((4, 3))
    assert mat3_mul(M_SRGB_TO_XYZ, vecs).shape == (4, 3)


def test_srgb_white_maps_to_d65():
    assert_allclose(mat3_mul(M_SRGB_TO_XYZ, np.ones(3)), REF_WHITE_D65, atol=1e-6)


def test_srgb_matrices_are_inverse():
    assert_allclose(M_XYZ_TO_SRGB @ M_SRGB_TO_XYZ, np.eye(3), atol=1e-6)


def test_bradford_matrices_are_inverse():
    assert_allclose(M_BRADFORD_INV @ M_BRADFORD, np.eye(3), atol=1e-6)


def test_reference_whites():
    assert_array_equal(REF_WHITE_D65, [0.95047, 1.0, 1.08883])
    assert_array_equal(REF_WHITE_D50, [0.96422, 1.0, 0.82521])


def test_wrong_width_raises():
    with pytest.raises(ValueError):
        mat3_mul(np.eye(3), np.ones(4))
    with pytest.raises(ValueError):
        mat3_mul(np.eye(4), np.ones(3))
    with pytest.raises(ValueError):
        ColorSpaceEngine.xyz_to_lab(np.ones((2, 2)))


# ---------------------------------------------------------------------------
# Chromatic adaptation
# ---------------------------------------------------------------------------
def test_adapt_maps_white_to_white():
    assert_allclose(ChromaticAdaptation.d65_to_d50(REF_WHITE_D65), REF_WHITE_D50, atol=1e-6)
    assert_allclose(ChromaticAdaptation.d50_to_d65(REF_WHITE_D50), REF_WHITE_D65, atol=1e-6)


def test_adapt_round_trip(rng):
    xyz = rng.uniform(0.0, 1.0, (500, 3))
    there = ChromaticAdaptation.adapt(xyz, REF_WHITE_D65, REF_WHITE_D50)
    back = ChromaticAdaptation.adapt(there, REF_WHITE_D50, REF_WHITE_D65)
    assert np.max(np.abs(back - xyz)) < 1e-6


def test_adapt_named_instances_match_generic(rng):
    xyz = rng.uniform(0.0, 1.0, 3)
    assert_array_equal(
        ChromaticAdaptation.d65_to_d50(xyz),
        ChromaticAdaptation.adapt(xyz, REF_WHITE_D65, REF_WHITE_D50),
    )


def test_adapt_same_white_is_near_identity(rng):
    xyz = rng.uniform(0.0, 1.0, (10, 3))
    assert_allclose(ChromaticAdaptation.adapt(xyz, REF_WHITE_D65, REF_WHITE_D65), xyz, atol=1e-6)


def test_adapt_keeps_single_vector_shape():
    assert ChromaticAdaptation.d65_to_d50(np.array([0.3, 0.3, 0.3])).shape == (3,)


def test_cone_gains_direction():
    gains = ChromaticAdaptation.cone_gains(REF_WHITE_D65, REF_WHITE_D50)
    inverse = ChromaticAdaptation.cone_gains(REF_WHITE_D50, REF_WHITE_D65)
    assert_allclose(gains * inverse, np.ones(3), rtol=1e-10)
    # D50 is warmer: the short-wavelength cone gain drops
    assert gains[2] < 1.0


# ---------------------------------------------------------------------------
# Lab
# ---------------------------------------------------------------------------
def test_lab_of_d50_white():
    assert_allclose(ColorSpaceEngine.xyz_to_lab(REF_WHITE_D50), [100.0, 0.0, 0.0], atol=1e-9)


def test_lab_of_black():
    assert_allclose(ColorSpaceEngine.xyz_to_lab(np.zeros(3)), [0.0, 0.0, 0.0], atol=1e-9)


def test_lab_linear_segment():
    # Below epsilon, L = kappa * Y
    y = 0.005
    lab = ColorSpaceEngine.xyz_to_lab(np.array([0.0, y, 0.0]))
    assert lab[0] == pytest.approx(ce.LAB_KAPPA * y, rel=1e-9)


def test_lab_round_trip_from_srgb(rng):
    rgb = rng.uniform(0.0, 1.0, (1000, 3))
    xyz_d50 = ChromaticAdaptation.d65_to_d50(
        ColorSpaceEngine.linear_to_xyz(ColorSpaceEngine.srgb_to_linear(rgb))
    )
    back = ColorSpaceEngine.lab_to_xyz(ColorSpaceEngine.xyz_to_lab(xyz_d50))
    assert np.max(np.abs(back - xyz_d50)) < 1e-6


def test_lab_round_trip_near_black():
    xyz = np.array([[0.001, 0.0012, 0.0009], [0.0, 0.0, 0.0]])
    back = ColorSpaceEngine.lab_to_xyz(ColorSpaceEngine.xyz_to_lab(xyz))
    assert_allclose(back, xyz, atol=1e-12)


def test_srgb_to_lab_white_and_black():
    assert_allclose(ColorSpaceEngine.srgb_to_lab(np.ones(3)), [100.0, 0.0, 0.0], atol=1e-3)
    assert_allclose(ColorSpaceEngine.srgb_to_lab(np.zeros(3)), [0.0, 0.0, 0.0], atol=1e-9)


def test_lab_to_linear_clips():
    linear = ColorSpaceEngine.lab_to_linear(np.array([120.0, 0.0, 0.0]))
    assert_array_equal(linear, [1.0, 1.0, 1.0])
    unclipped = ColorSpaceEngine.lab_to_linear(np.array([120.0, 0.0, 0.0]), clip=False)
    assert np.all(unclipped > 1.0)


def test_linear_to_srgb_clip():
    srgb = ColorSpaceEngine.linear_to_srgb(np.array([1.5, -0.2, 0.5]))
    assert srgb[0] == 1.0
    assert srgb[1] == 0.0
    assert 0.0 < srgb[2] < 1.0


# ---------------------------------------------------------------------------
# Strict IEEE kernels
# ---------------------------------------------------------------------------
def test_strict_kernels_run_per_call(rng):
    rgb = rng.uniform(0.0, 1.0, (200, 3))
    fast = ColorSpaceEngine.srgb_to_lab(rgb)
    strict = ColorSpaceEngine.srgb_to_lab(rgb, strict=True)
    assert_allclose(fast, strict, rtol=1e-12, atol=1e-9)
    # the default path is unaffected by a strict call in between
    assert ColorSpaceEngine.srgb_to_lab(rgb).tobytes() == fast.tobytes()


def test_strict_transfer_functions_agree(rng):
    c = rng.uniform(0.0, 1.0, 500)
    assert_allclose(TransferFunction.to_linear(c, strict=True), TransferFunction.to_linear(c), rtol=1e-10)
    assert_allclose(TransferFunction.to_encoded(c, strict=True), TransferFunction.to_encoded(c), rtol=1e-10)


def test_no_global_kernel_switch():
    assert not hasattr(ce, "set_strict_ieee")
    assert not hasattr(ce, "_STRICT_IEEE")
