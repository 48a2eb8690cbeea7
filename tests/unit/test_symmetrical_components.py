"""
Tests for the inverse Fortescue transform.

The phase quantities are checked against the symmetrical components matrix

    | 1  1   1  |
    | 1  a²  a  |
    | 1  a   a² |

evaluated independently with numpy.
"""

import math

import numpy as np
import pytest

from cnum.complex_number import ComplexNumber
from cnum.symmetrical_components import fortescue_inverse_transform, rotation_operator


def _fortescue_matrix() -> np.ndarray:
    a = np.exp(2j * np.pi / 3)
    return np.array([
        [1, 1, 1],
        [1, a**2, a],
        [1, a, a**2]
    ])


class TestRotationOperator:
    """Tests for rotation_operator"""

    def test_unit_magnitude_at_120_degrees(self) -> None:
        a = rotation_operator()
        assert a.magnitude == pytest.approx(1.0)
        assert a.angle_deg == pytest.approx(120.0)

    def test_cube_is_one(self) -> None:
        a = rotation_operator()
        z = a * a * a
        assert z.real == pytest.approx(1.0)
        assert z.imaginary == pytest.approx(0.0, abs=1e-12)

    def test_sum_of_powers_is_zero(self) -> None:
        """1 + a + a² = 0"""
        a = rotation_operator()
        z = 1 + a + a * a
        assert z.magnitude == pytest.approx(0.0, abs=1e-12)


class TestFortescueInverseTransform:
    """Tests for fortescue_inverse_transform"""

    def test_returns_three_phases(self) -> None:
        phases = fortescue_inverse_transform(1.0, 2.0, 3.0)
        assert isinstance(phases, tuple)
        assert len(phases) == 3
        assert all(isinstance(p, ComplexNumber) for p in phases)

    def test_zero_input(self) -> None:
        I_a, I_b, I_c = fortescue_inverse_transform(0, 0, 0)
        assert I_a == ComplexNumber(0, 0)
        assert I_b == ComplexNumber(0, 0)
        assert I_c == ComplexNumber(0, 0)

    def test_positive_sequence_only(self) -> None:
        """Balanced system: unit phasors, b lagging a by 120°, c leading by 120°"""
        I_a, I_b, I_c = fortescue_inverse_transform(0, 1, 0)
        for phase in (I_a, I_b, I_c):
            assert phase.magnitude == pytest.approx(1.0)
        assert I_a.angle_deg == pytest.approx(0.0)
        assert I_b.angle_deg - I_a.angle_deg == pytest.approx(-120.0)
        assert I_c.angle_deg - I_a.angle_deg == pytest.approx(120.0)

    def test_negative_sequence_only(self) -> None:
        """Reversed rotation: b leads a by 120°, c lags a by 120°"""
        I_a, I_b, I_c = fortescue_inverse_transform(0, 0, 2)
        for phase in (I_a, I_b, I_c):
            assert phase.magnitude == pytest.approx(2.0)
        assert I_b.angle_deg == pytest.approx(120.0)
        assert I_c.angle_deg == pytest.approx(-120.0)

    def test_zero_sequence_only(self) -> None:
        """Zero sequence: three identical phases"""
        phases = fortescue_inverse_transform(5, 0, 0)
        assert all(p == ComplexNumber(5, 0) for p in phases)

    def test_balanced_phases_sum_to_zero(self) -> None:
        I_a, I_b, I_c = fortescue_inverse_transform(0, 10, 0)
        total = I_a + I_b + I_c
        assert total.magnitude == pytest.approx(0.0, abs=1e-12)

    def test_phase_a_is_exact_sum(self) -> None:
        I_a, _, _ = fortescue_inverse_transform(0.5, 2.0, -1.25)
        assert I_a == ComplexNumber(0.5 + 2.0 + -1.25, 0)

    @pytest.mark.parametrize(
        "components",
        [(0.0, 1.0, 0.0), (1.0, 2.0, 3.0), (-0.3, 120.0, 15.5), (100.0, -40.0, 2.0)],
    )
    def test_matches_matrix_form(self, components: tuple[float, float, float]) -> None:
        expected = _fortescue_matrix() @ np.array(components, dtype=complex)
        phases = fortescue_inverse_transform(*components)
        for phase, value in zip(phases, expected):
            assert complex(phase) == pytest.approx(complex(value), abs=1e-9)

    def test_unbalanced_currents(self) -> None:
        """I0 = 1 A, I1 = 10 A, I2 = 2 A"""
        I_a, I_b, I_c = fortescue_inverse_transform(1, 10, 2)
        assert I_a == ComplexNumber(13, 0)
        # |1 + 10a² + 2a| = |(1 - 6) + j(-10 + 2)·√3/2|
        assert I_b.magnitude == pytest.approx(math.hypot(-5.0, -8 * math.sqrt(3) / 2))
        assert I_c.magnitude == pytest.approx(math.hypot(-5.0, 8 * math.sqrt(3) / 2))
