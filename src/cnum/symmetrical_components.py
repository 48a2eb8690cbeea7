from __future__ import annotations

from .complex_number import ComplexNumber

__all__ = ["rotation_operator", "fortescue_inverse_transform"]


def rotation_operator() -> ComplexNumber:
    """
    Returns the operator a = 1∠120° that rotates a phasor by 120 degrees.
    """
    return ComplexNumber.from_polar_deg(1, 120)


def fortescue_inverse_transform(
    I_0: float,
    I_pos: float,
    I_neg: float
) -> tuple[ComplexNumber, ComplexNumber, ComplexNumber]:
    """
    Inverse Fortescue transform: rebuilds the three phase quantities from
    their symmetrical components.

    Parameters
    ----------
    I_0: float
        Zero sequence component.
    I_pos: float
        Positive sequence component.
    I_neg: float
        Negative sequence component.

    Returns
    -------
    tuple[ComplexNumber, ComplexNumber, ComplexNumber]
        I_a:
            Phase 'a' quantity: I_0 + I_pos + I_neg.
        I_b:
            Phase 'b' quantity: I_0 + a² * I_pos + a * I_neg.
        I_c:
            Phase 'c' quantity: I_0 + a * I_pos + a² * I_neg.
    """
    a1 = rotation_operator()
    a2 = a1 * a1
    I_0c = ComplexNumber(I_0, 0)
    I_1c = ComplexNumber(I_pos, 0)
    I_2c = ComplexNumber(I_neg, 0)
    I_a = I_0c + I_1c + I_2c
    I_b = I_0c + (I_1c * a2 + I_2c * a1)
    I_c = I_0c + (I_1c * a1 + I_2c * a2)
    return I_a, I_b, I_c
