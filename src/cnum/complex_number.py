from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from numbers import Real
import math

import numpy as np

from .femm import parse_femm_string, format_femm_string
from .formatting import DEFAULT_DECIMALS, format_rounded

__all__ = ["AngleUnit", "ComplexNumber"]


class AngleUnit(Enum):
    DEGREES = "deg"
    RADIANS = "rad"

    @classmethod
    def parse(cls, unit: AngleUnit | str) -> AngleUnit:
        """Accepts an AngleUnit member or one of the strings 'deg', 'rad'."""
        if isinstance(unit, cls):
            return unit
        try:
            return cls(unit)
        except ValueError:
            raise ValueError(
                f"Unknown angle unit {unit!r}. Must be 'deg' or 'rad'."
            ) from None


def _divide(num: float, den: float) -> float:
    # x / 0 -> +-inf, 0 / 0 -> nan, overflow -> +-inf (IEEE-754), no
    # ZeroDivisionError and no RuntimeWarning
    with np.errstate(all="ignore"):
        return float(np.float64(num) / np.float64(den))


def _is_scalar(value) -> bool:
    return isinstance(value, Real)


@dataclass(frozen=True, eq=False)
class ComplexNumber:
    """
    Immutable complex number in rectangular form.

    Arithmetic operators (+, -, *, /) accept another ComplexNumber or a real
    scalar on either side and always return a new ComplexNumber. Division by
    zero does not raise: the components become inf or nan as they would in
    IEEE-754 arithmetic.

    Equality is exact on both components, without tolerance.

    Attributes
    ----------
    real: float
        Real part.
    imaginary: float
        Imaginary part.
    """
    real: float
    imaginary: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "real", float(self.real))
        object.__setattr__(self, "imaginary", float(self.imaginary))

    # --------------------------------------------------------------------------
    # Factories
    # --------------------------------------------------------------------------
    @classmethod
    def from_rectangular(cls, real: float, imaginary: float) -> ComplexNumber:
        return cls(real, imaginary)

    @classmethod
    def from_polar(
        cls,
        magnitude: float,
        phase: float,
        unit: AngleUnit | str
    ) -> ComplexNumber:
        """
        Returns a new complex number from polar coordinates.

        Parameters
        ----------
        magnitude: float
            Magnitude of the number. A negative magnitude is not rejected: it
            yields the number rotated by 180°.
        phase: float
            Phase angle, expressed in `unit`.
        unit: AngleUnit | str
            AngleUnit.DEGREES ('deg') or AngleUnit.RADIANS ('rad').
        """
        if AngleUnit.parse(unit) is AngleUnit.DEGREES:
            phase_rad = phase * math.pi / 180
        else:
            phase_rad = phase
        return cls(magnitude * math.cos(phase_rad), magnitude * math.sin(phase_rad))

    @classmethod
    def from_polar_deg(cls, magnitude: float, phase: float) -> ComplexNumber:
        return cls.from_polar(magnitude, phase, AngleUnit.DEGREES)

    @classmethod
    def from_polar_rad(cls, magnitude: float, phase: float) -> ComplexNumber:
        return cls.from_polar(magnitude, phase, AngleUnit.RADIANS)

    @classmethod
    def from_femm(cls, text: str) -> ComplexNumber:
        """
        Returns a new complex number from the (1-line) string FEMM 4.2 prints
        for a complex result, e.g. "0.05-I*0.13".

        Raises
        ------
        FormatError
            If the string does not hold valid decimal numbers.
        """
        return cls(*parse_femm_string(text))

    @classmethod
    def from_complex(cls, value: complex) -> ComplexNumber:
        value = complex(value)
        return cls(value.real, value.imag)

    # --------------------------------------------------------------------------
    # Polar coordinates
    # --------------------------------------------------------------------------
    @property
    def magnitude(self) -> float:
        return math.sqrt(self.real * self.real + self.imaginary * self.imaginary)

    @property
    def mag(self) -> float:
        return self.magnitude

    def angle(self, unit: AngleUnit | str) -> float:
        """
        Returns the phase angle of the number.

        When the real part is exactly zero the angle is 0 if the imaginary
        part is not negative and pi (180°) if it is negative. Purely imaginary
        numbers therefore do not get the +-pi/2 that atan2() would return.
        """
        if self.real == 0:
            angle_rad = math.pi if self.imaginary < 0 else 0.0
        else:
            angle_rad = math.atan2(self.imaginary, self.real)
        if AngleUnit.parse(unit) is AngleUnit.DEGREES:
            return angle_rad * 180 / math.pi
        return angle_rad

    @property
    def angle_rad(self) -> float:
        return self.angle(AngleUnit.RADIANS)

    @property
    def angle_deg(self) -> float:
        return self.angle(AngleUnit.DEGREES)

    # --------------------------------------------------------------------------
    # String representations
    # --------------------------------------------------------------------------
    def to_string(self) -> str:
        """Returns the "a+jb" string, both parts rounded to 8 decimals."""
        sign = "+" if self.imaginary >= 0 else "-"
        return (
            f"{format_rounded(self.real, DEFAULT_DECIMALS)}{sign}j"
            f"{format_rounded(abs(self.imaginary), DEFAULT_DECIMALS)}"
        )

    def to_femm(self) -> str:
        """Returns the "a+I*b" string FEMM 4.2 understands (full precision)."""
        return format_femm_string(self.real, self.imaginary)

    def format_polar(
        self,
        unit: AngleUnit | str,
        magnitude_decimals: int = DEFAULT_DECIMALS,
        angle_decimals: int = DEFAULT_DECIMALS
    ) -> str:
        """
        Returns the "|c|∠arg(c)" string.

        Parameters
        ----------
        unit: AngleUnit | str
            Unit of the angle. In degrees the angle is followed by "°", in
            radians it has no suffix.
        magnitude_decimals: int
            Number of decimal places the magnitude is rounded to.
        angle_decimals: int
            Number of decimal places the angle is rounded to.
        """
        unit = AngleUnit.parse(unit)
        suffix = "°" if unit is AngleUnit.DEGREES else ""
        return (
            f"{format_rounded(self.magnitude, magnitude_decimals)}∠"
            f"{format_rounded(self.angle(unit), angle_decimals)}{suffix}"
        )

    def __str__(self) -> str:
        return self.to_string()

    def __complex__(self) -> complex:
        return complex(self.real, self.imaginary)

    def __abs__(self) -> float:
        return self.magnitude

    # --------------------------------------------------------------------------
    # Comparison
    # --------------------------------------------------------------------------
    def __eq__(self, other) -> bool:
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return self.real == other.real and self.imaginary == other.imaginary

    def __hash__(self) -> int:
        return hash((self.real, self.imaginary))

    # --------------------------------------------------------------------------
    # Arithmetic
    # --------------------------------------------------------------------------
    def __add__(self, other: ComplexNumber | float) -> ComplexNumber:
        if isinstance(other, ComplexNumber):
            return ComplexNumber(self.real + other.real, self.imaginary + other.imaginary)
        if _is_scalar(other):
            other = float(other)
            return ComplexNumber(self.real + other, self.imaginary)
        return NotImplemented

    def __radd__(self, other: float) -> ComplexNumber:
        if _is_scalar(other):
            other = float(other)
            return ComplexNumber(other + self.real, self.imaginary)
        return NotImplemented

    def __sub__(self, other: ComplexNumber | float) -> ComplexNumber:
        if isinstance(other, ComplexNumber):
            return ComplexNumber(self.real - other.real, self.imaginary - other.imaginary)
        if _is_scalar(other):
            other = float(other)
            return ComplexNumber(self.real - other, self.imaginary)
        return NotImplemented

    def __rsub__(self, other: float) -> ComplexNumber:
        if _is_scalar(other):
            other = float(other)
            return ComplexNumber(other - self.real, -self.imaginary)
        return NotImplemented

    def __mul__(self, other: ComplexNumber | float) -> ComplexNumber:
        if isinstance(other, ComplexNumber):
            return ComplexNumber(
                self.real * other.real - self.imaginary * other.imaginary,
                self.real * other.imaginary + self.imaginary * other.real
            )
        if _is_scalar(other):
            other = float(other)
            return ComplexNumber(other * self.real, other * self.imaginary)
        return NotImplemented

    def __rmul__(self, other: float) -> ComplexNumber:
        if _is_scalar(other):
            other = float(other)
            return ComplexNumber(other * self.real, other * self.imaginary)
        return NotImplemented

    def __truediv__(self, other: ComplexNumber | float) -> ComplexNumber:
        if isinstance(other, ComplexNumber):
            den = other.real * other.real + other.imaginary * other.imaginary
            return ComplexNumber(
                _divide(self.real * other.real + self.imaginary * other.imaginary, den),
                _divide(self.imaginary * other.real - self.real * other.imaginary, den)
            )
        if _is_scalar(other):
            other = float(other)
            # not reduced to real / other: keeps the sign of zero and the
            # nan/inf pattern when other is 0 or subnormal
            den = other * other
            return ComplexNumber(
                _divide(self.real * other, den),
                _divide(self.imaginary * other, den)
            )
        return NotImplemented

    def __rtruediv__(self, other: float) -> ComplexNumber:
        if _is_scalar(other):
            other = float(other)
            den = self.real * self.real + self.imaginary * self.imaginary
            return ComplexNumber(
                _divide(other * self.real, den),
                _divide(-(other * self.imaginary), den)
            )
        return NotImplemented
