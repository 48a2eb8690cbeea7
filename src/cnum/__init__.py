from .complex_number import AngleUnit, ComplexNumber
from .femm import FormatError, parse_femm_string, format_femm_string
from .symmetrical_components import rotation_operator, fortescue_inverse_transform

__all__ = [
    "AngleUnit",
    "ComplexNumber",
    "FormatError",
    "parse_femm_string",
    "format_femm_string",
    "rotation_operator",
    "fortescue_inverse_transform"
]
