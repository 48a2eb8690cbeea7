"""
Codec for the complex numbers written by FEMM 4.2 result queries.

FEMM prints a complex value on a single line as `<re><sign>I*<im>`, e.g.
"0.05-I*0.13". Purely real results are printed without the imaginary part
and may be followed by further lines of output.
"""
from __future__ import annotations
import logging
import re

from .formatting import format_number

__all__ = [
    "FormatError",
    "IMAGINARY_MARKER",
    "MULTIPLY",
    "parse_femm_string",
    "format_femm_string"
]


logger = logging.getLogger(__name__)

IMAGINARY_MARKER = "I"
MULTIPLY = "*"

_DECIMAL = re.compile(r"\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*", re.ASCII)


class FormatError(ValueError):
    """Raised when a string does not follow the FEMM complex number format."""

    def __init__(self, text: str, part: str | None = None):
        self.text = text
        self.part = part
        if part is None:
            msg = f"Not a FEMM complex number: {text!r}"
        else:
            msg = f"Invalid number {part!r} in FEMM complex number {text!r}"
        super().__init__(msg)


def _to_float(part: str, text: str) -> float:
    if not _DECIMAL.fullmatch(part):
        logger.debug("rejected numeric part %r of %r", part, text)
        raise FormatError(text, part)
    return float(part)


def parse_femm_string(text: str) -> tuple[float, float]:
    """
    Parses a FEMM 4.2 complex number string.

    Parameters
    ----------
    text: str
        The string returned by FEMM, e.g. "0.05-I*0.13", "-I*0.13" or "3.2".

    Returns
    -------
    tuple[float, float]
        real:
            Real part. Zero when the string starts with the imaginary marker
            (with or without its sign).
        imaginary:
            Imaginary part. Zero when the string holds no imaginary marker;
            in that case only the first line of `text` is read.

    Raises
    ------
    FormatError
        If `text` is not a string, the imaginary marker is not followed by
        "*", or one of its numeric parts is not an ASCII decimal number.
    """
    if not isinstance(text, str):
        raise FormatError(repr(text))
    pos = text.find(IMAGINARY_MARKER)
    if pos == -1:
        first_line = text.split("\n")[0]
        logger.debug("no imaginary marker in %r, reading %r", text, first_line)
        return _to_float(first_line, text), 0.0

    # The character before the marker is its sign; the one after must be "*".
    if text[pos + 1:pos + 2] != MULTIPLY:
        logger.debug("no %r after the imaginary marker in %r", MULTIPLY, text)
        raise FormatError(text)
    re_part = text[:pos - 1] if pos > 0 else ""
    im_part = text[pos + 2:]
    im_sign = -1.0 if pos > 0 and text[pos - 1] == "-" else 1.0
    logger.debug(
        "split %r into real %r and imaginary %r (sign %+d)",
        text, re_part, im_part, int(im_sign)
    )
    real = _to_float(re_part, text) if re_part else 0.0
    imaginary = _to_float(im_part, text) * im_sign
    return real, imaginary


def format_femm_string(real: float, imaginary: float) -> str:
    """
    Returns the FEMM 4.2 representation `<re><sign>I*<|im|>` of a complex
    number, at full precision.
    """
    sign = "+" if imaginary >= 0 else "-"
    return (
        f"{format_number(real)}{sign}{IMAGINARY_MARKER}{MULTIPLY}"
        f"{format_number(abs(imaginary))}"
    )
