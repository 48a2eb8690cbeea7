"""
Coil impedance from FEMM 4.2 circuit properties.

FEMM returns the current, voltage drop and flux linkage of a circuit as
complex numbers printed like "0.05-I*0.13". The strings below have the form
the Lua console prints for `mo_getcircuitproperties("coil")`.
"""

import math

from cnum import ComplexNumber


def main() -> None:
    f_hz = 50.0
    current = ComplexNumber.from_femm("2+I*0")
    voltage = ComplexNumber.from_femm("0.3847105-I*12.1178466")
    flux = ComplexNumber.from_femm("0.0385712+I*0.0012248\n")

    Z = voltage / current
    print("Z =", Z)
    print("|Z| =", Z.format_polar("deg", 4, 2))

    # Inductance from flux linkage: L = flux / I
    L = flux / current
    print("L =", L.format_polar("rad", 6, 4), "H")
    print("X_L =", 2 * math.pi * f_hz * L.real, "Ohm")

    # Values can be sent back to FEMM, e.g. as a circuit current.
    print("mi_modifycircprop(\"coil\", 1, %s)" % (current * 1.5).to_femm())


if __name__ == "__main__":
    main()
