"""
Phase currents of an unbalanced three-phase load rebuilt from their
zero, positive and negative sequence components, drawn as a phasor diagram.
"""

import matplotlib.pyplot as plt

from cnum import fortescue_inverse_transform


def main() -> None:
    I_0, I_pos, I_neg = 5.0, 100.0, 20.0  # A

    phases = fortescue_inverse_transform(I_0, I_pos, I_neg)
    for name, I in zip("abc", phases):
        print(f"I_{name} = {I.format_polar('deg', 2, 1)} A")

    fig, ax = plt.subplots()
    for name, I, color in zip("abc", phases, ("tab:red", "tab:green", "tab:blue")):
        ax.annotate(
            "", xy=(I.real, I.imaginary), xytext=(0.0, 0.0),
            arrowprops=dict(arrowstyle="->", color=color)
        )
        ax.text(I.real, I.imaginary, f"I_{name}", color=color)
    lim = 1.2 * max(I.magnitude for I in phases)
    ax.set_xlim(-lim, lim)
    ax.set_ylim(-lim, lim)
    ax.set_aspect("equal")
    ax.set_xlabel("Re [A]")
    ax.set_ylabel("Im [A]")
    ax.grid(True)

    plt.show()


if __name__ == "__main__":
    main()
