import math

from orbitalview.geometry.vec import Vec2

magnitudes = {
    -6: "u",
    -3: "m",
    1: "",
    3: "k",
    6: "M",
    9: "G",
    12: "T"
}

def mag_format(x, sig=1):
    if abs(x) < 1e-6:
        return "0"
    elif abs(x) <= 1:
        return f"{x:.2f}"
    elif abs(x) <= 1000:
        return f"{x:.0f}"

    exp = int(math.floor(math.log10(abs(x)) / 3) * 3)
    mant = round(x / (10 ** exp), sig)
    if exp in magnitudes:
        return f"{mant:.{sig}f}{magnitudes[exp]}"

    return f"{mant:.{sig}f}e{exp:+}"


def format_vec(v: Vec2, precision: int = 4) -> str:
    """Debug text for a point, e.g. ``(1.0000, -2.5000)``."""
    return f"({v[0]:.{precision}f}, {v[1]:.{precision}f})"


def format_angles(angles, precision: int = 4) -> str:
    return "[" + ", ".join(f"{t:.{precision}f}" for t in angles) + "]"
