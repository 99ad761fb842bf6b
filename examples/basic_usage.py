"""Basic Chromalite usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from chromalite import (
    Color,
    ColorError,
    hex_to_rgb,
    rgb_to_hsv,
    hsv_to_rgb,
    rgb_to_string,
)


def demonstrate_conversions() -> None:
    # Stateless conversions between hex, RGB and HSV.
    rgb = hex_to_rgb("#f80")
    print("hex -> RGB:", rgb)

    hsv = rgb_to_hsv(*rgb)
    print("RGB -> HSV:", hsv)
    print("HSV -> RGB:", hsv_to_rgb(*hsv))
    print("as string:", rgb_to_string(rgb))


def demonstrate_color() -> None:
    # One object, three synchronized views.
    accent = Color(255, 128, 0)
    print("accent:", accent.hex, accent.rgb, accent.hsv)

    accent.hue = 200
    print("rotated hue:", accent.hex)

    accent.value = 40
    print("darkened:", accent.hex, accent.to_string())

    print("complement:", accent.complement())

    try:
        accent.hex = "#12345z"
    except ColorError as exc:
        print("rejected:", exc, "- still", accent.hex)


if __name__ == "__main__":
    demonstrate_conversions()
    demonstrate_color()
