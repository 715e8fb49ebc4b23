"""
Sort Background Colors - Color Domain Model

Canonical color representation for fills, plus the HSV-style descriptor
used to order layers by hue.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from constants import LUMA_WEIGHT_RED, LUMA_WEIGHT_GREEN, LUMA_WEIGHT_BLUE


class Color:
    """RGB color with float components, nominally in [0-1].

    Values are stored exactly as given by the host. Unlike most color
    containers there is no clamping: a host may hand over out-of-range
    components and they are carried through untouched.
    """

    def __init__(self, red: float, green: float, blue: float):
        self._red = float(red)
        self._green = float(green)
        self._blue = float(blue)

    @property
    def red(self) -> float:
        """Red component - READ ONLY"""
        return self._red

    @property
    def green(self) -> float:
        """Green component - READ ONLY"""
        return self._green

    @property
    def blue(self) -> float:
        """Blue component - READ ONLY"""
        return self._blue

    # ========================================
    # Output Methods
    # ========================================

    def to_float3(self) -> List[float]:
        """Convert to [r, g, b] list."""
        return [self._red, self._green, self._blue]

    def to_tuple_float3(self) -> Tuple[float, float, float]:
        """Convert to (r, g, b) tuple."""
        return (self._red, self._green, self._blue)

    def to_rgb255(self) -> List[int]:
        """Convert to RGB uint8 list [0-255], clamped for display.

        Returns:
            List of [r, g, b] in 0-255 range
        """
        return [max(0, min(255, int(round(c * 255)))) for c in self.to_float3()]

    def to_hex(self) -> str:
        """Convert to hex color string: #RRGGBB.

        Returns:
            Hex color string with leading #
        """
        r, g, b = self.to_rgb255()
        return f"#{r:02X}{g:02X}{b:02X}"

    def to_qcolor(self):
        """Convert to PyQt5 QColor object.

        Returns:
            QColor: Qt color object for UI rendering
        """
        from PyQt5.QtGui import QColor
        return QColor(*self.to_rgb255())

    # ========================================
    # Static Factory Methods
    # ========================================

    @staticmethod
    def from_rgb255(r: int, g: int, b: int) -> 'Color':
        """Create Color from RGB uint8 values (0-255)."""
        return Color(r / 255.0, g / 255.0, b / 255.0)

    @staticmethod
    def from_hex(hex_string: str) -> Optional['Color']:
        """Create Color from hex string: #RRGGBB or RRGGBB.

        Args:
            hex_string: Hex color string with or without leading #

        Returns:
            Color object if parse succeeds, None otherwise
        """
        if not isinstance(hex_string, str):
            return None

        hex_string = hex_string.lstrip('#')
        if len(hex_string) != 6:
            return None

        try:
            r = int(hex_string[0:2], 16)
            g = int(hex_string[2:4], 16)
            b = int(hex_string[4:6], 16)
        except ValueError:
            return None
        return Color.from_rgb255(r, g, b)

    # ========================================
    # Equality and Hashing
    # ========================================

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return False
        return self.to_tuple_float3() == other.to_tuple_float3()

    def __hash__(self) -> int:
        return hash(self.to_tuple_float3())

    def __repr__(self) -> str:
        return f"Color({self._red}, {self._green}, {self._blue})"

    def __str__(self) -> str:
        return self.to_hex()


@dataclass(frozen=True)
class HueDescriptor:
    """HSV-style breakdown of a color, as used for hue ordering.

    Attributes:
        hue: Angle on the color wheel, [0, 360) for in-range input
        saturation: chroma / value, 0 for black and greys
        value: Largest channel
        chroma: Largest minus smallest channel
        luma: 0.3*R + 0.59*G + 0.11*B
        red, green, blue: The source channels
    """
    hue: float
    saturation: float
    value: float
    chroma: float
    luma: float
    red: float
    green: float
    blue: float


def hsv_of(color: Color) -> HueDescriptor:
    """Compute the hue descriptor of a color.

    Channels are used as-is; out-of-range input is not clamped and the
    resulting descriptor is unspecified for it. Never raises for finite
    input: black and greys produce hue 0 and saturation 0.

    When two channels tie for the maximum the red branch wins over green,
    and green over blue (exact float comparison).
    """
    r = color.red
    g = color.green
    b = color.blue

    max_c = max(r, g, b)
    min_c = min(r, g, b)
    chroma = max_c - min_c

    value = max_c
    saturation = 0.0
    hue = 0.0

    if value > 0:
        saturation = chroma / value
        if saturation > 0:
            if r == max_c:
                hue = 60 * (((g - min_c) - (b - min_c)) / chroma)
                if hue < 0:
                    hue += 360
                    # tiny negative angles round up to a full turn
                    if hue >= 360:
                        hue -= 360
            elif g == max_c:
                hue = 120 + 60 * (((b - min_c) - (r - min_c)) / chroma)
            elif b == max_c:
                hue = 240 + 60 * (((r - min_c) - (g - min_c)) / chroma)

    luma = LUMA_WEIGHT_RED * r + LUMA_WEIGHT_GREEN * g + LUMA_WEIGHT_BLUE * b

    return HueDescriptor(
        hue=hue,
        saturation=saturation,
        value=value,
        chroma=chroma,
        luma=luma,
        red=r,
        green=g,
        blue=b,
    )
