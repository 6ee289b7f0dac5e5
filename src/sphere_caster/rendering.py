"""
Data structures for the Sphere Caster shading pipeline.
"""
import math
from dataclasses import dataclass, field
from enum import Enum

from sphere_caster import constants
from sphere_caster.vector import Vector3


class CompositeMode(Enum):
    """How a pixel covered by several spheres is painted."""
    OVERWRITE = "overwrite"  # Every hit repaints the pixel in scene order
    NEAREST = "nearest"      # Smallest ray parameter wins


def _to_channel(value):
    """Round half away from zero, then saturate into an 8-bit channel."""
    if math.isnan(value) or value <= 0.0:
        return 0
    if value >= 255.0:
        return 255
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class Color:
    """
    8-bit RGBA color.

    Attributes:
        r, g, b: Color channels in [0, 255]
        alpha: Opacity channel in [0, 255], untouched by brightness scaling
    """
    r: int
    g: int
    b: int
    alpha: int = constants.OPAQUE

    def __post_init__(self):
        """Validate channel types and ranges."""
        for name in ("r", "g", "b", "alpha"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an int, got {type(value).__name__}")
            if not 0 <= value <= 255:
                raise ValueError(f"{name} must be in [0, 255], got {value}")

    @classmethod
    def from_hex(cls, text, alpha=constants.OPAQUE):
        """Parse a '#rrggbb' (or 'rrggbb') string."""
        digits = text[1:] if text.startswith("#") else text
        if len(digits) != 6:
            raise ValueError(f"Expected 6 hex digits, got {text!r}")
        try:
            r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
        except ValueError:
            raise ValueError(f"Invalid hex color {text!r}") from None
        return cls(r, g, b, alpha)

    @property
    def rgb(self):
        return (self.r, self.g, self.b)

    def scale(self, k):
        """
        Scale the color channels by a brightness factor.

        k is expected in [0, 1]. Products are rounded half away from zero and
        saturate at the channel limits; alpha is preserved.
        """
        return Color(_to_channel(self.r * k),
                     _to_channel(self.g * k),
                     _to_channel(self.b * k),
                     self.alpha)

    def __mul__(self, k):
        return self.scale(k)


@dataclass(frozen=True)
class Material:
    albedo: Color


@dataclass(frozen=True)
class Light:
    """
    Point light.

    `brightness` is part of the scene description but does not enter the
    shading term: every light behaves as brightness 1.0.
    """
    origin: Vector3
    brightness: float = field(default=constants.LIGHT_BRIGHTNESS)
