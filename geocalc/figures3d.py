"""Surface area and volume of solid figures.

Every function raises ValueError when a dimension is not positive.
"""

from __future__ import annotations

import math

__all__ = [
    "cube_surface",
    "cube_volume",
    "cuboid_surface",
    "cuboid_volume",
    "cylinder_surface",
    "cylinder_volume",
    "sphere_surface",
    "sphere_volume",
    "cone_surface",
    "cone_volume",
]


def _require_positive(message: str, *values: float) -> None:
    if any(value <= 0 for value in values):
        raise ValueError(message)


def cube_surface(side: float) -> float:
    """Total surface area of a cube."""
    _require_positive("El lado debe ser mayor que cero.", side)
    return 6 * side * side


def cube_volume(side: float) -> float:
    """Volume of a cube."""
    _require_positive("El lado debe ser mayor que cero.", side)
    return side * side * side


def cuboid_surface(length: float, width: float, height: float) -> float:
    """Total surface area of a cuboid."""
    _require_positive(
        "Todas las dimensiones deben ser mayores que cero.", length, width, height
    )
    return 2 * (length * width + length * height + width * height)


def cuboid_volume(length: float, width: float, height: float) -> float:
    """Volume of a cuboid."""
    _require_positive(
        "Todas las dimensiones deben ser mayores que cero.", length, width, height
    )
    return length * width * height


def cylinder_surface(radius: float, height: float) -> float:
    """Total surface area of a right cylinder."""
    _require_positive("El radio y la altura deben ser mayores que cero.", radius, height)
    return 2 * math.pi * radius * (radius + height)


def cylinder_volume(radius: float, height: float) -> float:
    """Volume of a right cylinder."""
    _require_positive("El radio y la altura deben ser mayores que cero.", radius, height)
    return math.pi * radius * radius * height


def sphere_surface(radius: float) -> float:
    """Surface area of a sphere."""
    _require_positive("El radio debe ser mayor que cero.", radius)
    return 4 * math.pi * radius * radius


def sphere_volume(radius: float) -> float:
    """Volume of a sphere."""
    _require_positive("El radio debe ser mayor que cero.", radius)
    return (4.0 / 3.0) * math.pi * radius * radius * radius


def cone_surface(radius: float, slant_height: float) -> float:
    """Total surface area of a right circular cone from radius and slant height."""
    _require_positive(
        "El radio y la generatriz deben ser mayores que cero.", radius, slant_height
    )
    return math.pi * radius * (radius + slant_height)


def cone_volume(radius: float, height: float) -> float:
    """Volume of a right circular cone."""
    _require_positive("El radio y la altura deben ser mayores que cero.", radius, height)
    return math.pi * radius * radius * height / 3