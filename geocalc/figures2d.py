"""Area and perimeter of plane figures.

Every function checks its arguments and raises ValueError with a
descriptive message when they do not describe a valid figure.
"""

from __future__ import annotations

import math

__all__ = [
    "triangle_area",
    "triangle_perimeter",
    "parallelogram_area",
    "parallelogram_perimeter",
    "square_area",
    "square_perimeter",
    "rectangle_area",
    "rectangle_perimeter",
    "rhombus_area",
    "rhombus_perimeter",
    "trapezoid_area",
    "trapezoid_perimeter",
    "circle_area",
    "circle_perimeter",
    "regular_polygon_area",
    "regular_polygon_perimeter",
]


def _require_positive(message: str, *values: float) -> None:
    if any(value <= 0 for value in values):
        raise ValueError(message)


def triangle_area(base: float, height: float) -> float:
    """Area of a triangle from its base and height."""
    _require_positive("La base y la altura deben ser mayores que cero.", base, height)
    return base * height / 2


def triangle_perimeter(side1: float, side2: float, side3: float) -> float:
    """Perimeter of a triangle; the sides must satisfy the triangle inequality."""
    _require_positive("Todos los lados deben ser mayores que cero.", side1, side2, side3)
    if side1 + side2 <= side3 or side1 + side3 <= side2 or side2 + side3 <= side1:
        raise ValueError("Los lados no forman un triángulo válido.")
    return side1 + side2 + side3


def parallelogram_area(base: float, height: float) -> float:
    """Area of a parallelogram from its base and height."""
    _require_positive("La base y la altura deben ser mayores que cero.", base, height)
    return base * height


def parallelogram_perimeter(base: float, side: float) -> float:
    """Perimeter of a parallelogram from its base and slanted side."""
    _require_positive("La base y el lado deben ser mayores que cero.", base, side)
    return 2 * (base + side)


def square_area(side: float) -> float:
    """Area of a square."""
    _require_positive("El lado debe ser mayor que cero.", side)
    return side * side


def square_perimeter(side: float) -> float:
    """Perimeter of a square."""
    _require_positive("El lado debe ser mayor que cero.", side)
    return 4 * side


def rectangle_area(base: float, height: float) -> float:
    """Area of a rectangle."""
    _require_positive("La base y la altura deben ser mayores que cero.", base, height)
    return base * height


def rectangle_perimeter(base: float, height: float) -> float:
    """Perimeter of a rectangle."""
    _require_positive("La base y la altura deben ser mayores que cero.", base, height)
    return 2 * (base + height)


def rhombus_area(major_diagonal: float, minor_diagonal: float) -> float:
    """Area of a rhombus from its two diagonals."""
    _require_positive(
        "Las diagonales deben ser mayores que cero.", major_diagonal, minor_diagonal
    )
    return major_diagonal * minor_diagonal / 2


def rhombus_perimeter(side: float) -> float:
    """Perimeter of a rhombus."""
    _require_positive("El lado debe ser mayor que cero.", side)
    return 4 * side


def trapezoid_area(major_base: float, minor_base: float, height: float) -> float:
    """Area of a trapezoid from both bases and its height."""
    _require_positive(
        "Las bases y la altura deben ser mayores que cero.",
        major_base,
        minor_base,
        height,
    )
    return (major_base + minor_base) * height / 2


def trapezoid_perimeter(
    major_base: float, minor_base: float, side1: float, side2: float
) -> float:
    """Perimeter of a trapezoid from its four sides."""
    _require_positive(
        "Todas las longitudes deben ser mayores que cero.",
        major_base,
        minor_base,
        side1,
        side2,
    )
    return major_base + minor_base + side1 + side2


def circle_area(radius: float) -> float:
    """Area of a circle."""
    _require_positive("El radio debe ser mayor que cero.", radius)
    return math.pi * radius * radius


def circle_perimeter(radius: float) -> float:
    """Circumference of a circle."""
    _require_positive("El radio debe ser mayor que cero.", radius)
    return 2 * math.pi * radius


def _require_polygon(num_sides: int) -> None:
    if num_sides < 3:
        raise ValueError("El número de lados debe ser al menos 3.")


def regular_polygon_area(num_sides: int, side: float, apothem: float) -> float:
    """Area of a regular polygon from its side count, side length and apothem."""
    _require_polygon(num_sides)
    _require_positive("El lado y la apotema deben ser mayores que cero.", side, apothem)
    return num_sides * side * apothem / 2


def regular_polygon_perimeter(num_sides: int, side: float) -> float:
    """Perimeter of a regular polygon."""
    _require_polygon(num_sides)
    _require_positive("El lado debe ser mayor que cero.", side)
    return num_sides * side