"""Interactive calculator for plane and solid figures."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from geocalc import figures2d as f2
from geocalc import figures3d as f3

ERROR_RESULT = -1.0


class _BadInput(Exception):
    """Raised when a typed value cannot be read as a number."""


@dataclass(frozen=True)
class _Measure:
    heading: str
    prompts: tuple[tuple[str, type], ...]
    compute: Callable[..., float]

    def run(self) -> float:
        print(self.heading)
        values = [_read(prompt, kind) for prompt, kind in self.prompts]
        try:
            return self.compute(*values)
        except ValueError as exc:
            print(f"Error: {exc}")
            return ERROR_RESULT


@dataclass(frozen=True)
class _Figure:
    first: _Measure
    second: _Measure
    template: str

    def run(self) -> None:
        first = self.first.run()
        second = self.second.run()
        print(self.template.format(first, second))


def _read(prompt: str, kind: type) -> float:
    text = input(prompt).strip()
    try:
        return kind(text)
    except ValueError as exc:
        raise _BadInput(text) from exc


def _f(label: str) -> tuple[str, type]:
    return (f"Ingrese {label}: ", float)


_SIDES = ("Ingrese el número de lados del polígono regular: ", int)

_PLANE = {
    1: _Figure(
        _Measure(
            "Cálculo de área de triángulo",
            (_f("la base del triángulo"), _f("la altura del triángulo")),
            f2.triangle_area,
        ),
        _Measure(
            "Cálculo de perímetro de triángulo",
            (
                _f("el primer lado del triángulo"),
                _f("el segundo lado del triángulo"),
                _f("el tercer lado del triángulo"),
            ),
            f2.triangle_perimeter,
        ),
        "El area del triangulo es: {:.2f} y el perimetro es: {:.2f}",
    ),
    2: _Figure(
        _Measure(
            "Cálculo de área de paralelogramo",
            (_f("la base del paralelogramo"), _f("la altura del paralelogramo")),
            f2.parallelogram_area,
        ),
        _Measure(
            "Cálculo de perímetro de paralelogramo",
            (_f("la base del paralelogramo"), _f("el lado del paralelogramo")),
            f2.parallelogram_perimeter,
        ),
        "El area del paralelogramo es: {:.2f} y el perimetro es: {:.2f}",
    ),
    3: _Figure(
        _Measure(
            "Cálculo de área de cuadrado",
            (_f("el lado del cuadrado"),),
            f2.square_area,
        ),
        _Measure(
            "Cálculo de perímetro de cuadrado",
            (_f("el lado del cuadrado"),),
            f2.square_perimeter,
        ),
        "El area del cuadrado es: {:.2f} y el perimetro es: {:.2f}",
    ),
    4: _Figure(
        _Measure(
            "Cálculo de área de rectángulo",
            (_f("la base del rectángulo"), _f("la altura del rectángulo")),
            f2.rectangle_area,
        ),
        _Measure(
            "Cálculo de perímetro de rectángulo",
            (_f("la base del rectángulo"), _f("la altura del rectángulo")),
            f2.rectangle_perimeter,
        ),
        "El area del rectangulo es: {:.2f} y el perimetro es: {:.2f}",
    ),
    5: _Figure(
        _Measure(
            "Cálculo de área de rombo",
            (_f("la diagonal mayor del rombo"), _f("la diagonal menor del rombo")),
            f2.rhombus_area,
        ),
        _Measure(
            "Cálculo de perímetro de rombo",
            (_f("el lado del rombo"),),
            f2.rhombus_perimeter,
        ),
        "El area del rombo es: {:.2f} y el perimetro es: {:.2f}",
    ),
    6: _Figure(
        _Measure(
            "Cálculo de área de trapecio",
            (
                _f("la base mayor del trapecio"),
                _f("la base menor del trapecio"),
                _f("la altura del trapecio"),
            ),
            f2.trapezoid_area,
        ),
        _Measure(
            "Cálculo de perímetro de trapecio",
            (
                _f("la base mayor del trapecio"),
                _f("la base menor del trapecio"),
                _f("el primer lado del trapecio"),
                _f("el segundo lado del trapecio"),
            ),
            f2.trapezoid_perimeter,
        ),
        "El area del trapecio es: {:.2f} y el perimetro es: {:.2f}",
    ),
    7: _Figure(
        _Measure(
            "Cálculo de área de círculo",
            (_f("el radio del círculo"),),
            f2.circle_area,
        ),
        _Measure(
            "Cálculo de perímetro de círculo",
            (_f("el radio del círculo"),),
            f2.circle_perimeter,
        ),
        "El area del circulo es: {:.2f} y el perimetro es: {:.2f}",
    ),
    8: _Figure(
        _Measure(
            "Cálculo de área de polígono regular",
            (_SIDES, _f("la longitud de un lado"), _f("la apotema")),
            f2.regular_polygon_area,
        ),
        _Measure(
            "Cálculo de perímetro de polígono regular",
            (_SIDES, _f("la longitud de un lado")),
            f2.regular_polygon_perimeter,
        ),
        "El area del poligono regular es: {:.2f} y el perimetro es: {:.2f}",
    ),
}

_SOLID = {
    1: _Figure(
        _Measure(
            "Calculo de volumen de cubo...",
            (_f("el lado del cubo"),),
            f3.cube_volume,
        ),
        _Measure(
            "Calculo de superficie de cubo...",
            (_f("el lado del cubo"),),
            f3.cube_surface,
        ),
        "El volumen del cubo es: {:.2f} y la superficie es: {:.2f}",
    ),
    2: _Figure(
        _Measure(
            "Calculo de volumen de cuboide...",
            (
                _f("el largo del cuboide"),
                _f("el ancho del cuboide"),
                _f("el alto del cuboide"),
            ),
            f3.cuboid_volume,
        ),
        _Measure(
            "Calculo de superficie de cuboide...",
            (
                _f("el largo del cuboide"),
                _f("el ancho del cuboide"),
                _f("el alto del cuboide"),
            ),
            f3.cuboid_surface,
        ),
        "El volumen del cuboide es: {:.2f} y la superficie es: {:.2f}",
    ),
    3: _Figure(
        _Measure(
            "Calculo de volumen de cilindro recto...",
            (_f("el radio del cilindro"), _f("la altura del cilindro")),
            f3.cylinder_volume,
        ),
        _Measure(
            "Calculo de superficie de cilindro recto...",
            (_f("el radio del cilindro"), _f("la altura del cilindro")),
            f3.cylinder_surface,
        ),
        "El volumen del cilindro recto es: {:.2f} y la superficie es: {:.2f}",
    ),
    4: _Figure(
        _Measure(
            "Calculo de volumen de esfera...",
            (_f("el radio de la esfera"),),
            f3.sphere_volume,
        ),
        _Measure(
            "Calculo de superficie de esfera...",
            (_f("el radio de la esfera"),),
            f3.sphere_surface,
        ),
        "El volumen de la esfera es: {:.2f} y la superficie es: {:.2f}",
    ),
    5: _Figure(
        _Measure(
            "Calculo de volumen de cono...",
            (_f("el radio del cono"), _f("la altura del cono")),
            f3.cone_volume,
        ),
        _Measure(
            "Calculo de superficie de cono...",
            (_f("el radio del cono"), _f("la generatriz del cono")),
            f3.cone_surface,
        ),
        "El volumen del Cono circular es: {:.2f} y la superficie es: {:.2f}",
    ),
}

_MAIN_MENU = "1.-Cálculo de área y perímetro\n 2.-Cálculo de superficie y volumen"
_PLANE_MENU = (
    "Ingrese número de opción:\n1.-Triángulos\n2.-paralelogramo\n3.-cuadrado\n"
    "4.-rectángulo\n5.-rombo\n6.-trapecio\n7.-círculo\n8.-polígono regular"
)
_SOLID_MENU = (
    "Ingrese número de opción:\n1.-Cubo\n2.-Cuboide\n3.-Cilindro Recto\n"
    "4.-Esfera\n5.-Cono Circular Recto\n"
)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive calculator; returns the process exit status."""
    parser = argparse.ArgumentParser(
        prog="geocalc",
        description="Área, perímetro, superficie y volumen de figuras geométricas.",
    )
    parser.parse_args(argv)
    try:
        choice = _read(_MAIN_MENU, int)
        menus = {1: (_PLANE_MENU, _PLANE), 2: (_SOLID_MENU, _SOLID)}
        if choice not in menus:
            return 0
        menu, figures = menus[choice]
        figure = figures.get(_read(menu, int))
        if figure is not None:
            figure.run()
    except _BadInput:
        print("\nError: entrada no válida.")
        return 1
    except EOFError:
        print()
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())