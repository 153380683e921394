# geocalc

Area, perimeter, surface and volume of common figures, as a small library and
an interactive console calculator. Prompts and messages are in Spanish.

- **2D figures** (`geocalc.figures2d`): area and perimeter of triangles,
  parallelograms, squares, rectangles, rhombi, trapezoids, circles and regular
  polygons.
- **3D figures** (`geocalc.figures3d`): surface and volume of cubes, cuboids,
  right cylinders, spheres and right circular cones.

## Installation

```
pip install .
```

## Command line

```
geocalc
```

The command takes no options apart from `-h`/`--help`. It first asks for a
group:

1. area and perimeter
2. surface and volume

It then shows the figures of that group and asks for one. For the chosen
figure it asks for the measurements of each of the two calculations in turn
(area then perimeter for plane figures, volume then surface for solids) and
prints both results with two decimals. A group or figure number that is not
on the menu ends the program without output.

If a calculation rejects its measurements, the message is printed as
`Error: ...` and that result is shown as `-1.00`. If a typed value cannot be
read as a number (the polygon's side count must be a whole number), the
program prints an error and exits with status 1; end of input also exits with
status 1.

Each run performs a single calculation; the calculator does not loop back to
the menu and keeps no history.

## Library use

```python
from geocalc.figures2d import circle_area, triangle_perimeter
from geocalc.figures3d import sphere_volume, cuboid_surface

circle_area(1.0)                     # 3.14159...
triangle_perimeter(3.0, 4.0, 5.0)    # 12.0
sphere_volume(2.0)                   # 33.51...
cuboid_surface(1.0, 2.0, 3.0)        # 22.0
```

Every function raises `ValueError` when a measurement is not greater than
zero. `triangle_perimeter` also raises it when the sides break the triangle
inequality, and the regular-polygon functions raise it when there are fewer
than three sides.

Available functions:

- `geocalc.figures2d`: `triangle_area`, `triangle_perimeter`,
  `parallelogram_area`, `parallelogram_perimeter`, `square_area`,
  `square_perimeter`, `rectangle_area`, `rectangle_perimeter`, `rhombus_area`,
  `rhombus_perimeter`, `trapezoid_area`, `trapezoid_perimeter`, `circle_area`,
  `circle_perimeter`, `regular_polygon_area`, `regular_polygon_perimeter`
- `geocalc.figures3d`: `cube_surface`, `cube_volume`, `cuboid_surface`,
  `cuboid_volume`, `cylinder_surface`, `cylinder_volume`, `sphere_surface`,
  `sphere_volume`, `cone_surface`, `cone_volume`

`cone_surface` takes the radius and the slant height; `cone_volume` takes the
radius and the height.

## Running the tests

```
pip install .[test]
pytest
```