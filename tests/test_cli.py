import io

import pytest

from geocalc.cli import main


def _run(monkeypatch, capsys, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    status = main([])
    return status, capsys.readouterr().out


def test_square_result_line(monkeypatch, capsys):
    status, out = _run(monkeypatch, capsys, "1\n3\n3\n3\n")
    assert status == 0
    assert "El area del cuadrado es: 9.00 y el perimetro es: 12.00" in out


def test_cube_result_line(monkeypatch, capsys):
    status, out = _run(monkeypatch, capsys, "2\n1\n2\n2\n")
    assert status == 0
    assert "El volumen del cubo es: 8.00 y la superficie es: 24.00" in out


def test_invalid_value_reports_error_and_minus_one(monkeypatch, capsys):
    status, out = _run(monkeypatch, capsys, "1\n7\n0\n0\n")
    assert status == 0
    assert out.count("Error: El radio debe ser mayor que cero.") == 2
    assert "El area del circulo es: -1.00 y el perimetro es: -1.00" in out


def test_invalid_triangle_message(monkeypatch, capsys):
    status, out = _run(monkeypatch, capsys, "1\n1\n2\n2\n1\n2\n3\n")
    assert status == 0
    assert "Error: Los lados no forman un triángulo válido." in out
    assert "el perimetro es: -1.00" in out


def test_trapezoid_prompts_for_trapezoid_dimensions(monkeypatch, capsys):
    status, out = _run(monkeypatch, capsys, "1\n6\n4\n4\n2\n4\n4\n2\n2\n")
    assert status == 0
    assert "Ingrese la base mayor del trapecio: " in out
    assert "diagonal" not in out
    assert "Cálculo de área de trapecio" in out


def test_solid_volume_asked_before_surface(monkeypatch, capsys):
    status, out = _run(monkeypatch, capsys, "2\n4\n1\n1\n")
    assert status == 0
    assert out.index("volumen de esfera") < out.index("superficie de esfera")


@pytest.mark.parametrize("text", ["3\n", "1\n9\n", "2\n6\n"])
def test_unknown_options_do_nothing(monkeypatch, capsys, text):
    status, out = _run(monkeypatch, capsys, text)
    assert status == 0
    assert "El " not in out
    assert "Ingrese el" not in out


def test_non_numeric_input_fails(monkeypatch, capsys):
    status, out = _run(monkeypatch, capsys, "abc\n")
    assert status == 1
    assert "entrada no válida" in out


def test_polygon_side_count_must_be_integer(monkeypatch, capsys):
    status, out = _run(monkeypatch, capsys, "1\n8\n4.5\n")
    assert status == 1
    assert "entrada no válida" in out


def test_end_of_input_fails(monkeypatch, capsys):
    status, _ = _run(monkeypatch, capsys, "1\n")
    assert status == 1


def test_polygon_too_few_sides(monkeypatch, capsys):
    status, out = _run(monkeypatch, capsys, "1\n8\n2\n1\n1\n2\n1\n")
    assert status == 0
    assert out.count("Error: El número de lados debe ser al menos 3.") == 2