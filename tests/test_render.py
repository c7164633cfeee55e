import pytest

from fieldmap.grid import Grid
from fieldmap.render.text import parse_text, render_lines, render_text

def test_text_rows_are_row_major():
    g = Grid.empty(3, 2, fill=".")
    g.set(2, 0, "#")
    g.set(0, 1, "C")
    assert render_lines(g) == ["..#", "C.."]
    assert render_text(g) == "..#\nC..\n"

def test_render_does_not_mutate():
    g = Grid.empty(3, 2, fill="~")
    before = g.copy()
    render_text(g)
    assert g == before

def test_parse_text_roundtrip_and_ragged():
    assert parse_text("%#%\n%.%\n") == ["%#%", "%.%"]
    with pytest.raises(ValueError):
        parse_text("%#%\n%.\n")

def test_png_colors(tmp_path):
    pytest.importorskip("PIL")
    from fieldmap.render.image import BUILDING_COLOR, TERRAIN_COLORS, render_rows, save_png

    img = render_rows(["%#", ".C"], tile_size=4)
    assert img.size == (8, 8)
    assert img.getpixel((0, 0)) == TERRAIN_COLORS["%"]
    assert img.getpixel((5, 1)) == TERRAIN_COLORS["#"]
    assert img.getpixel((1, 5)) == TERRAIN_COLORS["."]
    assert img.getpixel((6, 6)) == BUILDING_COLOR

    out = tmp_path / "maps" / "one.png"
    save_png(["%#%", "#.#", "%#%"], str(out), tile_size=8)
    assert out.exists()

def test_empty_png_rejected():
    pytest.importorskip("PIL")
    from fieldmap.render.image import render_rows
    with pytest.raises(ValueError):
        render_rows([])
