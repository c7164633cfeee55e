# src/fieldmap/render/text.py
from typing import List

from ..grid import Grid

def render_lines(g: Grid) -> List[str]:
    """One string of `width` characters per row, top to bottom."""
    return g.rows()

def render_text(g: Grid) -> str:
    return "".join(line + "\n" for line in render_lines(g))

def parse_text(text: str) -> List[str]:
    # Inverse of render_text for tools that read saved maps back.
    rows = [ln for ln in text.splitlines() if ln]
    if rows and any(len(r) != len(rows[0]) for r in rows):
        raise ValueError("ragged map: rows differ in length")
    return rows
