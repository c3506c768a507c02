"""
Пакет parser – растр / картинка / текст → VectorSpace.
"""

from vecspace.parser.vector_parser import (
    parse_grid,
    parse_cells,
    parse_image,
    parse_text,
    render_text,
    is_background_pixel,
)

__all__ = ["parse_grid", "parse_cells", "parse_image", "parse_text",
           "render_text", "is_background_pixel"]
