"""
vecspace – изменяемые 3‑D векторы, наборы векторов (VectorSpace)
и парсер картинок/текста в облака точек.
"""

from vecspace.utils import logger
from vecspace.math import helper, Vector, VectorSpace
from vecspace.parser import parse_grid, parse_cells, parse_image, parse_text

__version__ = "1.0.0"

__all__ = [
    "helper",
    "Vector",
    "VectorSpace",
    "parse_grid",
    "parse_cells",
    "parse_image",
    "parse_text",
]
