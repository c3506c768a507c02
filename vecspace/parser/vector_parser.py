# vecspace/parser/vector_parser.py
"""
Превращает растр (сетку «фон / не фон», картинку или строку текста)
в VectorSpace – облако точек в плоскости z = 0.

Для каждой не‑фоновой ячейки (col, row) сетки width × height создаётся

    Vector(-(col - (width - 1) / 2) * pixel_size,
           -(row - (height - 1) / 2) * pixel_size,
           0.0)

т.е. сетка центрируется на своём центре, отражается по обеим осям и
масштабируется. Порядок обхода – по столбцам: сначала все строки столбца 0,
потом столбца 1 и т.д.

Фон в картинке – полностью прозрачный пиксель (alpha == 0) или пиксель,
совпадающий с цветом‑«сторожем» (по умолчанию непрозрачный белый).
"""

import math
from pathlib import Path
from typing import Callable, Optional, Sequence, Union

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from vecspace.math.vector import Vector
from vecspace.math.vector_space import VectorSpace
from vecspace.utils.config import Config
from vecspace.utils.logger import logger
from vecspace.utils.profiler import Profiler


# ----------------------------------------------------------------------
# сетка → VectorSpace
# ----------------------------------------------------------------------
def _pixel_size(pixel_size: Optional[float]) -> float:
    if pixel_size is None:
        return float(Config()["pixel_size"])
    return float(pixel_size)


def _build(foreground: np.ndarray, pixel_size: Optional[float]) -> VectorSpace:
    size = _pixel_size(pixel_size)
    height, width = foreground.shape
    # транспонирование даёт обход по столбцам
    cols, rows = np.nonzero(foreground.T)
    xs = -(cols - (width - 1) / 2.0) * size
    ys = -(rows - (height - 1) / 2.0) * size
    return VectorSpace([Vector(float(x), float(y), 0.0) for x, y in zip(xs, ys)])


def parse_grid(mask, pixel_size: Optional[float] = None) -> VectorSpace:
    """`mask[row][col]` – истина для ячеек переднего плана."""
    grid = np.asarray(mask, dtype=bool)
    if grid.ndim != 2:
        raise ValueError(f"grid must be 2-D, got shape {grid.shape}")
    return _build(grid, pixel_size)


def parse_cells(width: int, height: int,
                is_background: Callable[[int, int], bool],
                pixel_size: Optional[float] = None) -> VectorSpace:
    """Вариант с предикатом `is_background(col, row)`."""
    if width < 0 or height < 0:
        raise ValueError(f"invalid grid size {width}x{height}")
    cells = [[not is_background(col, row) for col in range(width)]
             for row in range(height)]
    grid = np.array(cells, dtype=bool).reshape(height, width)
    return _build(grid, pixel_size)


# ----------------------------------------------------------------------
# картинка → VectorSpace
# ----------------------------------------------------------------------
def _checked_sentinel(sentinel: Sequence[int]) -> Sequence[int]:
    if len(sentinel) != 4:
        raise ValueError(f"sentinel colour must be RGBA (4 values), got {list(sentinel)}")
    return sentinel


def _sentinel() -> Sequence[int]:
    return _checked_sentinel(Config().lookup("background", "sentinel_rgba"))


def is_background_pixel(rgba: Sequence[int],
                        sentinel: Optional[Sequence[int]] = None) -> bool:
    sentinel = _sentinel() if sentinel is None else _checked_sentinel(sentinel)
    return rgba[3] == 0 or tuple(rgba) == tuple(sentinel)


def _foreground_mask(rgba: np.ndarray, sentinel: Sequence[int]) -> np.ndarray:
    transparent = rgba[..., 3] == 0
    is_sentinel = np.all(rgba == np.asarray(sentinel, dtype=np.uint8), axis=-1)
    return ~(transparent | is_sentinel)


def parse_image(image: Union[Image.Image, str, Path],
                pixel_size: Optional[float] = None) -> VectorSpace:
    """Картинка Pillow (или путь к файлу) → облако точек."""
    if isinstance(image, Image.Image):
        rgba = np.array(image.convert("RGBA"), dtype=np.uint8)
        label = f"<{image.mode} {image.width}x{image.height}>"
    else:
        p = Path(image).expanduser().resolve()
        if not p.is_file():
            raise FileNotFoundError(f"Image not found: {p}")
        with Image.open(p) as img:
            rgba = np.array(img.convert("RGBA"), dtype=np.uint8)
        label = str(p)

    with Profiler("VectorParser.parse_image"):
        space = _build(_foreground_mask(rgba, _sentinel()), pixel_size)
    logger.debug(f"[VectorParser] Parsed image {label} -> {space.size()} vectors")
    return space


# ----------------------------------------------------------------------
# текст → VectorSpace
# ----------------------------------------------------------------------
def _resolve_font(font):
    cfg = Config()
    if font is None:
        path = cfg.lookup("text", "font_path")
        if path is None:
            return ImageFont.load_default()
        font = path
    if isinstance(font, (str, Path)):
        return ImageFont.truetype(str(font), int(cfg.lookup("text", "font_size")))
    return font


def render_text(text: str, font=None) -> Optional[Image.Image]:
    """
    Отрисовать строку на прозрачном RGBA‑холсте размером с ширину
    текста × высоту строки. Для пустой строки – None.
    """
    if not text:
        return None
    font = _resolve_font(font)

    cfg = Config()
    _, _, right, bottom = font.getbbox(text)
    width = max(int(math.ceil(font.getlength(text))), int(right))
    height = int(bottom)
    if hasattr(font, "getmetrics"):
        ascent, descent = font.getmetrics()
        height = max(height, ascent + descent)
    if width <= 0 or height <= 0:
        return None

    canvas = Image.new("RGBA", (width, height), (0, 0, 0, 0))
    draw = ImageDraw.Draw(canvas)
    if not cfg.lookup("text", "antialias"):
        draw.fontmode = "1"
    draw.text((0, 0), text, font=font, fill=tuple(cfg.lookup("text", "color")))
    return canvas


def parse_text(text: str, font=None,
               pixel_size: Optional[float] = None) -> VectorSpace:
    """Строка текста → облако точек (через render_text и parse_image)."""
    canvas = render_text(text, font)
    if canvas is None:
        logger.debug(f"[VectorParser] Nothing to render for {text!r}")
        return VectorSpace(0)
    return parse_image(canvas, pixel_size)
