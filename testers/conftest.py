# -*- coding: utf-8 -*-
"""
conftest.py – общие фикстуры: изолированная конфигурация и маленькие
RGBA‑картинки, собранные прямо в памяти через Pillow.
"""

import pytest
from PIL import Image

from vecspace.math.vector import Vector
from vecspace.math.vector_space import VectorSpace
from vecspace.utils.config import Config

TRANSPARENT = (0, 0, 0, 0)
WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)
RED = (255, 0, 0, 255)


# ----------------------------------------------------------------------
# Конфигурация – у каждого теста свой файл в tmp_path
# ----------------------------------------------------------------------
@pytest.fixture(autouse=True)
def config(tmp_path):
    """Чистый Config, который никогда не смотрит в рабочий каталог."""
    Config.reset()
    cfg = Config(tmp_path / "vecspace.json")
    yield cfg
    Config.reset()


# ----------------------------------------------------------------------
# Картинки
# ----------------------------------------------------------------------
@pytest.fixture
def checker_image() -> Image.Image:
    """
    3×2 картинка (ширина × высота):

        row 0:  BLACK        TRANSPARENT  RED
        row 1:  WHITE        BLACK        TRANSPARENT
    """
    img = Image.new("RGBA", (3, 2), TRANSPARENT)
    img.putpixel((0, 0), BLACK)
    img.putpixel((2, 0), RED)
    img.putpixel((0, 1), WHITE)
    img.putpixel((1, 1), BLACK)
    return img


# ----------------------------------------------------------------------
# Наборы векторов
# ----------------------------------------------------------------------
@pytest.fixture
def axes() -> VectorSpace:
    """Единичные векторы осей X, Y, Z."""
    return VectorSpace(Vector(1, 0, 0), Vector(0, 1, 0), Vector(0, 0, 1))
