#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Пример «Вращающаяся надпись» на базе vecspace.
* Текст растеризуется шрифтом Pillow в облако точек.
* Облако вращается по yaw, снимок temp() читается без алиасинга.
"""

from __future__ import annotations

import sys

import numpy as np

# --------------------------------------------------------------
# 1️⃣  Импортируем публичные объекты из пакета
# --------------------------------------------------------------
from vecspace import Vector, parse_text
from vecspace.utils import logger, Profiler


def main(text: str = "vecspace", steps: int = 12) -> None:
    cloud = parse_text(text, pixel_size=0.1)
    logger.info(f"Parsed {text!r}: {cloud.size()} points")

    # --------------------------------------------------------------
    # 2️⃣  Поворачиваем облако по шагам и следим за центром масс
    # --------------------------------------------------------------
    pivot = Vector(0.0, 0.0, 0.0)
    with Profiler("rotate"):
        for step in range(steps):
            cloud.rotate_yaw(360.0 / steps)
            snapshot = cloud.temp()
            centre = snapshot.as_np().mean(axis=0) if snapshot.size() else np.zeros(3)
            pivot.set(*centre)
            logger.info(f"step {step + 1:2d}: centre={pivot}")

    # --------------------------------------------------------------
    # 3️⃣  Полный оборот – облако вернулось на место
    # --------------------------------------------------------------
    farthest = max((v.length() for v in cloud), default=0.0)
    logger.info(f"Farthest point after full turn: {farthest:.3f}")


if __name__ == "__main__":
    main(*sys.argv[1:2])
