# vecspace/utils/logger.py
# ---------------------------------------------------------------
# Общий логгер пакета. Тяжёлые пути (арифметика векторов) не логируют,
# только структурные события: парсинг, снимки, конфигурация.
# ---------------------------------------------------------------

import logging


def init_logger():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return logging.getLogger("VecSpace")

logger = init_logger()
