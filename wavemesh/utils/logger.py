# wavemesh/utils/logger.py
# ---------------------------------------------------------------
# Общий логгер импортёра. Все модули пишут в "WaveMesh" с
# префиксом компонента: [Model], [Loader], [MtlLoader] и т.д.
# ---------------------------------------------------------------

import logging

LOGGER_NAME = "WaveMesh"


def init_logger(level: int = logging.INFO) -> logging.Logger:
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return logging.getLogger(LOGGER_NAME)


logger = init_logger()


def set_log_level(level) -> None:
    """Сменить уровень логгера ("DEBUG", "INFO", ... или число)."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            logger.warning(f"[Logger] Unknown log level, keeping {logger.level}")
            return
    logger.setLevel(level)
