import logging
from logging.handlers import RotatingFileHandler

from vocab_drill.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s:%(levelname)s:%(name)s: %(message)s"
HANDLER_PREFIX = "vocab_drill."


def setup_logging(settings: Settings | None = None) -> None:
    cfg = settings or get_settings()
    level = logging.getLevelName(cfg.log_level)
    if not isinstance(level, int):
        level = logging.INFO
    log_formatter = logging.Formatter(LOG_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Reloads call this again; replace our handlers instead of stacking them.
    for handler in list(root_logger.handlers):
        if (handler.get_name() or "").startswith(HANDLER_PREFIX):
            root_logger.removeHandler(handler)
            handler.close()

    # Stream Handler
    stream_handler = logging.StreamHandler()
    stream_handler.set_name(HANDLER_PREFIX + "stream")
    stream_handler.setFormatter(log_formatter)
    stream_handler.setLevel(level)
    root_logger.addHandler(stream_handler)

    # File Handler
    if cfg.log_file:
        file_handler = RotatingFileHandler(cfg.log_file, maxBytes=5 * 1024 * 1024, backupCount=2)
        file_handler.set_name(HANDLER_PREFIX + "file")
        file_handler.setFormatter(log_formatter)
        file_handler.setLevel(level)
        root_logger.addHandler(file_handler)
