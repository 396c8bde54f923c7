__all__ = ["debug", "get_logger", "warn"]

import logging

LOGGER_NAME = "searchplan"


def get_logger(name: str | None = None) -> logging.Logger:
    if name is None or name == LOGGER_NAME:
        return logging.getLogger(LOGGER_NAME)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def warn(message: str, *args, name: str | None = None) -> None:
    get_logger(name).warning(message, *args)


def debug(message: str, *args, name: str | None = None) -> None:
    get_logger(name).debug(message, *args)
