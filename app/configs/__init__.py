from app.configs.settings import (
    DEFAULT_ERROR_MESSAGE,
    OTHER_ERROR_MESSAGE,
    Settings,
    file_logger,
    pool_kwargs,
    settings,
)

__all__ = [
    "DEFAULT_ERROR_MESSAGE",
    "OTHER_ERROR_MESSAGE",
    "Settings",
    "file_logger",
    "pool_kwargs",
    "settings",
]
