"""
Settings provider backed by defaults, environment variables or an ENV file.
"""

from __future__ import annotations

__all__ = ["SettingKey", "Settings"]

import os
from datetime import timedelta
from enum import Enum
from typing import Any

from dotenv import dotenv_values

from .data_model import DataModel
from .exceptions import NotFoundError

DEFAULT_ENV_PREFIX = "SEARCHPLAN_"


class SettingKey(str, Enum):
    """Setting key.

    Attributes:
        QUERY_SIZE_LIMIT: Default number of rows returned by a request.
        SQL_CURSOR_KEEP_ALIVE: Keep alive of a scroll context.
    """

    QUERY_SIZE_LIMIT = "query_size_limit"
    SQL_CURSOR_KEEP_ALIVE = "cursor_keep_alive"


class Settings(DataModel):
    """Request planning settings."""

    query_size_limit: int = 200
    """Default size of a search request."""

    cursor_keep_alive: timedelta = timedelta(minutes=1)
    """Keep alive of the scroll context opened by a scroll request."""

    def get_setting_value(self, key: SettingKey | str) -> Any:
        name = key.value if isinstance(key, SettingKey) else key
        if name not in type(self).model_fields:
            raise NotFoundError(f"Setting {name} not found")
        return getattr(self, name)

    @classmethod
    def from_env(cls, prefix: str = DEFAULT_ENV_PREFIX) -> Settings:
        """Load settings from environment variables.

        Args:
            prefix:
                Environment variable prefix. ``SEARCHPLAN_QUERY_SIZE_LIMIT``
                maps to ``query_size_limit``.
        """
        return cls.from_dict(cls._strip_prefix(os.environ, prefix))

    @classmethod
    def from_env_file(
        cls,
        path: str = ".env",
        prefix: str = DEFAULT_ENV_PREFIX,
    ) -> Settings:
        """Load settings from an ENV file.

        Args:
            path:
                ENV file path, defaults to ".env".
            prefix:
                Variable prefix.
        """
        items = dotenv_values(path)
        if items is None:
            items = dict()
        return cls.from_dict(cls._strip_prefix(items, prefix))

    @staticmethod
    def _strip_prefix(items: Any, prefix: str) -> dict[str, Any]:
        values: dict[str, Any] = {}
        for key, value in items.items():
            if value is None or not key.startswith(prefix):
                continue
            values[key[len(prefix) :].lower()] = value
        return values
