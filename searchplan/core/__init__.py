from ._log_helper import debug, get_logger, warn
from .data_model import DataModel, FrozenDataModel
from .settings import SettingKey, Settings
from .time import Time

__all__ = [
    "DataModel",
    "FrozenDataModel",
    "SettingKey",
    "Settings",
    "Time",
    "debug",
    "get_logger",
    "warn",
]
