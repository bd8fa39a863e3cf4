"""Models subpackage exposed via Common Layer."""

from .config import ConfigurationError, MacroConfiguration, load_configuration
from .events import STATUS_FAILURE, STATUS_SUCCESS, MacroEvent, MacroResponse

__all__ = [
    "ConfigurationError",
    "MacroConfiguration",
    "load_configuration",
    "MacroEvent",
    "MacroResponse",
    "STATUS_FAILURE",
    "STATUS_SUCCESS",
]
