"""Core module for Browser Selector."""

from .config import ConfigManager, ConfigError
from .logging_config import setup_logging, get_history_logger, log_launch
from .models import (
    BrowserEntry,
    Catalog,
    QueryParam,
    DisplaySettings,
    Selection,
)
from .param_classifier import classify, is_tracking_param
from .url_analysis import UrlAnalysis, analyze_url, strip_tracking_params
from .selection_memory import SelectionMemory

__all__ = [
    # Config
    "ConfigManager",
    "ConfigError",
    # Logging
    "setup_logging",
    "get_history_logger",
    "log_launch",
    # Models
    "BrowserEntry",
    "Catalog",
    "QueryParam",
    "DisplaySettings",
    "Selection",
    # URL parameters
    "classify",
    "is_tracking_param",
    "UrlAnalysis",
    "analyze_url",
    "strip_tracking_params",
    # Selection
    "SelectionMemory",
]
