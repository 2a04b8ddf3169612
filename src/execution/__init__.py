"""Browser launch package for Browser Selector."""

from src.execution.launch_resolver import (
    LaunchAction,
    LaunchError,
    LaunchResolver,
    LaunchStrategy,
    detect_available_strategies,
    expand_exec,
)
from src.execution.launcher import Launcher
from src.execution.desktop_integration import (
    DesktopIntegrationError,
    install_desktop_file,
    set_default_browser,
)

__all__ = [
    "LaunchAction",
    "LaunchError",
    "LaunchResolver",
    "LaunchStrategy",
    "detect_available_strategies",
    "expand_exec",
    "Launcher",
    "DesktopIntegrationError",
    "install_desktop_file",
    "set_default_browser",
]
