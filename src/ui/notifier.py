"""Desktop notifications through notify-send."""

from __future__ import annotations

import logging
import shutil
import subprocess
from typing import Callable, Optional

from src.core.constants import NOTIFY_SEND

logger = logging.getLogger(__name__)

NOTIFICATION_TITLE = "Browser Selector"


class Notifier:
    """Sends transient desktop notifications; silently disabled without notify-send."""

    def __init__(
        self,
        which: Callable[[str], Optional[str]] = shutil.which,
        run: Callable[..., subprocess.CompletedProcess] = subprocess.run,
    ) -> None:
        self._executable = which(NOTIFY_SEND)
        self._run = run
        if not self._executable:
            logger.debug("%s not found, notifications disabled", NOTIFY_SEND)

    @property
    def enabled(self) -> bool:
        return bool(self._executable)

    def notify(self, message: str, icon: str = "dialog-information", expire_ms: int = 3000) -> None:
        """Show ``message``; failures are logged, never raised."""
        if not self._executable:
            return
        cmd = [
            self._executable,
            NOTIFICATION_TITLE,
            message,
            f"--icon={icon}",
            "--hint=int:transient:1",
            f"--expire-time={expire_ms}",
        ]
        try:
            self._run(cmd, check=False, capture_output=True, timeout=5)
        except (OSError, subprocess.TimeoutExpired) as e:
            logger.warning("Notification failed: %s", e)
