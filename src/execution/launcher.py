"""Starts a resolved launch command without waiting for the browser."""

from __future__ import annotations

import logging
import subprocess

from src.execution.launch_resolver import LaunchAction, LaunchError

logger = logging.getLogger(__name__)

# Seconds to watch for an immediate failure of the launched command
DEFAULT_GRACE_PERIOD = 1.0


class Launcher:
    """Runs a LaunchAction detached from this process.

    A command that exits non-zero within the grace period (for example
    gtk-launch with an unknown id) is reported as a LaunchError. Anything
    still running after that is assumed to be the browser and left alone.

    Started processes are never reaped: the browser outlives this program
    in its own session. Handles of commands that are still running are kept
    in ``detached`` so they are not collected while the run lasts.
    """

    def __init__(self, grace_period: float = DEFAULT_GRACE_PERIOD) -> None:
        self.grace_period = grace_period
        self.detached: list[subprocess.Popen] = []

    def launch(self, action: LaunchAction) -> None:
        """
        Start the command in ``action``.

        Raises:
            LaunchError: If the command cannot be started or fails at once
        """
        logger.info("Launching %s: %s", action.browser_id, action.command_line)
        try:
            process = subprocess.Popen(
                list(action.argv),
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as e:
            raise LaunchError(
                action.browser_id,
                action.strategy,
                str(e),
                command=action.command_line,
            ) from e

        if self.grace_period <= 0:
            self.detached.append(process)
            return

        try:
            returncode = process.wait(timeout=self.grace_period)
        except subprocess.TimeoutExpired:
            logger.debug("Launch command still running after %.1fs", self.grace_period)
            self.detached.append(process)
            return

        if returncode != 0:
            raise LaunchError(
                action.browser_id,
                action.strategy,
                f"command exited with status {returncode}",
                command=action.command_line,
            )
        logger.debug("Launch command exited cleanly")
