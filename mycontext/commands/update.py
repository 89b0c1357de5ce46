# mycontext/commands/update.py
"""
Self-update: delegates to the package manager's ``dlx`` runner.

    pnpm dlx mycontext-cli@latest --up

The child inherits our stdin/stdout/stderr so the package manager's own
progress output reaches the user untouched.
"""
import asyncio
import subprocess
from typing import List, Optional

from mycontext.core.config import UpdateSettings, settings
from mycontext.core.exceptions import CommandFailed, SpawnError
from mycontext.core.logging import log, logger


class UpdateCommand:
    """Runs the latest published CLI through the package manager."""

    def __init__(self, update_settings: Optional[UpdateSettings] = None):
        self.settings = update_settings or settings.update

    @property
    def argv(self) -> List[str]:
        return [
            self.settings.package_manager,
            "dlx",
            f"{self.settings.package_name}@latest",
            "--up",
        ]

    @property
    def manual_command(self) -> str:
        return " ".join(self.argv)

    async def execute(self) -> None:
        logger.info("Updating mycontext CLI...")

        try:
            logger.progress(f"Running update via {self.settings.package_manager} dlx...")
            await self.run_command(self.argv[0], self.argv[1:])
            logger.success("Update command executed successfully")
        except (SpawnError, CommandFailed):
            logger.error("Failed to run update command")
            logger.info("Try manually:")
            logger.info(f"  {self.manual_command}")
            raise

    async def run_command(self, command: str, args: List[str]) -> None:
        """
        Run ``command args...`` with inherited stdio and a hard timeout.

        Raises:
            SpawnError: the binary could not be launched
            CommandFailed: non-zero exit, or killed on timeout
        """
        cmd = [command, *args]
        timeout = self.settings.timeout
        log("UPDATE", f"spawn {cmd} (timeout={timeout}s)")

        # Blocking wait runs in a worker thread so the event loop stays free
        def run_sync():
            return subprocess.run(cmd, timeout=timeout)

        try:
            proc = await asyncio.to_thread(run_sync)
        except subprocess.TimeoutExpired as e:
            raise CommandFailed(command, None, f"timed out after {timeout}s") from e
        except OSError as e:
            raise SpawnError(command, e) from e

        log("UPDATE", f"{command} exited with {proc.returncode}")
        if proc.returncode != 0:
            raise CommandFailed(command, proc.returncode)
