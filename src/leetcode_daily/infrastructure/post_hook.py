"""Best-effort external command run after the solution files are written."""

import asyncio
import shlex
from pathlib import Path
from typing import Optional

from loguru import logger

from leetcode_daily.domain.exceptions import PostHookError

SLUG_PLACEHOLDER = "{slug}"


class PostHookRunner:
    """Runs a configured command with the challenge slug substituted in."""

    def __init__(self, command_template: str, cwd: Optional[Path] = None, silent: bool = True):
        """
        Initialize runner.

        Args:
            command_template: Shell-style command, ``{slug}`` is replaced per run
            cwd: Working directory for the command
            silent: Capture output instead of inheriting stdio
        """
        self.command_template = command_template
        self.cwd = cwd
        self.silent = silent

    @property
    def enabled(self) -> bool:
        return bool(self.command_template.strip())

    def build_command(self, title_slug: str) -> list[str]:
        return [part.replace(SLUG_PLACEHOLDER, title_slug) for part in shlex.split(self.command_template)]

    async def run(self, title_slug: str) -> None:
        """
        Run the command and wait for it to exit.

        Raises:
            PostHookError: If the command cannot start or exits non-zero
        """
        command = self.build_command(title_slug)
        stream = asyncio.subprocess.PIPE if self.silent else None
        logger.debug(f"Running post hook: {' '.join(command)}")

        try:
            process = await asyncio.create_subprocess_exec(
                *command, stdout=stream, stderr=stream, cwd=self.cwd
            )
        except OSError as e:
            raise PostHookError(command, None, str(e)) from e

        stdout, stderr = await process.communicate()
        if process.returncode != 0:
            output = b"".join(part for part in (stdout, stderr) if part).decode(errors="replace")
            raise PostHookError(command, process.returncode, output)
