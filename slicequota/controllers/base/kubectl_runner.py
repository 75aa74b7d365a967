"""Bounded kubectl execution shared by fetchers and clients."""

from __future__ import annotations

import asyncio
import logging
import shutil
import subprocess

from slicequota.constants.timeouts import KUBECTL_COMMAND_TIMEOUT
from slicequota.errors import ClientConstructionError

logger = logging.getLogger(__name__)


class KubectlError(RuntimeError):
    """A kubectl command exited non-zero or timed out."""

    def __init__(self, args: tuple[str, ...], message: str) -> None:
        super().__init__(message)
        self.command_args = args

    @property
    def is_not_found(self) -> bool:
        message = str(self).lower()
        return "(notfound)" in message or "not found" in message

    @property
    def is_conflict(self) -> bool:
        message = str(self).lower()
        return "conflict" in message or "the object has been modified" in message


class KubectlRunner:
    """Runs kubectl against one context with a process-level timeout.

    Commands run in a worker thread so the event loop keeps serving other
    namespaces while a slow API call is in flight.
    """

    def __init__(
        self,
        context: str | None = None,
        timeout_seconds: int = KUBECTL_COMMAND_TIMEOUT,
        binary: str = "kubectl",
    ) -> None:
        """Initialize the runner.

        Args:
            context: Optional Kubernetes context name.
            timeout_seconds: Process timeout for every command.
            binary: kubectl executable name or path.

        Raises:
            ClientConstructionError: If the kubectl binary cannot be found.
        """
        resolved = shutil.which(binary)
        if resolved is None:
            raise ClientConstructionError(f"kubectl binary {binary!r} not found on PATH")
        self.binary = resolved
        self.context = context
        self.timeout_seconds = max(1, int(timeout_seconds))

    def _build_command(self, args: tuple[str, ...]) -> list[str]:
        cmd = [self.binary]
        if self.context:
            cmd.extend(["--context", self.context])
        cmd.extend(args)
        return cmd

    def _run_sync(self, args: tuple[str, ...], stdin: str | None = None) -> str:
        """Run a kubectl command synchronously (thread-safe wrapper target)."""
        cmd = self._build_command(args)
        try:
            result = subprocess.run(
                cmd,
                input=stdin,
                capture_output=True,
                text=True,
                timeout=self.timeout_seconds,
            )
        except subprocess.TimeoutExpired as exc:
            raise KubectlError(
                args, f"kubectl timed out after {self.timeout_seconds}s"
            ) from exc
        except OSError as exc:
            raise KubectlError(args, f"kubectl could not be started: {exc}") from exc

        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            raise KubectlError(args, stderr or "kubectl command failed")
        return result.stdout

    async def run(self, args: tuple[str, ...], stdin: str | None = None) -> str:
        """Run kubectl with ``args`` and return stdout.

        Raises:
            KubectlError: On non-zero exit, timeout or launch failure.
        """
        logger.debug("kubectl context=%s args=%s", self.context or "-", " ".join(args))
        return await asyncio.to_thread(self._run_sync, args, stdin)

    async def __call__(self, args: tuple[str, ...]) -> str:
        return await self.run(args)
