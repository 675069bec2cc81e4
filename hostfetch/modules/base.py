#!/usr/bin/env python3
"""
Base module for all fact probes.
"""

import os
import subprocess
import logging
from typing import Any, Callable, List, NamedTuple, Optional, Sequence

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("hostfetch.probe")


def split_lines(text: str) -> List[str]:
    """
    Split text on newlines only, dropping one trailing empty line.

    Unlike str.splitlines(), form feeds, file separators and the other
    Unicode line boundaries stay inside their line. A trailing carriage
    return is removed from each line.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class CommandResult(NamedTuple):
    """Outcome of one external command: success flag and captured stdout."""
    success: bool
    stdout: str


class CommandRunner:
    """Runs external commands, capturing stdout and ignoring stderr."""

    def __init__(self, timeout: Optional[float] = None):
        # No timeout unless asked for: a hung command blocks the run.
        self.timeout = timeout

    def run(self, command: List[str]) -> CommandResult:
        try:
            result = subprocess.run(
                command,
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                text=True,
                errors="replace",
                check=False,
                timeout=self.timeout
            )
        except subprocess.TimeoutExpired:
            logger.debug(f"Command timed out: {' '.join(command)}")
            return CommandResult(False, "")
        except OSError as e:
            logger.debug(f"Failed to run command {' '.join(command)}: {str(e)}")
            return CommandResult(False, "")

        return CommandResult(result.returncode == 0, result.stdout)


class ProbeChain:
    """
    Ordered list of detection strategies for one fact.

    Strategies are zero-argument callables returning a value or None. They are
    tried strictly in order and the first usable (non-None, truthy) value wins;
    if every strategy fails the chain's default is returned.
    """

    def __init__(self, name: str, strategies: Sequence[Callable[[], Any]], default: Any):
        self.name = name
        self.strategies = list(strategies)
        self.default = default

    def run(self) -> Any:
        for strategy in self.strategies:
            label = getattr(strategy, "__name__", repr(strategy))
            try:
                value = strategy()
            except Exception as e:
                logger.debug(f"{self.name}: strategy {label} raised {e!r}")
                continue

            if value is not None and value:
                logger.debug(f"{self.name}: strategy {label} matched")
                return value

            logger.debug(f"{self.name}: strategy {label} did not match")

        logger.debug(f"{self.name}: all strategies failed, using default")
        return self.default


class FactProbe:
    """Base class for all fact probes."""

    default: Any = None

    def __init__(self, name: str, description: str,
                 runner: Optional[CommandRunner] = None, root: str = "/"):
        self.name = name
        self.description = description
        self.runner = runner or CommandRunner()
        self.root = root

    def strategies(self) -> List[Callable[[], Any]]:
        """Return the detection strategies in priority order."""
        raise NotImplementedError("Subclasses must implement this method")

    def run(self) -> Any:
        """Run the probe chain and return the detected value or the default."""
        return ProbeChain(self.name, self.strategies(), self.default).run()

    def resolve(self, path: str) -> str:
        """Map an absolute system path onto the probe's filesystem root."""
        if self.root in ("", "/"):
            return path
        return os.path.join(self.root, path.lstrip("/"))

    def safe_run_command(self, command: List[str]) -> Optional[str]:
        """
        Run a command, returning its stdout only if it succeeded.

        Args:
            command: Command to run as a list of strings

        Returns:
            Command output, or None if the command is missing or failed
        """
        result = self.runner.run(command)
        if not result.success:
            return None
        return result.stdout

    def safe_read_file(self, file_path: str) -> Optional[str]:
        """
        Read a file, returning None if it is missing or unreadable.

        Args:
            file_path: Absolute system path of the file

        Returns:
            File content as string, or None
        """
        try:
            with open(self.resolve(file_path), 'r') as f:
                return f.read()
        except FileNotFoundError:
            logger.debug(f"File not found: {file_path}")
        except PermissionError:
            logger.debug(f"Permission denied: {file_path}")
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"Failed to read file {file_path}: {str(e)}")
        return None

    def path_exists(self, path: str) -> bool:
        return os.path.exists(self.resolve(path))

    def is_dir(self, path: str) -> bool:
        return os.path.isdir(self.resolve(path))

    def list_dir(self, path: str) -> List[str]:
        try:
            return os.listdir(self.resolve(path))
        except OSError:
            return []
