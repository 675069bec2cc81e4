#!/usr/bin/env python3
"""
Main entry point for hostfetch.
"""

import os
import sys
import logging

from .facts import HostFactCollector
from .modules.base import CommandRunner
from .ui.render import TerminalRenderer

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("hostfetch")


def main() -> int:
    """Main function."""
    runner = CommandRunner()
    try:
        facts = HostFactCollector(runner=runner).collect()
        TerminalRenderer(runner=runner).render(facts)
    except KeyboardInterrupt:
        logger.debug("Interrupted by user")
    except BrokenPipeError:
        logger.debug("Output closed by reader")
        # Point stdout at /dev/null so the interpreter's final flush does not fail again
        try:
            stdout_fd = sys.stdout.fileno()
            os.dup2(os.open(os.devnull, os.O_WRONLY), stdout_fd)
        except (OSError, ValueError):
            pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
