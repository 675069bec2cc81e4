#!/usr/bin/env python3
"""
UI package for terminal rendering.
"""

from .render import TerminalRenderer
from .ansi import strip_ansi_escape_codes, visible_width
