#!/usr/bin/env python3
"""
hostfetch

Shows a handful of facts about the local Linux host (hostname, distribution,
kernel, init system, package counts and memory usage) next to a small logo.
"""

__version__ = "1.0.0"
