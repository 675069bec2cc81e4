#!/usr/bin/env python3
"""
Allow running hostfetch with `python -m hostfetch`.
"""

import sys

from .main import main

sys.exit(main())
