#!/usr/bin/env python3
"""list_models.py - print the Gemini models available to GEMINI_API_KEY."""

import sys

from careerlens.diagnostics import main

if __name__ == "__main__":
    sys.exit(main())
