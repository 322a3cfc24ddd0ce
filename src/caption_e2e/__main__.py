#!/usr/bin/env python3
"""
Allow running the suite as a module: python -m caption_e2e

This enables the following usage:
    python -m caption_e2e [OPTIONS]

Which is equivalent to:
    caption-e2e [OPTIONS]
"""

from caption_e2e.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
