#!/usr/bin/env python3
"""CLI entry point for Detective Quest."""
import sys

from detective_quest.cli import main

if __name__ == "__main__":
    sys.exit(main())
