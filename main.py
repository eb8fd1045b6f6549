#!/usr/bin/env -S uv run --script
# /// script
# requires-python = ">=3.11"
# dependencies = [
#   "lab-report-parser",
# ]
# ///
"""Main entry point for the lab report parser application."""

from lab_report_parser.cli import main

if __name__ == "__main__":
    main()
