#!/usr/bin/env python3
"""prsummary entry point for module execution"""

from .cli.main import cli

if __name__ == "__main__":
    cli(prog_name="prsummary")
