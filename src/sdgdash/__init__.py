"""sdgdash CLI entry point.

This package provides a Click-based CLI and Textual dashboard for browsing
projects tagged with policy and SDG labels. See `sdgdash --help` for details.
"""

from sdgdash.cli.cli import cli

__all__ = ["cli"]
