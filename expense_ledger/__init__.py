"""Mini README: Core package initializer for the expense ledger.

This module exposes convenience imports so command-line front ends and tests
can reach the ledger engine without knowing the exact module structure. The
file stays lightweight so importing the package never touches the disk.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
