"""Command implementations for agent-profiles."""

from .clean import run_clean
from .install import run_install

__all__ = ["run_clean", "run_install"]
