"""Utility functions for trunic.

This module provides:

- Logging setup and configuration
- Rendering statistics and progress logging
"""

from trunic.utils.logging import (
    RenderLogger,
    RenderStats,
    configure_logging,
)

__all__ = [
    "RenderLogger",
    "RenderStats",
    "configure_logging",
]
