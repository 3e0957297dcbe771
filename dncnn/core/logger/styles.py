"""
Logging style constants for consistent visual hierarchy.

Provides unified formatting symbols and separators used across all logging modules.
"""

from __future__ import annotations

import logging


class LogStyle:
    """Unified logging style constants for consistent visual hierarchy."""

    # Header centering width (matches separator length)
    HEADER_WIDTH = 72

    # Level 1: Session headers
    HEAVY = "━" * HEADER_WIDTH

    # Level 2: Subsections / table rules
    LIGHT = "─" * HEADER_WIDTH

    # Symbols
    ARROW = "»"
    BULLET = "•"
    WARNING = "⚠"
    FAILURE = "✗"
    SUCCESS = "✓"

    # Indentation
    INDENT = "  "
    DOUBLE_INDENT = "    "

    @staticmethod
    def log_phase_header(
        log: logging.Logger,
        title: str,
        style: str | None = None,
    ) -> None:
        """
        Log a centered phase header with separator lines.

        Args:
            log: Logger instance to write to.
            title: Header text (centered).
            style: Separator string (defaults to ``LogStyle.HEAVY``).
        """
        sep = style if style is not None else LogStyle.HEAVY
        log.info("")
        log.info(sep)
        log.info(f"{title:^{LogStyle.HEADER_WIDTH}}")
        log.info(sep)
