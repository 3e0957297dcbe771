"""
Network Summary Logging.

Formatted logging of an assembled layer sequence: one header block with the
resolved build geometry, followed by a per-layer table. Inputs are plain
rows so this module stays independent of the descriptor types.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from ..constants import LOGGER_NAME
from .styles import LogStyle

if TYPE_CHECKING:  # pragma: no cover
    from ..config import BuildConfig

logger = logging.getLogger(LOGGER_NAME)


def log_build_header(cfg: "BuildConfig", logger_instance: logging.Logger | None = None) -> None:
    """
    Log the resolved build parameters.

    Args:
        cfg: Validated build configuration.
        logger_instance: Logger instance to use (defaults to module logger)
    """
    log = logger_instance or logger
    h, w, c = cfg.image_shape

    log.info(
        f"{LogStyle.INDENT}{LogStyle.ARROW} {'Architecture':<14}: DnCNN | "
        f"Input: {h}x{w}x{c} | Depth: {cfg.depth} | Width: {cfg.width}"
    )
    log.info(
        f"{LogStyle.INDENT}{LogStyle.ARROW} {'Variants':<14}: "
        f"activation={cfg.activation_kind.value} | loss={cfg.loss_kind.value}"
    )


def log_network_summary(
    rows: Sequence[dict[str, Any]],
    logger_instance: logging.Logger | None = None,
) -> None:
    """
    Log a per-layer table followed by the total parameter count.

    Args:
        rows: Layer rows with ``index``, ``kind``, ``detail`` and ``params`` keys.
        logger_instance: Logger instance to use (defaults to module logger)
    """
    log = logger_instance or logger

    log.info(LogStyle.LIGHT)
    log.info(f"{'#':>4}  {'Layer':<14}{'Detail':<40}{'Params':>10}")
    log.info(LogStyle.LIGHT)
    for row in rows:
        log.info(f"{row['index']:>4}  {row['kind']:<14}{row['detail']:<40}{row['params']:>10,}")
    log.info(LogStyle.LIGHT)

    total = sum(row["params"] for row in rows)
    log.info(
        f"{LogStyle.INDENT}{LogStyle.SUCCESS} {len(rows)} layers | Parameters: {total:,}"
    )
