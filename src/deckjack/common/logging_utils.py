# src/deckjack/common/logging_utils.py

import logging
import os
from typing import Any, Optional

# Environment switches:
#   LOG_LEVEL=DEBUG / INFO / WARNING / ERROR
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Call once at program start (deckjack.client.main.main)."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_draw(
    logger: logging.Logger,
    owner: str,                   # "player" / "dealer"
    card: Any,
    total: Optional[int] = None,
    note: str = "",
    level: int = logging.DEBUG,
) -> None:
    """
    Unified draw log.
    card: the Card that was applied to the hand.
    total: the hand total after the draw, if known.
    """
    base = f"[DRAW][{owner}] {card}"
    if total is not None:
        base += f" total={total}"
    if note:
        base += f" | {note}"

    logger.log(level, base)
