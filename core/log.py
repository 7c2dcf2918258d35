"""Logging helper.

Modules obtain their logger with `logging.getLogger(__name__)` and never
configure logging themselves. Top-level scripts call `setup_default_logging`.
"""
import logging


def setup_default_logging(level: int | str = "INFO") -> None:
    """Configure the root logger once; no-op if it already has handlers."""
    if isinstance(level, str):
        lvl = getattr(logging, level.upper(), logging.INFO)
    else:
        lvl = int(level)

    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
