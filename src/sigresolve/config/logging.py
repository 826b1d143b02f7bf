"""Logging helpers for sigresolve."""

from __future__ import annotations

import logging


def configure_logging(*, level: int | str = logging.WARNING, force: bool = False) -> None:
    """Initialise the root logger once with sensible defaults.

    Parameters mirror ``logging.basicConfig`` with a simplified contract: we default
    to WARNING so resolution stays quiet unless a catalog is inconsistent. Pass
    ``level="DEBUG"`` to trace every resolution, and ``force=True`` to reconfigure
    during tests.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
