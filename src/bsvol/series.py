"""Read a price series from a text file.

One number per line is the usual layout, but any whitespace (and commas,
for single-row CSV exports) separates values.  There is no header row.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Optional

import numpy as np

from .errors import InputUnreadableError

__all__ = ["read_price_series"]

logger = logging.getLogger(__name__)

_SEP = re.compile(r"[\s,]+")


def read_price_series(
    path: str | Path,
    *,
    max_count: Optional[int] = None,
) -> np.ndarray:
    """Parse every number in *path* into a 1-D float array.

    Parameters
    ----------
    path : str or Path
        Text file with decimal prices in chronological order.
    max_count : int, optional
        Keep only the first ``max_count`` values (the legacy tool stopped
        at 999).  Default: unbounded.

    Raises
    ------
    InputUnreadableError
        The file cannot be opened or read, or a token is not a number.
    """
    if max_count is not None and max_count < 0:
        raise ValueError(f"max_count must be non-negative, got {max_count}")

    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise InputUnreadableError(f"cannot read price series {path}: {e}") from e

    tokens = [t for t in _SEP.split(text) if t]
    values = []
    for i, tok in enumerate(tokens):
        try:
            values.append(float(tok))
        except ValueError as e:
            raise InputUnreadableError(
                f"{path}: value #{i + 1} ({tok!r}) is not a number"
            ) from e

    if max_count is not None and len(values) > max_count:
        logger.warning(
            "%s: %d values found, keeping the first %d", path, len(values), max_count
        )
        values = values[:max_count]

    logger.debug("read %d prices from %s", len(values), path)
    return np.array(values, dtype=float)
