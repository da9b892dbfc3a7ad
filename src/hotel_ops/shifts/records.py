"""Build Windows out of the HH:MM string pairs stored by the persistence layer."""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from ..common.datetime_utils import parse_hhmm
from .model import Window

logger = logging.getLogger(__name__)


def window_from_fields(row: Mapping[str, Any], start_key: str, end_key: str) -> Optional[Window]:
    """Window from ``row[start_key]``/``row[end_key]``, or None.

    A half-filled or unparsable pair is dropped with a warning rather than raised.
    """
    raw_start, raw_end = row.get(start_key), row.get(end_key)
    if not raw_start and not raw_end:
        return None

    start, end = parse_hhmm(raw_start), parse_hhmm(raw_end)
    if start is None or end is None:
        logger.warning(
            "Ignoring incomplete window %s=%r %s=%r", start_key, raw_start, end_key, raw_end
        )
        return None
    if start == end:
        logger.warning("Ignoring empty window %s=%s", start_key, raw_start)
        return None
    return Window(start, end)


def break_from_fields(
    row: Mapping[str, Any],
    start_key: str,
    end_key: str,
    flag_key: Optional[str] = None,
) -> Optional[Window]:
    """Like :func:`window_from_fields` but honours an explicit ``has_break`` style flag."""
    if flag_key is not None and flag_key in row and not row.get(flag_key):
        return None
    return window_from_fields(row, start_key, end_key)
