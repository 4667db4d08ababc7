"""
Board assembly: category axis, point axis and the category x points grid.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .models import BoardModel, ClueRecord
from .normalize import normalize_row, resolve_category
from .rules import CATEGORY_COUNT, PLACEHOLDER_CATEGORY, POINT_VALUES
from .tokenizer import read_rows

logger = logging.getLogger(__name__)


def category_axis(row_categories: Iterable[str]) -> List[str]:
    """First CATEGORY_COUNT distinct categories in first-seen order, padded with placeholders."""
    seen: Dict[str, None] = {}
    for category in row_categories:
        if category and category not in seen:
            seen[category] = None
            if len(seen) == CATEGORY_COUNT:
                break

    categories = list(seen)
    slot = len(categories)
    while len(categories) < CATEGORY_COUNT:
        slot += 1
        placeholder = PLACEHOLDER_CATEGORY.format(slot)
        # a real category may already use the placeholder name
        if placeholder not in seen:
            categories.append(placeholder)
    return categories


def assemble(records: Sequence[ClueRecord], row_categories: Sequence[str]) -> BoardModel:
    categories = category_axis(row_categories)

    # first occurrence of each (category, points) wins
    first: Dict[Tuple[str, int], ClueRecord] = {}
    for record in records:
        first.setdefault((record.category, record.points), record)

    lookup: Dict[str, Dict[int, Optional[ClueRecord]]] = {
        category: {points: first.get((category, points)) for points in POINT_VALUES}
        for category in categories
    }
    return BoardModel(categories=categories, point_values=list(POINT_VALUES), lookup=lookup)


def build_board(text: str) -> BoardModel:
    """text -> rows -> clue records -> board. Pure; never raises on bad data."""
    rows = read_rows(text)
    records = [r for r in (normalize_row(row) for row in rows) if r is not None]
    board = assemble(records, [resolve_category(row) for row in rows])

    logger.info(
        "built board: %d rows, %d usable, %d clues placed",
        len(rows), len(records), board.clue_count,
    )
    return board
