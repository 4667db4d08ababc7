"""
Row normalization.

Responsibilities:
- decode uploaded bytes to text (encoding detection via charset-normalizer)
- resolve header aliases for each raw row
- gate rows on category + points
- canonicalize video links
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Sequence

from charset_normalizer import from_bytes

from .media import is_video_url, resolve_embed
from .models import ClueRecord
from .rules import HEADER_ALIASES, POINT_VALUES
from .tokenizer import RawRow

logger = logging.getLogger(__name__)


def decode_csv_bytes(raw: bytes) -> str:
    """
    Decode uploaded CSV bytes to text.

    Rules:
    - A UTF-8 BOM means utf-8-sig, no detection.
    - Otherwise use charset-normalizer's best guess, then plain UTF-8.
    - Last resort is UTF-8 with replacement characters, so this never raises.
    """
    if raw.startswith(b"\xef\xbb\xbf"):
        return raw.decode("utf-8-sig", errors="replace")

    match = from_bytes(raw).best()
    decode_used = match.encoding if match is not None else "utf-8"

    try:
        return raw.decode(decode_used)
    except (UnicodeDecodeError, LookupError):
        logger.debug("decode with %s failed, falling back to utf-8", decode_used)

    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        return raw.decode("utf-8", errors="replace")


def first_alias(row: RawRow, aliases: Sequence[str], require_value: bool = False) -> str:
    """Trimmed value of the first alias present in row ('' if none)."""
    for name in aliases:
        if name not in row:
            continue
        value = (row[name] or "").strip()
        if value or not require_value:
            return value
    return ""


def resolve_category(row: RawRow) -> str:
    return first_alias(row, HEADER_ALIASES["category"], require_value=True)


def parse_points(value: str) -> Optional[int]:
    # float() accepts digit separators ("1_00")
    if value is None or "_" in value:
        return None
    try:
        n = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(n) or n not in POINT_VALUES:
        return None
    return int(n)


def normalize_row(row: RawRow) -> Optional[ClueRecord]:
    """Build a ClueRecord from a raw row, or None if category/points are unusable."""
    category = resolve_category(row)
    if not category:
        logger.debug("dropping row without category: %r", row)
        return None

    points = parse_points(first_alias(row, HEADER_ALIASES["points"]))
    if points is None:
        logger.debug("dropping row with invalid points: %r", row)
        return None

    clue_text = first_alias(row, HEADER_ALIASES["clue"])
    video_url = first_alias(row, HEADER_ALIASES["video"])

    # older sheets put the video link straight into the clue cell
    video_source = video_url or (clue_text if is_video_url(clue_text) else "")

    return ClueRecord(
        category=category,
        points=points,
        clue_text=clue_text,
        answer_text=first_alias(row, HEADER_ALIASES["answer"]),
        picture_url=first_alias(row, HEADER_ALIASES["picture"]),
        video_url=video_url,
        video_embed_url=resolve_embed(video_source) if is_video_url(video_source) else "",
    )
