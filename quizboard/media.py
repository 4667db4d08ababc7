"""
Video link canonicalization.

Share/watch links are rewritten to the embeddable player form
https://www.youtube.com/embed/<id>[?start=<seconds>]. Anything that cannot be
resolved is returned unchanged.
"""

from __future__ import annotations

import logging
import re
from typing import Optional
from urllib.parse import parse_qs, urlsplit, urlunsplit

from .rules import EMBED_BASE, VIDEO_HOSTS

logger = logging.getLogger(__name__)

# Tried in order; first match wins.
_ID_PATTERNS = (
    re.compile(r"youtu\.be/([^/?&#]+)", re.IGNORECASE),
    re.compile(r"[?&]v=([^&#]+)", re.IGNORECASE),
    re.compile(r"/live/([^/?&#]+)", re.IGNORECASE),
    re.compile(r"/shorts/([^/?&#]+)", re.IGNORECASE),
)

_DURATION = re.compile(r"(?:\d+[hms])+", re.IGNORECASE)
_DURATION_PART = re.compile(r"(\d+)([hms])", re.IGNORECASE)
_UNIT_SECONDS = {"h": 3600, "m": 60, "s": 1}


def is_video_url(value: str) -> bool:
    if not value:
        return False
    lowered = value.lower()
    return any(host in lowered for host in VIDEO_HOSTS)


def parse_offset(value: str) -> int:
    """'90' -> 90, '1h2m3s' -> 3723, '30s1m' -> 90; anything else -> 0."""
    value = (value or "").strip()
    if not value:
        return 0
    if value.isdecimal():
        return int(value)

    if _DURATION.fullmatch(value) is None:
        return 0

    total = 0
    units = set()
    for amount, unit in _DURATION_PART.findall(value):
        unit = unit.lower()
        # each unit at most once, in any order
        if unit in units:
            return 0
        units.add(unit)
        total += int(amount) * _UNIT_SECONDS[unit]
    return total


def start_offset(url: str) -> int:
    """Start time in seconds from a `t` (preferred) or `start` query parameter."""
    try:
        params = parse_qs(urlsplit(url).query)
    except ValueError:
        return 0

    for key in ("t", "start"):
        if key in params and params[key]:
            return parse_offset(params[key][0])
    return 0


def extract_video_id(url: str) -> Optional[str]:
    for pattern in _ID_PATTERNS:
        m = pattern.search(url)
        if m:
            return m.group(1)
    return None


def _with_start(embed_url: str, offset: int) -> str:
    parts = urlsplit(embed_url)
    if offset <= 0 or "start" in parse_qs(parts.query, keep_blank_values=True):
        return embed_url
    query = f"{parts.query}&start={offset}" if parts.query else f"start={offset}"
    return urlunsplit(parts._replace(query=query))


def resolve_embed(url: str) -> str:
    """Return the embeddable form of a video link, or `url` unchanged."""
    try:
        video_id = extract_video_id(url)
        offset = start_offset(url)

        if video_id:
            embed = EMBED_BASE + video_id
            return f"{embed}?start={offset}" if offset > 0 else embed

        if "/embed/" in url:
            return _with_start(url, offset)
    except ValueError:
        logger.debug("could not parse video url %r", url)
        return url

    logger.debug("no video id in %r, keeping as-is", url)
    return url
