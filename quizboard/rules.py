"""
Deterministic board rules.

Header aliases are consulted in order; the first spelling present in a row
(with a non-empty value, for category) wins.
"""

from types import MappingProxyType

CATEGORY_COUNT = 6
POINT_VALUES = (100, 200, 300, 400, 500)
PLACEHOLDER_CATEGORY = "Category {}"

# "Catagory" is how the original source spreadsheet spells the column.
HEADER_ALIASES = MappingProxyType({
    "category": ("Catagory", "Category", "category", "CATEGORY"),
    "points": ("Points",),
    "clue": ("Clue",),
    "answer": ("Answer",),
    "picture": ("Picture", "picture", "PICTURE", "Image", "image", "IMAGE"),
    "video": (
        "Youtube",
        "YouTube",
        "youtube",
        "YOUTUBE",
        "You Tube",
        "Youtube Link",
        "YouTube URL",
    ),
})

VIDEO_HOSTS = ("youtube.com", "youtu.be")
EMBED_BASE = "https://www.youtube.com/embed/"
