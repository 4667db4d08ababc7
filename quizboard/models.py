from __future__ import annotations

from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from .rules import POINT_VALUES


class ClueRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: str
    points: int
    clue_text: str = ""
    answer_text: str = ""
    picture_url: str = ""
    video_url: str = ""
    video_embed_url: str = ""


class BoardModel(BaseModel):
    """
    Fixed 6 x 5 board. Every (category, points) cell is present in `lookup`;
    cells without a clue hold None.
    """

    categories: List[str]
    point_values: List[int] = Field(default_factory=lambda: list(POINT_VALUES))
    lookup: Dict[str, Dict[int, Optional[ClueRecord]]] = Field(default_factory=dict)

    def cell(self, category: str, points: int) -> Optional[ClueRecord]:
        return self.lookup[category][points]

    def column(self, category: str) -> List[Optional[ClueRecord]]:
        cells = self.lookup[category]
        return [cells[p] for p in self.point_values]

    @property
    def clue_count(self) -> int:
        return sum(
            1 for cells in self.lookup.values() for clue in cells.values() if clue is not None
        )


class BoardResponse(BoardModel):
    source: str = Field(default="text", examples=["questions.csv"])


class BoardTextRequest(BaseModel):
    text: str


class HealthResponse(BaseModel):
    ok: bool = True
