"""Response models for a scored transcript pair."""
from __future__ import annotations

from pydantic import BaseModel, Field


class WerCountsModel(BaseModel):
    sub: int = 0
    ins: int = 0
    # "del" is a keyword, so the field is aliased
    dele: int = Field(0, alias="del")
    nw: int = 0

    model_config = {"populate_by_name": True}


class WerResponse(BaseModel):
    """Summary line, error breakdown and highlighted diff for one pair."""
    summary: str
    details: str
    html: str
    wer: float
    counts: WerCountsModel
