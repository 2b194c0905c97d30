from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class GeneratePlayerRequest(BaseModel):
    player_name: Optional[str] = Field(default=None, alias="playerName")

    model_config = ConfigDict(populate_by_name=True)


class CompareRequest(BaseModel):
    players: Optional[List[str]] = None


class ChatRequest(BaseModel):
    message: Optional[str] = None
    context: Optional[str] = None
