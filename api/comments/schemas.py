"""
Comment API schemas.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, StrictStr

from core.params import VoteIncrement


class NewCommentRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    username: StrictStr
    body: StrictStr


class VotesUpdateRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    inc_votes: VoteIncrement
