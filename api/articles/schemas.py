"""
Article API schemas.

Write bodies must match their key set exactly: `extra="forbid"` rejects
unknown keys and strict types reject e.g. `"inc_votes": "20"`.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, StrictStr

from core.params import VoteIncrement


class NewArticleRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    author: StrictStr
    title: StrictStr
    body: StrictStr
    topic: StrictStr
    article_img_url: StrictStr | None = None


class VotesUpdateRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    inc_votes: VoteIncrement
