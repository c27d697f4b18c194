"""
Topic API schemas.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, StrictStr


class NewTopicRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    slug: StrictStr
    description: StrictStr
