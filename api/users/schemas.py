"""
User API schemas.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, StrictStr


class NewUserRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    username: StrictStr
    name: StrictStr
    # Optional and nullable; omitted means no avatar.
    avatar_url: StrictStr | None = None
