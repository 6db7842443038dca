from __future__ import annotations

from pydantic import BaseModel, EmailStr, Field


class Credentials(BaseModel):
    """Validated AuthInput (createUser / signin)."""

    email: EmailStr
    password: str = Field(min_length=1, max_length=256)
