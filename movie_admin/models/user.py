"""
Pydantic schemas for the read-only registered users list.
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class User(BaseModel):
    """
    Canonical user record.

    Backends disagree on naming (id/userId/user_id, createdAt/created_at);
    every accepted spelling is resolved here, once.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: int | str | None = Field(None, validation_alias=AliasChoices("id", "userId", "user_id"))
    username: str | None = None
    email: str | None = None
    role: str | None = None
    status: str | None = None
    created_at: str | int | None = Field(None, validation_alias=AliasChoices("created_at", "createdAt"))
