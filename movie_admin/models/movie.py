"""
Pydantic schemas for Movie records and the add-movie form draft.
"""

import math
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from movie_admin.errors import FormValidationError
from movie_admin.config import PayloadCasing

# Draft field name -> request body key, per casing convention
CAMEL_KEYS = {
    "title": "title",
    "director": "director",
    "genre": "genre",
    "lead_actor_1": "leadActor1",
    "lead_actor_2": "leadActor2",
    "release_date": "releaseDate",
    "sales_millions": "salesMillions",
    "poster_url": "posterUrl",
}
SNAKE_KEYS = {name: name for name in CAMEL_KEYS}

DRAFT_FIELDS = tuple(CAMEL_KEYS)


class Movie(BaseModel):
    """
    Canonical movie record.

    Accepts camelCase or snake_case keys from the server so the rest of the
    application never has to care which one the backend speaks.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: int | str | None = None
    title: str
    director: str | None = None
    genre: str | None = None
    lead_actor_1: str | None = Field(None, validation_alias=AliasChoices("lead_actor_1", "leadActor1"))
    lead_actor_2: str | None = Field(None, validation_alias=AliasChoices("lead_actor_2", "leadActor2"))
    release_date: str | None = Field(None, validation_alias=AliasChoices("release_date", "releaseDate"))
    sales_millions: float | None = Field(None, validation_alias=AliasChoices("sales_millions", "salesMillions"))
    poster_url: str | None = Field(None, validation_alias=AliasChoices("poster_url", "posterUrl"))


class MovieDraft(BaseModel):
    """Client-only staging copy of a movie; every field is the raw input string."""

    model_config = ConfigDict(validate_assignment=True)

    title: str = ""
    director: str = ""
    genre: str = ""
    lead_actor_1: str = ""
    lead_actor_2: str = ""
    release_date: str = ""
    sales_millions: str = ""
    poster_url: str = ""

    def validate_required(self) -> None:
        """
        Check the draft can be submitted.

        Raises:
            FormValidationError: If the title is blank or sales is not a number
        """
        if not self.title.strip():
            raise FormValidationError("Title is required", field="title")
        self._parse_sales()

    def _parse_sales(self) -> float | None:
        raw = self.sales_millions.strip()
        if not raw:
            return None
        try:
            value = float(raw)
        except ValueError:
            raise FormValidationError("Sales (millions) must be a number", field="sales_millions")
        if not math.isfinite(value):
            raise FormValidationError("Sales (millions) must be a number", field="sales_millions")
        return value

    def to_payload(self, casing: PayloadCasing = "camel") -> dict[str, Any]:
        """
        Serialize the draft into a request body.

        Empty strings become None; sales is converted to a number.

        Args:
            casing: 'camel' (leadActor1) or 'snake' (lead_actor_1) keys

        Returns:
            JSON-ready dict
        """
        keys = SNAKE_KEYS if casing == "snake" else CAMEL_KEYS
        values: dict[str, Any] = {name: getattr(self, name) or None for name in DRAFT_FIELDS}
        values["sales_millions"] = self._parse_sales()
        return {keys[name]: value for name, value in values.items()}
