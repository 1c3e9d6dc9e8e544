"""
Add-movie form state: the draft plus its submit lifecycle.
"""

import logging
from enum import Enum
from typing import Callable, Optional

from movie_admin.errors import AdminApiError
from movie_admin.models import DRAFT_FIELDS, Movie, MovieDraft

logger = logging.getLogger(__name__)


class FormPhase(str, Enum):
    IDLE = "idle"
    EDITING = "editing"
    SUBMITTING = "submitting"


class FormStateManager:
    """
    Owns the add-movie draft for one admin session.

    Phases: IDLE -> EDITING -> SUBMITTING -> IDLE (success) or EDITING with an
    error (failure). Edits are refused while SUBMITTING.
    """

    def __init__(self):
        self.draft = MovieDraft()
        self.phase = FormPhase.IDLE
        self.error: Optional[str] = None
        # Bumped on every reset so Streamlit widgets get fresh keys
        self.revision = 0

    @property
    def inputs_disabled(self) -> bool:
        return self.phase is FormPhase.SUBMITTING

    def update(self, field: str, value: str) -> None:
        """
        Set one draft field.

        Raises:
            KeyError: If field is not a draft field
            RuntimeError: If a submit is in flight
        """
        if field not in DRAFT_FIELDS:
            raise KeyError(field)
        if self.inputs_disabled:
            raise RuntimeError("Form is locked while a submit is in flight")
        setattr(self.draft, field, value)
        self.phase = FormPhase.EDITING

    def update_many(self, values: dict) -> None:
        """Set several draft fields at once (a submitted Streamlit form)."""
        for field, value in values.items():
            self.update(field, value)

    def clear_error(self) -> None:
        """Drop the last submit error without touching the draft."""
        self.error = None

    def clear(self) -> None:
        """Reset the draft to empty and drop any error."""
        self.draft = MovieDraft()
        self.error = None
        self.phase = FormPhase.IDLE
        self.revision += 1

    def submit(self, create_fn: Callable[[MovieDraft], Movie]) -> Optional[Movie]:
        """
        Validate and submit the draft.

        Args:
            create_fn: Called with the draft once validation passes, usually
                CatalogClient.create

        Returns:
            The created movie, or None if validation or the request failed
            (the message is left in self.error)
        """
        self.error = None
        try:
            self.draft.validate_required()
        except AdminApiError as e:
            self.error = str(e)
            self.phase = FormPhase.EDITING
            return None

        self.phase = FormPhase.SUBMITTING
        try:
            created = create_fn(self.draft)
        except AdminApiError as e:
            logger.warning("Add movie failed: %s", e)
            self.error = str(e)
            self.phase = FormPhase.EDITING
            return None

        self.clear()
        return created
