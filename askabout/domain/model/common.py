"""Shared base of the AskAbout entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable entity.

    Changes go through ``model_copy(update=...)`` and are persisted by a
    repository; votes and ratings are never mutated in place.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
