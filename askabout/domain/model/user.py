"""User aggregate root.

Users ask questions, comment and vote. Their reputation is tracked per
topic by Rating records.
"""

from datetime import datetime

from pydantic import Field

from askabout.domain.model.common import DomainModel
from askabout.domain.value import Handle, UserId


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    handle: Handle
    created_at: datetime = Field(default_factory=datetime.now)
