"""Vote state transitions.

The table below is the whole rating contract. ``None`` means the actor has
never voted on the subject; NEUTRAL behaves the same except the record is
reused.

    current     like          dislike        reset
    None        LIKED +1      DISLIKED -1    not found
    NEUTRAL     LIKED +1      DISLIKED -1    not found
    LIKED       conflict      DISLIKED -2    NEUTRAL -1
    DISLIKED    LIKED +2      conflict       NEUTRAL +1
"""

from dataclasses import dataclass
from typing import Optional

from askabout.domain.error import AlreadyVotedError, NotFoundError
from askabout.domain.value import Subject, VoteAction, VoteState

_TRANSITIONS: dict[tuple[Optional[VoteState], VoteAction], tuple[VoteState, int]] = {
    (None, VoteAction.LIKE): (VoteState.LIKED, 1),
    (VoteState.NEUTRAL, VoteAction.LIKE): (VoteState.LIKED, 1),
    (VoteState.DISLIKED, VoteAction.LIKE): (VoteState.LIKED, 2),
    (None, VoteAction.DISLIKE): (VoteState.DISLIKED, -1),
    (VoteState.NEUTRAL, VoteAction.DISLIKE): (VoteState.DISLIKED, -1),
    (VoteState.LIKED, VoteAction.DISLIKE): (VoteState.DISLIKED, -2),
    (VoteState.LIKED, VoteAction.RESET): (VoteState.NEUTRAL, -1),
    (VoteState.DISLIKED, VoteAction.RESET): (VoteState.NEUTRAL, 1),
}


@dataclass(frozen=True)
class VoteTransition:
    """Planned change of a vote and the matching rating delta."""

    previous: Optional[VoteState]
    new: VoteState
    delta: int

    @property
    def creates_vote(self) -> bool:
        return self.previous is None


def plan_transition(
    current: Optional[VoteState], action: VoteAction, subject: Subject
) -> VoteTransition:
    """Compute the transition for an action on the current vote state.

    Args:
        current: Current vote state, None if the actor never voted
        action: Requested action
        subject: Subject being voted on (used in error messages)

    Returns:
        The planned transition

    Raises:
        AlreadyVotedError: If liking a liked subject or disliking a disliked one
        NotFoundError: If resetting when there is no current vote
    """
    planned = _TRANSITIONS.get((current, action))
    if planned is not None:
        new_state, delta = planned
        return VoteTransition(previous=current, new=new_state, delta=delta)

    if action == VoteAction.RESET or current is None:
        raise NotFoundError("Vote", f"{subject.subject_type.value}:{subject.subject_id}")

    # Only same-direction votes are left
    raise AlreadyVotedError(
        current.value, subject.subject_type.value, str(subject.subject_id)
    )
