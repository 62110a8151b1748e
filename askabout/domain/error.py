"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when an operation conflicts with the current state."""

    pass


class AlreadyVotedError(ConflictError):
    """Raised when liking an already liked subject (or disliking a disliked one)."""

    def __init__(self, state: str, subject_type: str, subject_id: str):
        self.state = state
        self.subject_type = subject_type
        self.subject_id = subject_id
        super().__init__(f"{subject_type} {subject_id} is already {state}")


class StorageError(DomainError):
    """Raised when persisting a change fails. The transaction is rolled back."""

    pass
