class QuestError(Exception):
    """Base exception for all quest store errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class QuestConflictError(QuestError):
    """Raised when a create would break a store invariant (duplicate title, missing deadline)."""
    pass


class QuestNotFoundError(QuestError):
    """Raised when an operation references an id that is not in the store."""

    def __init__(self, quest_id: str) -> None:
        self.quest_id = quest_id
        super().__init__(f"Quest with ID: {quest_id} not found")
