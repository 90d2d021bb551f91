"""Error taxonomy for the triage core."""


class TriageError(Exception):
    """Base error for triage core failures."""


class MalformedAnswerError(TriageError, ValueError):
    """Raised when an answer does not match the question's answer type."""

    def __init__(self, question_id: str, message: str):
        super().__init__(message)
        self.question_id = question_id


class UnknownQuestionError(TriageError, KeyError):
    """Raised when an answer references a question missing from the catalog."""

    def __init__(self, question_id: str):
        super().__init__(question_id)
        self.question_id = question_id

    def __str__(self) -> str:
        return f"Unknown question id '{self.question_id}'."


class InvalidSessionStateError(TriageError):
    """Raised when an operation is not allowed in the session's current state."""


class SessionNotFoundError(TriageError, KeyError):
    """Raised when a session id is not registered."""

    def __init__(self, session_id: str):
        super().__init__(session_id)
        self.session_id = session_id

    def __str__(self) -> str:
        return f"Session '{self.session_id}' not found."
