"""Common type definitions for the triage core."""
from typing import Any, Mapping, Union

# Type aliases for clarity
AnswerValue = Union[bool, str]
RawAnswers = Mapping[str, Any]  # {"fever": True, "q4": "Mild (1-3)", ...}
