import threading

from .base import AnswerRecord, BaseAnswerStore


class InMemoryAnswerStore(BaseAnswerStore):
    """Process-local answer store, grouped by session."""

    def __init__(self):
        self._lock = threading.Lock()
        self._records: dict[str, list[AnswerRecord]] = {}

    def save(self, record: AnswerRecord) -> None:
        with self._lock:
            self._records.setdefault(record.session_id, []).append(record)

    def records_for(self, session_id: str) -> list[AnswerRecord]:
        with self._lock:
            return list(self._records.get(session_id, ()))

    def clear(self, session_id: str) -> None:
        with self._lock:
            self._records.pop(session_id, None)
