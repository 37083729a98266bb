"""In-memory storage behind the order records API."""

import logging
import threading
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class OrderRecordRepository:
    """Keeps flat order records keyed by id.

    Records are written once and never updated in place.

    Attributes
    ----------
    records : Dict[str, Dict[str, Any]]
        Stored record bodies by id

    Notes
    -----
    All access goes through a lock; the repository may be shared across
    server worker threads.
    """

    def __init__(self):
        self.records: Dict[str, Dict[str, Any]] = {}
        self._lock = threading.Lock()

    def add(self, record: Dict[str, Any]) -> None:
        """Store a record body.

        Raises
        ------
        KeyError
            If a record with the same id already exists
        """
        record_id = record["id"]
        with self._lock:
            if record_id in self.records:
                raise KeyError(record_id)
            self.records[record_id] = record
        logger.info(f"Stored order record {record_id}")

    def get(self, record_id: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            return self.records.get(record_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self.records)
