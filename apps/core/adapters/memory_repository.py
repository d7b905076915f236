# apps/core/adapters/memory_repository.py
import logging
from typing import Optional

from apps.core.domain.record_set import RecordSet
from apps.core.ports.repositories import IRecordSetRepository

logger = logging.getLogger(__name__)


class InMemoryRecordSetRepository(IRecordSetRepository):
    """Repozytorium w pamięci. Zawsze głębokie kopie: wczytany zbiór nie współdzieli obiektów z zapisanym."""

    def __init__(self, initial: Optional[RecordSet] = None):
        self._stored = initial.copy() if initial is not None else RecordSet()
        self.saves = 0

    def load(self) -> RecordSet:
        return self._stored.copy()

    def save(self, record_set: RecordSet) -> None:
        self._stored = record_set.copy()
        self.saves += 1
        logger.debug(
            "Saved record set: %s monthly, %s weekly, %s daily, %s manual events",
            len(record_set.monthly), len(record_set.weekly), len(record_set.daily), len(record_set.manual_events)
        )
