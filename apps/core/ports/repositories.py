# apps/core/ports/repositories.py
from abc import ABC, abstractmethod

from apps.core.domain.record_set import RecordSet


class IRecordSetRepository(ABC):
    @abstractmethod
    def load(self) -> RecordSet:
        """Zwraca zbiór rekordów (pusty, jeśli nic jeszcze nie zapisano)."""
        pass

    @abstractmethod
    def save(self, record_set: RecordSet) -> None:
        pass
