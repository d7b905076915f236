# apps/core/exceptions.py
from typing import Dict, List, Optional


class DashboardError(Exception):
    """Bazowy błąd rdzenia dashboardu."""


class ValidationError(DashboardError, ValueError):
    """Puste lub niepoprawne pole przy tworzeniu/edycji."""

    def __init__(self, message: str, errors: Optional[Dict[str, List[str]]] = None):
        super().__init__(message)
        self.errors = errors or {}

    @classmethod
    def from_form(cls, form, what: str = "record"):
        # form.errors to ErrorDict -> zamieniamy na zwykły słownik stringów
        errors = {field: [str(e) for e in field_errors] for field, field_errors in form.errors.items()}
        fields = ", ".join(sorted(errors))
        return cls(f"Invalid {what}: {fields}", errors)


class NotFoundError(DashboardError, LookupError):
    """Operacja wskazuje na ID, którego nie ma w bieżącym zbiorze rekordów."""

    def __init__(self, kind: str, record_id):
        super().__init__(f"{kind} not found: {record_id}")
        self.kind = kind
        self.record_id = record_id
