# apps/goals/services/objective_store.py
import copy
import logging
import uuid
from dataclasses import replace
from typing import Callable, List, Optional, Tuple

from django.utils import timezone

from apps.core.domain.entities import ObjectiveLevel, plain
from apps.core.domain.record_set import AnyObjective, RecordSet
from apps.core.exceptions import NotFoundError, ValidationError
from apps.core.forms import clean_or_raise
from apps.goals.domain.entities import MonthlyObjectiveEntity, ObjectiveStatus, WeeklyObjectiveEntity
from apps.goals.domain.services.progress import ProgressAggregator
from apps.goals.filters import filter_objectives
from apps.goals.forms import MonthlyObjectiveForm, WeeklyObjectiveForm
from apps.tasks.domain.entities import DailyTaskEntity, TaskStatus
from apps.tasks.domain.services.transitions import toggled_status, transition
from apps.tasks.forms import DailyTaskForm

logger = logging.getLogger(__name__)

ENTITIES = {
    ObjectiveLevel.MONTHLY: MonthlyObjectiveEntity,
    ObjectiveLevel.WEEKLY: WeeklyObjectiveEntity,
    ObjectiveLevel.DAILY: DailyTaskEntity,
}

FORMS = {
    ObjectiveLevel.MONTHLY: MonthlyObjectiveForm,
    ObjectiveLevel.WEEKLY: WeeklyObjectiveForm,
    ObjectiveLevel.DAILY: DailyTaskForm,
}

# poziom dziecka -> (poziom rodzica, pole klucza obcego)
PARENT_LINKS = {
    ObjectiveLevel.WEEKLY: (ObjectiveLevel.MONTHLY, 'monthly_objective_id'),
    ObjectiveLevel.DAILY: (ObjectiveLevel.WEEKLY, 'weekly_objective_id'),
}

# poziom rodzica -> (poziom dzieci, pole klucza obcego)
CHILD_LINKS = {parent: (child, fk) for child, (parent, fk) in PARENT_LINKS.items()}

READ_ONLY_FIELDS = frozenset({'id', 'created_at', 'completed_at'})
LIST_FILTER_KEYS = frozenset({'kind', 'aspect_tag', 'status', 'parent_id'})


def as_level(value) -> ObjectiveLevel:
    try:
        return ObjectiveLevel(plain(value))
    except ValueError:
        raise ValidationError(
            f"Unknown objective level: {value}", {'level': [f"Select a valid choice. {value} is not one of the available choices."]}
        ) from None


class ObjectiveStore:
    """
    Jedyne miejsce, przez które zmieniają się cele i zadania.

    Każda operacja zapisu:
    1. waliduje dane formularzem Django (zanim cokolwiek zostanie zapisane),
    2. pracuje na kopii roboczej zbioru rekordów,
    3. przelicza postęp (ProgressAggregator) na kopii,
    4. podmienia zawartość wstrzykniętego RecordSet.
    Błąd na dowolnym etapie zostawia zbiór rekordów bez zmian.
    """

    def __init__(
            self,
            record_set: RecordSet,
            aggregator: Optional[ProgressAggregator] = None,
            id_factory: Optional[Callable[[], str]] = None,
            clock: Optional[Callable] = None,
    ):
        self.record_set = record_set
        self.aggregator = aggregator or ProgressAggregator()
        self._new_id = id_factory or (lambda: uuid.uuid4().hex)
        self._now = clock or timezone.now

    # --- Odczyt (zawsze kopie) ---

    def get(self, record_id: str) -> AnyObjective:
        _, record = self._locate(record_id)
        return copy.deepcopy(record)

    def list(self, level, filters: Optional[dict] = None) -> List[AnyObjective]:
        level = as_level(level)
        filters = dict(filters or {})

        unknown = set(filters) - LIST_FILTER_KEYS
        if unknown:
            raise ValidationError(
                f"Unknown filter: {', '.join(sorted(unknown))}",
                {name: ["Unknown filter."] for name in sorted(unknown)},
            )

        records = list_copy(self.record_set.collection(level).values())
        parent_id = filters.pop('parent_id', None)
        if parent_id:
            records = [record for record in records if record.parent_id == parent_id]
        return filter_objectives(records, **filters)

    def children(self, record_id: str) -> List[AnyObjective]:
        level, _ = self._locate(record_id)
        if level not in CHILD_LINKS:
            return []
        child_level, fk = CHILD_LINKS[level]
        return list_copy(
            child for child in self.record_set.collection(child_level).values()
            if getattr(child, fk) == record_id
        )

    # --- Zapis ---

    def recompute(self) -> None:
        """Jawne przeliczenie całej hierarchii (np. po wczytaniu danych z repozytorium)."""
        self.record_set.replace_contents(self.aggregator.aggregate(self.record_set))

    def add(self, level, fields: dict) -> str:
        level = as_level(level)
        fields = dict(fields or {})
        form_class = FORMS[level]
        self._check_editable(level, form_class, fields)

        defaults = self._form_data(ENTITIES[level](id='', title=''), form_class)
        data = clean_or_raise(form_class, {**defaults, **fields}, f"{level.value} objective")

        draft = self.record_set.copy()
        self._check_parent(draft, level, data)

        now = self._now()
        record = ENTITIES[level](id=self._new_id(), created_at=now, **data)
        if record.is_completed():
            record.completed_at = now
        draft.collection(level)[record.id] = record
        self._commit(draft)

        logger.info("Created %s objective %s: %s", level.value, record.id, record.title)
        return record.id

    def edit(self, record_id: str, partial_fields: dict) -> None:
        level, current = self._locate(record_id)
        partial = dict(partial_fields or {})
        form_class = FORMS[level]
        self._check_editable(level, form_class, partial)

        if 'progress_percentage' in partial and self._has_children(level, record_id):
            raise ValidationError(
                f"Progress of {level.value} objective {record_id} is derived from its linked children",
                {'progress_percentage': ["Progress is computed from linked children."]},
            )

        data = clean_or_raise(
            form_class, {**self._form_data(current, form_class), **partial}, f"{level.value} objective"
        )

        draft = self.record_set.copy()
        self._check_parent(draft, level, data, current=current)

        new_status = data.pop('status')
        updated = replace(draft.collection(level)[record_id], **data)
        draft.collection(level)[record_id] = self._with_status(updated, new_status)
        self._commit(draft)

        logger.debug("Edited %s objective %s: %s", level.value, record_id, ", ".join(sorted(partial)))

    def set_status(self, record_id: str, status) -> None:
        level, current = self._locate(record_id)
        status = self._as_status(level, status)

        draft = self.record_set.copy()
        draft.collection(level)[record_id] = self._with_status(draft.collection(level)[record_id], status)
        self._commit(draft)

        logger.debug("Status of %s objective %s: %s -> %s", level.value, record_id, current.status.value, status.value)

    def toggle_task(self, task_id: str) -> TaskStatus:
        level, task = self._locate(task_id)
        if level != ObjectiveLevel.DAILY:
            raise ValidationError(
                f"Only daily tasks can be toggled: {task_id}",
                {'status': ["Only daily tasks can be toggled."]},
            )
        new_status = toggled_status(task.status)
        self.set_status(task_id, new_status)
        return new_status

    def remove(self, record_id: str) -> None:
        level, record = self._locate(record_id)

        draft = self.record_set.copy()
        del draft.collection(level)[record_id]

        # Kaskada: dzieci zostają, tracą tylko powiązanie
        orphaned = 0
        if level in CHILD_LINKS:
            child_level, fk = CHILD_LINKS[level]
            for child in draft.collection(child_level).values():
                if getattr(child, fk) == record_id:
                    setattr(child, fk, None)
                    orphaned += 1

        self._commit(draft)
        logger.info("Removed %s objective %s: %s (unlinked children: %s)", level.value, record_id, record.title, orphaned)

    # --- Pomocnicze ---

    def _locate(self, record_id: str) -> Tuple[ObjectiveLevel, AnyObjective]:
        found = self.record_set.find(record_id)
        if found is None:
            raise NotFoundError("Objective", record_id)
        return found

    def _has_children(self, level: ObjectiveLevel, record_id: str) -> bool:
        if level not in CHILD_LINKS:
            return False
        child_level, fk = CHILD_LINKS[level]
        return any(getattr(child, fk) == record_id for child in self.record_set.collection(child_level).values())

    @staticmethod
    def _check_editable(level: ObjectiveLevel, form_class, fields: dict) -> None:
        if level == ObjectiveLevel.DAILY and 'progress_percentage' in fields:
            raise ValidationError(
                "Progress of a daily task follows its status",
                {'progress_percentage': ["Progress of a daily task follows its status."]},
            )

        read_only = sorted(set(fields) & READ_ONLY_FIELDS)
        if read_only:
            raise ValidationError(
                f"Read-only fields: {', '.join(read_only)}",
                {name: ["This field cannot be changed."] for name in read_only},
            )

        unknown = sorted(set(fields) - set(form_class.base_fields))
        if unknown:
            raise ValidationError(
                f"Unknown fields: {', '.join(unknown)}",
                {name: ["Unknown field."] for name in unknown},
            )

    @staticmethod
    def _form_data(record, form_class) -> dict:
        return {name: getattr(record, name) for name in form_class.base_fields}

    @staticmethod
    def _check_parent(draft: RecordSet, level: ObjectiveLevel, data: dict, current=None) -> None:
        if level not in PARENT_LINKS:
            return
        parent_level, fk = PARENT_LINKS[level]
        parent_id = data.get(fk)
        if not parent_id:
            return
        # Niezmienione powiązanie nie jest sprawdzane ponownie
        if current is not None and getattr(current, fk) == parent_id:
            return
        if parent_id not in draft.collection(parent_level):
            raise NotFoundError(f"{parent_level.value.title()} objective", parent_id)

    @staticmethod
    def _as_status(level: ObjectiveLevel, status):
        status_cls = TaskStatus if level == ObjectiveLevel.DAILY else ObjectiveStatus
        try:
            return status_cls(plain(status))
        except ValueError:
            raise ValidationError(
                f"Invalid {level.value} status: {status}",
                {'status': [f"Select a valid choice. {status} is not one of the available choices."]},
            ) from None

    def _with_status(self, record: AnyObjective, status):
        """Status i completed_at zmieniają się razem."""
        if isinstance(record, DailyTaskEntity):
            return transition(record, status, self._now())
        if record.status == status:
            return record
        completed_at = self._now() if status == ObjectiveStatus.COMPLETED else None
        return replace(record, status=status, completed_at=completed_at)

    def _commit(self, draft: RecordSet) -> None:
        self.record_set.replace_contents(self.aggregator.aggregate(draft))


def list_copy(records) -> List[AnyObjective]:
    return [copy.deepcopy(record) for record in records]
