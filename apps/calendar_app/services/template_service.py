# apps/calendar_app/services/template_service.py
import datetime
import logging
from typing import List

from apps.calendar_app.domain.templates import CalendarTemplate, TemplateObjective
from apps.core.domain.entities import ObjectiveLevel
from apps.goals.domain.periods import month_start, week_start
from apps.goals.services.objective_store import ObjectiveStore

logger = logging.getLogger(__name__)


def _objective_fields(objective: TemplateObjective, start_date: datetime.date) -> dict:
    fields = {
        'title': objective.title,
        'description': objective.description,
        'aspect_tag': objective.aspect_tag,
        'kind': objective.kind,
        'priority': objective.priority,
    }
    if objective.level == ObjectiveLevel.DAILY:
        fields['target_date'] = start_date
        return fields

    fields['success_criteria'] = list(objective.success_criteria)
    fields['estimated_duration_days'] = objective.estimated_duration_days
    if objective.level == ObjectiveLevel.WEEKLY:
        fields['target_week_start'] = week_start(start_date)
    else:
        fields['target_month'] = month_start(start_date)
    return fields


def apply_template_objectives(store: ObjectiveStore, template: CalendarTemplate,
                              start_date: datetime.date) -> List[str]:
    """
    Tworzy cele zdefiniowane w szablonie. Wszystkie albo żaden:
    błąd przy którymkolwiek przywraca zbiór rekordów sprzed wywołania.
    """
    snapshot = store.record_set.copy()
    created = []
    try:
        for objective in template.objectives:
            created.append(store.add(objective.level, _objective_fields(objective, start_date)))
    except Exception:
        store.record_set.replace_contents(snapshot)
        raise

    logger.info("Applied template %s: %s objective(s) from %s", template.id, len(created), start_date)
    return created
