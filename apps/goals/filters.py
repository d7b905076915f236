# apps/goals/filters.py
from typing import Iterable, List

from django import forms

from apps.core.domain.entities import ALL, AspectTag, ObjectiveKind, choices
from apps.core.filters import apply_filter_form
from apps.goals.domain.entities import ObjectiveStatus
from apps.tasks.domain.entities import TaskStatus

ALL_CHOICE = [(ALL, 'All')]

# Statusy celów i zadań w jednym filtrze (zadania mają bogatszy zestaw)
STATUS_CHOICES = ALL_CHOICE + choices(ObjectiveStatus) + [
    choice for choice in choices(TaskStatus) if choice[0] not in {s.value for s in ObjectiveStatus}
]


class ObjectiveFilterForm(forms.Form):
    kind = forms.ChoiceField(choices=ALL_CHOICE + choices(ObjectiveKind), required=False)
    aspect_tag = forms.ChoiceField(choices=ALL_CHOICE + choices(AspectTag), required=False)
    status = forms.ChoiceField(choices=STATUS_CHOICES, required=False)


def filter_objectives(objectives: Iterable, kind=None, aspect_tag=None, status=None) -> List:
    """Czysty filtr celów/zadań; niczego nie modyfikuje i nie zmienia kolejności."""
    params = {'kind': kind, 'aspect_tag': aspect_tag, 'status': status}
    return apply_filter_form(ObjectiveFilterForm, objectives, params, "objective filter")
