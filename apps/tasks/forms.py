#apps/tasks/forms.py
from django import forms

from apps.core.domain.entities import choices
from apps.core.forms import OptionalIdField, TaggedRecordForm
from apps.tasks.domain.entities import TaskStatus


class DailyTaskForm(TaggedRecordForm):
    status = forms.TypedChoiceField(choices=choices(TaskStatus), coerce=TaskStatus)
    weekly_objective_id = OptionalIdField()
    target_date = forms.DateField(required=False)
    estimated_duration_minutes = forms.IntegerField(min_value=1, required=False)
    actual_duration_minutes = forms.IntegerField(min_value=0, required=False)
