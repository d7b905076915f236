# apps/goals/forms.py
from django import forms

from apps.core.domain.entities import choices
from apps.core.forms import OptionalIdField, StringListField, TaggedRecordForm
from apps.goals.domain.entities import ObjectiveStatus
from apps.goals.domain.periods import month_start, week_start


class ObjectiveForm(TaggedRecordForm):
    status = forms.TypedChoiceField(choices=choices(ObjectiveStatus), coerce=ObjectiveStatus)
    progress_percentage = forms.IntegerField(min_value=0, max_value=100, required=False)
    estimated_duration_days = forms.IntegerField(min_value=1, required=False)
    success_criteria = StringListField(required=False)

    def clean_progress_percentage(self):
        # Brak wartości = 0% (nowy cel)
        return self.cleaned_data.get('progress_percentage') or 0


class MonthlyObjectiveForm(ObjectiveForm):
    target_month = forms.DateField(required=False)

    def clean_target_month(self):
        value = self.cleaned_data.get('target_month')
        return month_start(value) if value else None


class WeeklyObjectiveForm(ObjectiveForm):
    monthly_objective_id = OptionalIdField()
    target_week_start = forms.DateField(required=False)

    def clean_target_week_start(self):
        value = self.cleaned_data.get('target_week_start')
        return week_start(value) if value else None
