# apps/calendar_app/forms.py
from django import forms

from apps.calendar_app.ports.event_source import EventStatus
from apps.core.domain.entities import choices
from apps.core.forms import TaggedRecordForm


class ManualEventForm(TaggedRecordForm):
    date = forms.DateField()
    time = forms.TimeField(required=False)  # puste = cały dzień
    status = forms.TypedChoiceField(choices=choices(EventStatus), coerce=EventStatus)
    emoji = forms.CharField(max_length=8, required=False)
