# apps/core/forms.py
from django import forms

from apps.core.domain.entities import AspectTag, ObjectiveKind, Priority, choices, plain
from apps.core.exceptions import ValidationError


class StringListField(forms.Field):
    """Lista krótkich tekstów (np. kryteria sukcesu). Przyjmuje listę albo tekst wielowierszowy."""

    def to_python(self, value):
        if value in self.empty_values:
            return []
        if isinstance(value, str):
            value = value.splitlines()
        return [str(item).strip() for item in value if str(item).strip()]


class OptionalIdField(forms.CharField):
    """Klucz obcy (ID rodzica). Pusty -> None, czyli rekord niepodpięty."""

    def __init__(self, **kwargs):
        kwargs.setdefault('required', False)
        super().__init__(**kwargs)

    def to_python(self, value):
        value = super().to_python(value)
        return value or None


class TaggedRecordForm(forms.Form):
    """Pola wspólne dla celów, zadań i wydarzeń ręcznych."""
    title = forms.CharField(max_length=200)
    description = forms.CharField(required=False)
    aspect_tag = forms.TypedChoiceField(choices=choices(AspectTag), coerce=AspectTag)
    kind = forms.TypedChoiceField(choices=choices(ObjectiveKind), coerce=ObjectiveKind)
    priority = forms.TypedChoiceField(choices=choices(Priority), coerce=Priority)


def clean_or_raise(form_class, data: dict, what: str) -> dict:
    """Waliduje słownik danych formularzem Django i zwraca cleaned_data albo rzuca ValidationError."""
    form = form_class(data={name: plain(value) for name, value in data.items()})
    if not form.is_valid():
        raise ValidationError.from_form(form, what)
    return form.cleaned_data
