# apps/core/filters.py
from typing import Iterable, List

from apps.core.domain.entities import ALL, plain
from apps.core.forms import clean_or_raise


def apply_filter_form(form_class, items: Iterable, params: dict, what: str) -> List:
    """
    Filtr predykatowy: pola formularza = atrybuty rekordu.
    Brak wartości lub 'all' -> filtr tożsamościowy. Kolejność zostaje zachowana.
    """
    cleaned = clean_or_raise(form_class, {k: v for k, v in params.items() if v is not None}, what)
    criteria = {name: value for name, value in cleaned.items() if value and value != ALL}
    return [
        item for item in items
        if all(plain(getattr(item, name)) == value for name, value in criteria.items())
    ]
