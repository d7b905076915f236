# apps/core/domain/entities.py
from enum import Enum


class AspectTag(str, Enum):
    TRAINING = 'training'
    FOOD = 'food'
    SPORTS = 'sports'
    FILMS = 'films'
    FINANCE = 'finance'
    BUSINESS = 'business'
    TRAVEL = 'travel'
    FAMILY = 'family'
    FRIENDS = 'friends'
    EVENTS = 'events'


class ObjectiveKind(str, Enum):
    PERSONAL = 'personal'
    JOB = 'job'


class Priority(str, Enum):
    LOW = 'low'
    MEDIUM = 'medium'
    HIGH = 'high'


# Wartość filtra "wszystko" (filtr tożsamościowy)
ALL = 'all'


def choices(enum_cls):
    """Lista (value, label) dla pól ChoiceField w formularzach."""
    return [(member.value, member.value.replace('_', ' ').title()) for member in enum_cls]


def plain(value):
    """Enum -> jego wartość; reszta bez zmian (formularze Django operują na stringach)."""
    if isinstance(value, Enum):
        return value.value
    return value


class ObjectiveLevel(str, Enum):
    MONTHLY = 'monthly'
    WEEKLY = 'weekly'
    DAILY = 'daily'
