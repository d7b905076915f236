# apps/calendar_app/domain/mini_apps.py
# Rekordy mini-aplikacji w kształcie, w jakim czytają je adaptery kalendarza.
import datetime
from dataclasses import dataclass, field
from typing import List, Optional, Union

from apps.core.domain.entities import Priority

DateLike = Union[datetime.date, datetime.datetime]


@dataclass
class Workout:
    id: str
    name: str
    date: DateLike
    completed: bool = False
    type: str = 'strength'  # strength, cardio, flexibility, sports
    duration: int = 0  # minuty


@dataclass
class WorkoutPlan:
    name: str
    exercises: List[str] = field(default_factory=list)
    estimated_duration: int = 0  # minuty


@dataclass
class Meal:
    id: str
    name: str
    emoji: str = ""
    tags: List[str] = field(default_factory=list)
    prep_time: Optional[int] = None


@dataclass
class Friend:
    id: str
    name: str
    last_contact: DateLike
    birthday: Optional[datetime.date] = None
    notes: str = ""


@dataclass
class Trip:
    id: str
    destination: str
    dates: str  # tekst z mini-aplikacji, np. "March 15-28, 2026"
    status: str = 'planning'
    fund_progress: int = 0


@dataclass
class SavingsGoal:
    id: str
    name: str
    target: float
    current: float = 0
    deadline: Optional[str] = None  # np. "March 2026"


@dataclass
class AgendaItem:
    """Termin z mini-aplikacji, która sama trzyma daty (business, family, events)."""
    id: str
    title: str
    date: DateLike
    time: Optional[datetime.time] = None
    priority: Priority = Priority.MEDIUM
    completed: bool = False
    emoji: str = ""
    description: str = ""
