# apps/calendar_app/domain/templates.py
import datetime
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from apps.core.domain.entities import AspectTag, ObjectiveKind, ObjectiveLevel, Priority
from apps.core.exceptions import NotFoundError


@dataclass(frozen=True)
class Recurrence:
    pattern: str  # 'daily', 'weekly', 'monthly'
    frequency: int = 1  # co ile (interwał RRULE)
    end_after_occurrences: Optional[int] = None


@dataclass(frozen=True)
class TemplateEvent:
    id: str
    title: str
    aspect_tag: AspectTag
    kind: ObjectiveKind
    relative_days: int = 0  # dni od startu szablonu (0 = ten sam dzień, -1 = dzień wcześniej)
    start_time: Optional[datetime.time] = None
    duration_minutes: Optional[int] = None
    is_all_day: bool = False
    priority: Priority = Priority.MEDIUM
    description: str = ""
    location: str = ""
    emoji: str = ""
    recurrence: Optional[Recurrence] = None


@dataclass(frozen=True)
class TemplateObjective:
    id: str
    title: str
    level: ObjectiveLevel
    aspect_tag: AspectTag
    kind: ObjectiveKind
    priority: Priority = Priority.MEDIUM
    description: str = ""
    success_criteria: Tuple[str, ...] = ()
    estimated_duration_days: int = 1


@dataclass(frozen=True)
class CalendarTemplate:
    id: str
    name: str
    category: str  # productivity, work, personal, social, health, custom
    description: str = ""
    tags: Tuple[str, ...] = ()
    events: Tuple[TemplateEvent, ...] = ()
    objectives: Tuple[TemplateObjective, ...] = ()


def _at(hour: int, minute: int = 0) -> datetime.time:
    return datetime.time(hour, minute)


TEMPLATE_CATALOG: Dict[str, CalendarTemplate] = {t.id: t for t in (
    CalendarTemplate(
        id='morning-routine',
        name='Morning Routine',
        category='productivity',
        description='Start your day right with mindfulness, exercise, and healthy habits',
        tags=('health', 'productivity', 'mindfulness'),
        events=(
            TemplateEvent(
                id='meditation', title='Morning Meditation',
                description='10 minutes of mindfulness meditation',
                aspect_tag=AspectTag.TRAINING, kind=ObjectiveKind.PERSONAL,
                duration_minutes=10, start_time=_at(7), priority=Priority.HIGH,
            ),
            TemplateEvent(
                id='exercise', title='Daily Exercise',
                description='Cardio or strength training session',
                aspect_tag=AspectTag.TRAINING, kind=ObjectiveKind.PERSONAL,
                duration_minutes=45, start_time=_at(7, 15), priority=Priority.HIGH,
            ),
            TemplateEvent(
                id='breakfast', title='Healthy Breakfast',
                description='Nutritious morning meal preparation',
                aspect_tag=AspectTag.FOOD, kind=ObjectiveKind.PERSONAL,
                duration_minutes=20, start_time=_at(8, 15), priority=Priority.MEDIUM,
            ),
        ),
        objectives=(
            TemplateObjective(
                id='daily-exercise-goal', title='Complete daily exercise routine',
                level=ObjectiveLevel.DAILY,
                aspect_tag=AspectTag.TRAINING, kind=ObjectiveKind.PERSONAL, priority=Priority.HIGH,
                success_criteria=('Complete full workout', 'Track progress', 'Feel energized'),
            ),
        ),
    ),
    CalendarTemplate(
        id='client-meeting',
        name='Client Presentation Prep',
        category='work',
        description='Comprehensive preparation for important client meetings and presentations',
        tags=('business', 'meetings', 'presentation'),
        events=(
            TemplateEvent(
                id='research', title='Client Research',
                description='Review client history, needs, and previous interactions',
                aspect_tag=AspectTag.BUSINESS, kind=ObjectiveKind.JOB,
                duration_minutes=60, relative_days=-1, start_time=_at(14), priority=Priority.HIGH,
            ),
            TemplateEvent(
                id='content-prep', title='Content Preparation',
                description='Prepare presentation materials and talking points',
                aspect_tag=AspectTag.BUSINESS, kind=ObjectiveKind.JOB,
                duration_minutes=120, relative_days=-1, start_time=_at(16), priority=Priority.HIGH,
            ),
            TemplateEvent(
                id='rehearsal', title='Presentation Rehearsal',
                description='Practice delivery and handle Q&A preparation',
                aspect_tag=AspectTag.BUSINESS, kind=ObjectiveKind.JOB,
                duration_minutes=90, start_time=_at(9), priority=Priority.HIGH,
            ),
            TemplateEvent(
                id='meeting', title='Client Meeting',
                description='Main presentation and discussion',
                aspect_tag=AspectTag.BUSINESS, kind=ObjectiveKind.JOB,
                duration_minutes=120, start_time=_at(11), priority=Priority.HIGH,
                location='Conference Room A',
            ),
        ),
    ),
    CalendarTemplate(
        id='date-night',
        name='Romantic Date Night',
        category='personal',
        description='Plan a special evening with your partner',
        tags=('relationships', 'romance', 'personal'),
        events=(
            TemplateEvent(
                id='reservation', title='Restaurant Reservation',
                description='Book a table at a nice restaurant',
                aspect_tag=AspectTag.FRIENDS, kind=ObjectiveKind.PERSONAL,
                duration_minutes=10, relative_days=-3, start_time=_at(18), priority=Priority.MEDIUM,
            ),
            TemplateEvent(
                id='dinner', title='Romantic Dinner',
                description='Enjoy a special meal together',
                aspect_tag=AspectTag.FRIENDS, kind=ObjectiveKind.PERSONAL,
                duration_minutes=120, start_time=_at(19), priority=Priority.HIGH,
                location='Favorite Restaurant',
            ),
        ),
    ),
    CalendarTemplate(
        id='weekly-review',
        name='Weekly Review & Planning',
        category='productivity',
        description='Reflect on the past week and plan for the next one',
        tags=('planning', 'reflection', 'productivity'),
        events=(
            TemplateEvent(
                id='reflection', title='Week Reflection',
                description='Review accomplishments, challenges, and lessons learned',
                aspect_tag=AspectTag.BUSINESS, kind=ObjectiveKind.PERSONAL,
                duration_minutes=45, start_time=_at(17), priority=Priority.HIGH,
            ),
            TemplateEvent(
                id='planning', title='Next Week Planning',
                description='Set goals and priorities for the coming week',
                aspect_tag=AspectTag.BUSINESS, kind=ObjectiveKind.PERSONAL,
                duration_minutes=60, start_time=_at(17, 45), priority=Priority.HIGH,
            ),
        ),
    ),
    CalendarTemplate(
        id='workout-routine',
        name='Weekly Workout Routine',
        category='health',
        description='Structured exercise plan for the week',
        tags=('fitness', 'health', 'exercise'),
        events=(
            TemplateEvent(
                id='monday-cardio', title='Monday Cardio',
                description='45-minute cardio session',
                aspect_tag=AspectTag.TRAINING, kind=ObjectiveKind.PERSONAL,
                duration_minutes=45, start_time=_at(7), priority=Priority.HIGH,
                recurrence=Recurrence('weekly'),
            ),
            TemplateEvent(
                id='wednesday-strength', title='Wednesday Strength Training',
                description='Full body strength workout',
                aspect_tag=AspectTag.TRAINING, kind=ObjectiveKind.PERSONAL,
                duration_minutes=60, relative_days=2, start_time=_at(7), priority=Priority.HIGH,
                recurrence=Recurrence('weekly'),
            ),
            TemplateEvent(
                id='friday-yoga', title='Friday Yoga',
                description='Relaxing yoga session',
                aspect_tag=AspectTag.TRAINING, kind=ObjectiveKind.PERSONAL,
                duration_minutes=45, relative_days=4, start_time=_at(18), priority=Priority.MEDIUM,
                recurrence=Recurrence('weekly'),
            ),
        ),
    ),
)}


def get_template(template_id: str) -> CalendarTemplate:
    try:
        return TEMPLATE_CATALOG[template_id]
    except KeyError:
        raise NotFoundError("Template", template_id) from None
