from django.apps import AppConfig


class CalendarAppConfig(AppConfig):
    name = 'apps.calendar_app'
    label = 'calendar_app'
    verbose_name = 'Unified Calendar'
