from django.apps import AppConfig

class TasksConfig(AppConfig):
    name = 'apps.tasks'  # pełna ścieżka z 'apps.'
    label = 'tasks'
    verbose_name = 'Daily Tasks'
