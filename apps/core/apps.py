from django.apps import AppConfig


class CoreConfig(AppConfig):
    name = 'apps.core'  # Ważne: pełna ścieżka
    label = 'core'      # Ważne: krótka nazwa
    verbose_name = 'Life Dashboard Core'
