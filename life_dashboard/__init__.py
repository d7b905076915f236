# life_dashboard/__init__.py
import os


def setup(settings_module: str = 'life_dashboard.settings'):
    """Konfiguruje Django poza procesem serwera (np. w skryptach i powłoce aplikacji)."""
    import django

    os.environ.setdefault('DJANGO_SETTINGS_MODULE', settings_module)
    django.setup()
