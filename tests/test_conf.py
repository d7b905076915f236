import datetime

import pytest

from apps.core.conf import dashboard_setting, dashboard_time
from apps.core.exceptions import NotFoundError, ValidationError
from apps.core.forms import StringListField, clean_or_raise
from apps.goals.forms import WeeklyObjectiveForm


def test_dashboard_setting_defaults_and_overrides(settings):
    settings.DASHBOARD = {'CATCH_UP_AFTER_DAYS': 30}

    assert dashboard_setting('CATCH_UP_AFTER_DAYS') == 30
    assert dashboard_setting('BIRTHDAY_LOOKAHEAD_DAYS') == 60


def test_dashboard_setting_without_dashboard_dict(settings):
    del settings.DASHBOARD

    assert dashboard_setting('MAX_CATCH_UP_SUGGESTIONS') == 2


def test_unknown_dashboard_setting():
    with pytest.raises(KeyError):
        dashboard_setting('COFFEE_TIME')


def test_dashboard_time(settings):
    settings.DASHBOARD = {'DINNER_TIME': '19:45', 'TRAINING_SESSION_TIME': datetime.time(5, 30)}

    assert dashboard_time('DINNER_TIME') == datetime.time(19, 45)
    assert dashboard_time('TRAINING_SESSION_TIME') == datetime.time(5, 30)


def test_string_list_field():
    field = StringListField(required=False)

    assert field.clean(['  a ', '', 'b']) == ['a', 'b']
    assert field.clean('first\nsecond\n') == ['first', 'second']
    assert field.clean(None) == []


def test_clean_or_raise_collects_form_errors():
    with pytest.raises(ValidationError) as exc_info:
        clean_or_raise(WeeklyObjectiveForm, {'title': '', 'aspect_tag': 'business'}, 'weekly objective')

    error = exc_info.value
    assert str(error).startswith('Invalid weekly objective:')
    assert {'title', 'kind', 'priority', 'status'} <= set(error.errors)
    assert isinstance(error, ValueError)


def test_not_found_error_message():
    error = NotFoundError('Objective', 'abc')

    assert str(error) == 'Objective not found: abc'
    assert isinstance(error, LookupError)
