"""
Pytest configuration and shared fixtures for semantic-attributes tests.
"""

import pytest
from faker import Faker

from semantic_attributes.core import localization

fake_instance = Faker()


@pytest.fixture
def fake():
    """Provide a Faker instance for generating hosts, urls and words."""
    return fake_instance


@pytest.fixture
def locale_dir(tmp_path):
    """Point message lookup at an empty application `lang/` directory, in English."""
    original_path = localization.get_locale_path()
    original_locale = localization.get_locale()

    lang_dir = tmp_path / "lang"
    lang_dir.mkdir()
    localization.set_locale_path(str(lang_dir))
    localization.set_locale("en")

    yield lang_dir

    localization.set_locale_path(original_path)
    localization.set_locale(original_locale)


class Record:
    """A stand-in for a host model: plain attributes plus whatever methods a test attaches."""

    def __init__(self, **attributes):
        self.__dict__.update(attributes)


@pytest.fixture
def record_cls():
    return Record
