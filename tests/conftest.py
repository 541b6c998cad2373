import pytest
from django.conf import settings

from tally import Ref


def pytest_configure():
    settings.configure(
        INSTALLED_APPS=[
            "django.contrib.contenttypes",
            "tally",
        ],
        DATABASES={},
        USE_TZ=True,
    )


@pytest.fixture
def changes():
    """Collects the (value, old_value, attr) tuples a Ref notifies."""
    return []


@pytest.fixture
def watched_ref(changes):
    ref = Ref(0, name="count")
    ref.subscribe(lambda value, old_value, attr: changes.append((value, old_value, attr)))
    return ref
