"""Shared fixtures for pytest tests."""

import pytest

from extarg import Ref


@pytest.fixture
def events() -> list[tuple[str, object]]:
    """Collect (source, value) pairs in the order callbacks fire."""
    return []


@pytest.fixture
def record(events):
    """Build callbacks that append to the shared events list."""

    def make(source: str):
        def callback(*args):
            events.append((source, args[0] if args else None))

        return callback

    return make


@pytest.fixture
def flag() -> Ref[bool]:
    """Provide a boolean reference cell starting out False."""
    return Ref(False)


@pytest.fixture
def keyword(faker) -> str:
    """Generate a random keyword."""
    return f"-{faker.slug()}"
