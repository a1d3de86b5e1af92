"""Shared fixtures for the optkit test suite."""

import logging

import pytest

from optkit import allowed_enumerated, allowed_range, config, create_manager

logging.getLogger("optkit").setLevel(logging.DEBUG)


@pytest.fixture(autouse=True)
def restore_config():
    yield
    config.restore_defaults()


@pytest.fixture
def sample():
    return create_manager([("foo", 1), ("bar", 2), ("baz", "hello")])


@pytest.fixture
def ruled():
    return create_manager(
        [("direction", "up"), ("level", 2), ("label", None)],
        {
            "direction": allowed_enumerated("up", "down"),
            "level": allowed_range(0, 3),
        },
    )
