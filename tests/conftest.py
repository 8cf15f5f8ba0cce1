"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from dataclasses import dataclass

from idcollection import IdentityCollection


@pytest.fixture
def collection():
    """Fresh collection with the default identity."""
    return IdentityCollection()


@dataclass(slots=True)
class FixtureTask:
    _id: int
    title: str
    status: str = "open"


@pytest.fixture
def task_cls():
    return FixtureTask


@pytest.fixture
def tasks(task_cls):
    """Collection holding three tasks inserted as 1, 2, 3."""
    c = IdentityCollection()
    c.add(
        task_cls(1, "write", "open"),
        task_cls(2, "review", "done"),
        task_cls(3, "ship", "open"),
    )
    return c
