"""Test configuration and fixtures for the lending registry.

This conftest.py provides:
1. A fixed, manually advanced clock for deterministic due times
2. Configuration isolation - each test gets a fresh registry configuration
3. A populated registry mirroring a small real catalog
"""

import os
from collections.abc import Generator
from datetime import datetime, timedelta

import pytest

from lending_registry.config import RegistryConfig, reset_config
from lending_registry.member import Member
from lending_registry.models.item import CirculatingItem
from lending_registry.registry import Registry

START_TIME = datetime(2024, 3, 1, 10, 0, 0)


class FixedClock:
    """Clock that only moves when told to."""

    def __init__(self, start: datetime = START_TIME):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, days: int = 0, hours: int = 0) -> None:
        self.now += timedelta(days=days, hours=hours)


# === Configuration Fixtures ===


@pytest.fixture(autouse=True)
def isolated_environment() -> Generator[None, None, None]:
    """Keep LENDING_REGISTRY_* variables and the config singleton out of tests."""
    saved = {key: value for key, value in os.environ.items() if key.startswith("LENDING_REGISTRY_")}
    for key in saved:
        del os.environ[key]
    reset_config()

    yield

    reset_config()
    os.environ.update(saved)


@pytest.fixture
def test_config() -> RegistryConfig:
    """Provide a registry configuration with default loan policy."""
    return RegistryConfig(_env_file=None)


@pytest.fixture
def start_time() -> datetime:
    return START_TIME


@pytest.fixture
def clock(start_time: datetime) -> FixedClock:
    return FixedClock(start_time)


# === Catalog Fixtures ===


@pytest.fixture
def book() -> CirculatingItem:
    return CirculatingItem.book("B001", "TypeScript Guide", author="John Doe")


@pytest.fixture
def catalog(book: CirculatingItem) -> list[CirculatingItem]:
    """One item of every kind."""
    return [
        book,
        CirculatingItem.magazine("M001", "Tech Monthly", issue_date="2023-09"),
        CirculatingItem.dvd("D001", "Learning TS", duration_minutes=120, director="Jane Director"),
        CirculatingItem.media("LM001", "Intro to AI", media_type="Video", duration_minutes=90),
        CirculatingItem.report("RR001", "AI in Education", author="Dr. Smith", year=2024),
    ]


@pytest.fixture
def alice() -> Member:
    return Member(id="MEM001", name="Alice")


@pytest.fixture
def bob() -> Member:
    return Member(id="MEM002", name="Bob")


@pytest.fixture
def registry(
    test_config: RegistryConfig,
    clock: FixedClock,
    catalog: list[CirculatingItem],
    alice: Member,
    bob: Member,
) -> Registry:
    """Provide a registry holding the sample catalog and two members."""
    registry = Registry(config=test_config, clock=clock)
    for item in catalog:
        registry.add_item(item)
    registry.add_member(alice)
    registry.add_member(bob)
    return registry
