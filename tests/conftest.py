"""Shared fakes and fixtures.

No real clock or randomness: time is fixed and tokens are predictable
unless a test asks otherwise.
"""

from __future__ import annotations

import itertools

import pytest

from adserver.domain.campaign import CampaignSpec
from adserver.services.campaign_store import CampaignStore
from adserver.services.decision_service import DecisionService

NOW = 1_700_000_000
BASE_URL = "http://ads.test"


class FixedClock:
    """Returns a settable instant."""

    def __init__(self, now: int = NOW):
        self.current = now

    def now(self) -> int:
        return self.current


class SequentialTokenProvider:
    """tok-1, tok-2, ... so tests can predict tokens."""

    def __init__(self, prefix: str = "tok"):
        self._counter = itertools.count(1)
        self._prefix = prefix

    def new_token(self) -> str:
        return f"{self._prefix}-{next(self._counter)}"


def make_spec(**overrides) -> CampaignSpec:
    defaults = {
        "start_timestamp": NOW - 3600,
        "end_timestamp": NOW + 3600,
        "target_keywords": ["shoes"],
        "max_impressions": 100,
        "cpm": 10.0,
    }
    defaults.update(overrides)
    return CampaignSpec(**defaults)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def store() -> CampaignStore:
    return CampaignStore(id_offset=1000)


@pytest.fixture
def service(store, clock) -> DecisionService:
    return DecisionService(
        store=store,
        base_url=BASE_URL,
        token_provider=SequentialTokenProvider(),
        clock=clock,
    )
