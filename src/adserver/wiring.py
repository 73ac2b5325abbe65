"""Composition root — single place where all wiring happens.

Call ``build_decision_service()`` for a fresh service (tests), or
``get_decision_service()`` for the process-wide one every transport shares.
No ad-hoc construction elsewhere.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from .config.runtime import RuntimeSettings, get_settings
from .services.campaign_store import CampaignStore
from .services.decision_service import DecisionService


def build_decision_service(settings: RuntimeSettings | None = None) -> DecisionService:
    """Construct a DecisionService over a new, empty CampaignStore."""
    settings = settings or get_settings()
    return DecisionService(
        store=CampaignStore(id_offset=settings.campaign_id_offset),
        base_url=settings.base_url,
        token_mint_attempts=settings.token_mint_attempts,
        logger=logging.getLogger("adserver.decisions"),
    )


@lru_cache(maxsize=1)
def get_decision_service() -> DecisionService:
    """Return the singleton DecisionService (its store is the process's campaign table)."""
    return build_decision_service()
