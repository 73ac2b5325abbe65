"""AuctionEngine: eligibility filtering and deterministic ranking."""

from __future__ import annotations

from typing import Iterable

from .campaign import Campaign
from .match_semantics import (
    DENIED_BUDGET,
    DENIED_ENDED,
    DENIED_KEYWORDS,
    DENIED_NOT_STARTED,
)


def rank_key(campaign: Campaign) -> tuple[float, int, int]:
    """Sort key where the smallest value is the auction winner."""
    return (-campaign.cpm, campaign.end_timestamp, campaign.campaign_id)


class AuctionEngine:
    """Pick one campaign per ad request. Holds no state and takes no locks."""

    def apply(
        self,
        campaigns: Iterable[Campaign],
        keywords: set[str] | frozenset[str],
        now: int,
    ) -> list[Campaign]:
        """Return only campaigns that pass every eligibility rule."""
        return [c for c in campaigns if self._allowed(c, keywords, now)]

    def reason(self, campaign: Campaign, keywords: set[str] | frozenset[str], now: int) -> str:
        """Return audit reason for this campaign: 'allowed' or 'denied: <reason>'."""
        if now < campaign.start_timestamp:
            return f"denied: {DENIED_NOT_STARTED}"
        if now >= campaign.end_timestamp:
            return f"denied: {DENIED_ENDED}"
        if campaign.committed_impressions >= campaign.max_impressions:
            return f"denied: {DENIED_BUDGET}"
        if not campaign.matches(keywords):
            return f"denied: {DENIED_KEYWORDS}"
        return "allowed"

    def select(
        self,
        campaigns: Iterable[Campaign],
        keywords: set[str] | frozenset[str],
        now: int,
    ) -> Campaign | None:
        """Return the winning candidate, or None when nothing is eligible."""
        candidates = self.apply(campaigns, keywords, now)
        if not candidates:
            return None
        return min(candidates, key=rank_key)

    def _allowed(self, campaign: Campaign, keywords: set[str] | frozenset[str], now: int) -> bool:
        if not campaign.is_active(now):
            return False
        if campaign.committed_impressions >= campaign.max_impressions:
            return False
        return campaign.matches(keywords)
