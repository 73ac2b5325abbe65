"""DecisionService: campaign creation, ad decisions and impression redemption."""

from __future__ import annotations

from collections import Counter
from typing import Any

from ..domain.auction_engine import AuctionEngine
from ..domain.campaign import AdDecision, CampaignSpec
from ..domain.errors import ImpressionTokenError, InvalidCampaign, InvalidRequest, UnknownImpression
from ..domain.validation import validate_campaign_spec, validate_keywords
from ..ports.clock import Clock, SystemClock
from ..ports.id_gen import ImpressionTokenProvider, UuidImpressionTokenProvider
from .campaign_store import CampaignStore


class DecisionService:
    """Orchestrates the auction and impression accounting over one CampaignStore.

    Every public operation runs its whole read-then-mutate sequence inside
    ``store.locked()``. Logging happens after the lock is released.
    """

    def __init__(
        self,
        store: CampaignStore,
        base_url: str,
        auction_engine: AuctionEngine | None = None,
        token_provider: ImpressionTokenProvider | None = None,
        clock: Clock | None = None,
        token_mint_attempts: int = 3,
        logger: Any = None,
    ) -> None:
        self._store = store
        self._base_url = base_url.rstrip("/")
        self._auction = auction_engine or AuctionEngine()
        self._tokens = token_provider or UuidImpressionTokenProvider()
        self._clock = clock or SystemClock()
        self._mint_attempts = max(1, token_mint_attempts)
        self._logger = logger

    @property
    def store(self) -> CampaignStore:
        return self._store

    def create_campaign(self, spec: CampaignSpec) -> int:
        """Store a new campaign and return its id. Raises InvalidCampaign."""
        result = validate_campaign_spec(spec)
        if not result.is_valid:
            raise InvalidCampaign(result.errors)
        campaign_id = self._store.create(spec)
        if self._logger:
            self._logger.info(
                "campaign_created",
                extra={
                    "campaign_id": campaign_id,
                    "keywords_count": len(spec.target_keywords),
                    "max_impressions": spec.max_impressions,
                    "cpm": spec.cpm,
                    "warnings": result.warnings,
                },
            )
        return campaign_id

    def select_campaign(self, keywords: list[str]) -> AdDecision | None:
        """Run the auction for ``keywords``.

        Returns the decision for the winning campaign, or None when no
        campaign is eligible. Raises InvalidRequest on an empty keyword list
        and ImpressionTokenError when no token could be minted; neither
        mutates the store.
        """
        checked = validate_keywords(keywords)
        if not checked.is_valid:
            raise InvalidRequest("; ".join(checked.errors))
        requested = frozenset(keywords)

        with self._store.locked():
            now = self._clock.now()
            campaigns = self._store.scan()
            winner = self._auction.select(campaigns, requested, now)
            if winner is None:
                decision = None
                denials = Counter(self._auction.reason(c, requested, now) for c in campaigns)
            else:
                campaign_id = winner.campaign_id
                token = self._mint_token()
                self._store.issue_token(campaign_id, token)
                decision = AdDecision(
                    campaign_id=campaign_id,
                    impression_token=token,
                    impression_url=self.impression_url(token),
                )
                remaining = winner.remaining_budget

        if self._logger:
            if decision is None:
                self._logger.info(
                    "ad_no_fill",
                    extra={
                        "keywords_count": len(requested),
                        "denials": dict(denials),
                        "warnings": checked.warnings,
                    },
                )
            else:
                self._logger.info(
                    "ad_decision",
                    extra={
                        "campaign_id": decision.campaign_id,
                        "keywords_count": len(requested),
                        "remaining_budget": remaining,
                        "warnings": checked.warnings,
                    },
                )
        return decision

    def redeem_impression(self, token: str) -> int:
        """Count one impression for ``token``. Returns the owning campaign id.

        A token is redeemable once; repeats raise UnknownImpression.
        """
        if not token:
            raise InvalidRequest("impression token must not be empty")

        with self._store.locked():
            campaign_id = self._store.find_token_owner(token)
            if campaign_id is None:
                unknown = True
            else:
                unknown = False
                count = self._store.redeem_token(campaign_id, token)

        if unknown:
            if self._logger:
                self._logger.info("impression_unknown", extra={"token": token})
            raise UnknownImpression(token)
        if self._logger:
            self._logger.info(
                "impression_redeemed",
                extra={"campaign_id": campaign_id, "impression_count": count},
            )
        return campaign_id

    def impression_url(self, token: str) -> str:
        return f"{self._base_url}/{token}"

    def _mint_token(self) -> str:
        """Mint a token no campaign has seen. Caller holds the store lock."""
        for _ in range(self._mint_attempts):
            try:
                token = self._tokens.new_token()
            except Exception as exc:
                raise ImpressionTokenError(f"token generation failed: {exc}") from exc
            if token and not self._store.token_exists(token):
                return token
        raise ImpressionTokenError(
            f"no fresh impression token after {self._mint_attempts} attempts"
        )
