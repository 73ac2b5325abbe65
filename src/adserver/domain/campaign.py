"""Campaign domain models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CampaignSpec(BaseModel):
    """Creation input for a campaign.

    Zero and empty values are accepted here and rejected by
    ``validate_campaign_spec`` so every failed rule is reported at once.
    """

    start_timestamp: int = Field(default=0, description="Unix seconds the campaign starts serving")
    end_timestamp: int = Field(default=0, description="Unix seconds the campaign stops serving (exclusive)")
    target_keywords: list[str] = Field(default_factory=list, description="Keywords to target (exact match)")
    max_impressions: int = Field(default=0, description="Impression budget ceiling")
    cpm: float = Field(default=0.0, description="Bid price per 1000 impressions")


class Campaign(BaseModel):
    """Stored campaign with its impression accounting."""

    campaign_id: int = Field(..., description="Store-assigned campaign identifier")
    start_timestamp: int = Field(..., description="Unix seconds the campaign starts serving")
    end_timestamp: int = Field(..., description="Unix seconds the campaign stops serving (exclusive)")
    target_keywords: frozenset[str] = Field(..., description="Keywords to target (exact match)")
    max_impressions: int = Field(..., gt=0, description="Impression budget ceiling")
    cpm: float = Field(..., gt=0, description="Bid price per 1000 impressions")
    impression_count: int = Field(default=0, ge=0, description="Redeemed impressions")
    pending_impression_tokens: set[str] = Field(
        default_factory=set, description="Issued tokens not yet redeemed"
    )
    redeemed_impression_tokens: set[str] = Field(
        default_factory=set, description="Tokens already redeemed"
    )

    @classmethod
    def from_spec(cls, campaign_id: int, spec: CampaignSpec) -> Campaign:
        return cls(
            campaign_id=campaign_id,
            start_timestamp=spec.start_timestamp,
            end_timestamp=spec.end_timestamp,
            target_keywords=frozenset(spec.target_keywords),
            max_impressions=spec.max_impressions,
            cpm=spec.cpm,
        )

    @property
    def committed_impressions(self) -> int:
        """Redeemed impressions plus those issued and still outstanding."""
        return self.impression_count + len(self.pending_impression_tokens)

    @property
    def remaining_budget(self) -> int:
        return max(0, self.max_impressions - self.committed_impressions)

    def is_active(self, now: int) -> bool:
        """Return True if ``now`` falls in ``[start_timestamp, end_timestamp)``."""
        return self.start_timestamp <= now < self.end_timestamp

    def matches(self, keywords: set[str] | frozenset[str]) -> bool:
        return not self.target_keywords.isdisjoint(keywords)


class AdDecision(BaseModel):
    """Winning selection for an ad request."""

    campaign_id: int = Field(..., description="Winning campaign identifier")
    impression_token: str = Field(..., description="One-time impression token")
    impression_url: str = Field(..., description="Tracking URL embedding the token")
