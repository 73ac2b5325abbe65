"""Request DTOs for the HTTP and MCP boundaries."""

from __future__ import annotations

from pydantic import BaseModel, Field, StrictFloat, StrictInt

from ..domain.campaign import CampaignSpec


class CreateCampaignRequest(BaseModel):
    """Input DTO for campaign creation.

    Missing fields default to zero/empty and are rejected by domain
    validation, so the caller sees a single InvalidCampaign. Numeric fields are
    strict: JSON booleans and numeric strings are rejected.
    """

    start_timestamp: StrictInt = Field(default=0, description="Unix seconds the campaign starts serving")
    end_timestamp: StrictInt = Field(default=0, description="Unix seconds the campaign stops serving")
    target_keywords: list[str] = Field(default_factory=list, description="Keywords to target")
    max_impression: StrictInt = Field(default=0, description="Impression budget ceiling")
    cpm: StrictFloat = Field(default=0.0, description="Bid price per 1000 impressions")

    def to_spec(self) -> CampaignSpec:
        return CampaignSpec(
            start_timestamp=self.start_timestamp,
            end_timestamp=self.end_timestamp,
            target_keywords=self.target_keywords,
            max_impressions=self.max_impression,
            cpm=self.cpm,
        )


class AdDecisionRequest(BaseModel):
    """Input DTO for an ad decision."""

    keywords: list[str] = Field(default_factory=list, description="Context keywords for the auction")
