"""Response DTOs for the HTTP and MCP boundaries."""

from __future__ import annotations

from pydantic import BaseModel, Field

from ..domain.campaign import AdDecision


class CampaignCreatedResponse(BaseModel):
    campaign_id: int = Field(..., description="Assigned campaign identifier")


class AdDecisionResponse(BaseModel):
    """Winning campaign and its one-time impression URL."""

    campaign_id: int = Field(..., description="Winning campaign identifier")
    impression_url: str = Field(..., description="Call once to confirm the impression")

    @classmethod
    def from_decision(cls, decision: AdDecision) -> AdDecisionResponse:
        return cls(campaign_id=decision.campaign_id, impression_url=decision.impression_url)
