"""Domain and boundary request/response models."""

from ..domain.campaign import AdDecision, Campaign, CampaignSpec
from .api_requests import AdDecisionRequest, CreateCampaignRequest
from .api_responses import AdDecisionResponse, CampaignCreatedResponse

__all__ = [
    # Domain
    "AdDecision",
    "Campaign",
    "CampaignSpec",
    # Requests
    "AdDecisionRequest",
    "CreateCampaignRequest",
    # Responses
    "AdDecisionResponse",
    "CampaignCreatedResponse",
]
