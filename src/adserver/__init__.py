"""adserver application package."""

from .domain import AdDecision, Campaign, CampaignSpec
from .services import CampaignStore, DecisionService

__version__ = "0.1.0"
__all__ = [
    "AdDecision",
    "Campaign",
    "CampaignSpec",
    "CampaignStore",
    "DecisionService",
]
