"""Application services."""

from .campaign_store import CampaignStore
from .decision_service import DecisionService

__all__ = ["CampaignStore", "DecisionService"]
