"""Domain layer for the ad server."""

from .auction_engine import AuctionEngine, rank_key
from .campaign import AdDecision, Campaign, CampaignSpec
from .errors import (
    AdServerError,
    ImpressionTokenError,
    InvalidCampaign,
    InvalidRequest,
    MethodNotSupported,
    UnknownImpression,
)
from .match_semantics import (
    RULE_BUDGET_REMAINING,
    RULE_KEYWORDS_ANY,
    RULE_RANK_ORDER,
    RULE_REDEEM_ONCE,
    RULE_SCHEDULE_ACTIVE,
)
from .validation import ValidationResult, validate_campaign_spec, validate_keywords

__all__ = [
    "AdDecision",
    "AdServerError",
    "AuctionEngine",
    "Campaign",
    "CampaignSpec",
    "ImpressionTokenError",
    "InvalidCampaign",
    "InvalidRequest",
    "MethodNotSupported",
    "UnknownImpression",
    "ValidationResult",
    "rank_key",
    "validate_campaign_spec",
    "validate_keywords",
    "RULE_BUDGET_REMAINING",
    "RULE_KEYWORDS_ANY",
    "RULE_RANK_ORDER",
    "RULE_REDEEM_ONCE",
    "RULE_SCHEDULE_ACTIVE",
]
