"""Input validation for campaign creation and ad requests.

Collects every failed rule instead of stopping at the first one, so callers
get a complete picture of what is wrong with a request. Warnings never block
a request; callers log them.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .campaign import CampaignSpec


@dataclass
class ValidationResult:
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def validate_campaign_spec(spec: CampaignSpec) -> ValidationResult:
    """Validate a CampaignSpec before it reaches the store.

    Errors cover missing or non-positive fields and a non-finite cpm.
    Warnings cover a window that can never serve and blank keywords.
    """
    result = ValidationResult()

    if not spec.start_timestamp:
        result.errors.append("start_timestamp is required")
    if not spec.end_timestamp:
        result.errors.append("end_timestamp is required")
    if spec.start_timestamp and spec.end_timestamp and spec.end_timestamp <= spec.start_timestamp:
        result.warnings.append("end_timestamp is not after start_timestamp; campaign will never serve")

    if not spec.target_keywords:
        result.errors.append("target_keywords must not be empty")
    elif any(not kw.strip() for kw in spec.target_keywords):
        result.warnings.append("target_keywords contains blank entries")

    if spec.max_impressions <= 0:
        result.errors.append(f"max_impressions must be > 0 (got {spec.max_impressions})")
    if not math.isfinite(spec.cpm) or spec.cpm <= 0:
        result.errors.append(f"cpm must be a finite number > 0 (got {spec.cpm})")

    return result


def validate_keywords(keywords: list[str] | None) -> ValidationResult:
    """Validate the keyword list of an ad request."""
    result = ValidationResult()
    if not keywords:
        result.errors.append("keywords must not be empty")
    elif any(not kw.strip() for kw in keywords):
        result.warnings.append("keywords contains blank entries")
    return result
