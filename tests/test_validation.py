"""Validation tests for campaign specs and keyword lists."""

import math

import pytest

from adserver.domain.campaign import CampaignSpec
from adserver.domain.validation import (
    ValidationResult,
    validate_campaign_spec,
    validate_keywords,
)

from conftest import make_spec


class TestValidationResult:
    def test_errors_invalidate(self):
        result = ValidationResult(errors=["boom"])
        assert result.is_valid is False

    def test_warnings_keep_valid(self):
        result = ValidationResult(warnings=["hmm"])
        assert result.is_valid is True


class TestCampaignSpecValidation:
    def test_valid_spec(self):
        result = validate_campaign_spec(make_spec())
        assert result.is_valid
        assert result.warnings == []

    def test_every_rule_reported(self):
        result = validate_campaign_spec(CampaignSpec())
        assert not result.is_valid
        joined = " ".join(result.errors)
        for field in ("start_timestamp", "end_timestamp", "target_keywords", "max_impressions", "cpm"):
            assert field in joined

    def test_inverted_window_is_only_a_warning(self):
        result = validate_campaign_spec(make_spec(start_timestamp=200, end_timestamp=100))
        assert result.is_valid
        assert any("never serve" in w for w in result.warnings)

    @pytest.mark.parametrize("cpm", [math.nan, math.inf, -math.inf])
    def test_non_finite_cpm_is_an_error(self, cpm):
        result = validate_campaign_spec(make_spec(cpm=cpm))
        assert not result.is_valid
        assert any("cpm" in e for e in result.errors)

    def test_blank_keyword_warns(self):
        result = validate_campaign_spec(make_spec(target_keywords=["shoes", "  "]))
        assert result.is_valid
        assert result.warnings


class TestKeywordValidation:
    def test_empty_and_none(self):
        assert not validate_keywords([]).is_valid
        assert not validate_keywords(None).is_valid

    def test_non_empty(self):
        assert validate_keywords(["shoes"]).is_valid

    def test_blank_keyword_warns(self):
        result = validate_keywords(["shoes", ""])
        assert result.is_valid
        assert result.warnings == ["keywords contains blank entries"]
