"""AuctionEngine tests — eligibility and ranking must not drift."""

from adserver.domain.auction_engine import AuctionEngine, rank_key
from adserver.domain.campaign import Campaign

from conftest import NOW


def _campaign(campaign_id: int, **overrides) -> Campaign:
    fields = {
        "campaign_id": campaign_id,
        "start_timestamp": NOW - 3600,
        "end_timestamp": NOW + 3600,
        "target_keywords": frozenset({"shoes"}),
        "max_impressions": 10,
        "cpm": 10.0,
    }
    fields.update(overrides)
    return Campaign(**fields)


def _select(campaigns, keywords=("shoes",), now=NOW):
    return AuctionEngine().select(campaigns, frozenset(keywords), now)


class TestEligibility:
    def test_window_start_is_inclusive(self):
        c = _campaign(1, start_timestamp=NOW)
        assert _select([c]) is c

    def test_window_end_is_exclusive(self):
        c = _campaign(1, end_timestamp=NOW)
        assert _select([c]) is None

    def test_not_started(self):
        assert _select([_campaign(1, start_timestamp=NOW + 1)]) is None

    def test_exhausted_by_redeemed_impressions(self):
        c = _campaign(1, max_impressions=2, impression_count=2)
        assert _select([c]) is None

    def test_exhausted_by_pending_tokens(self):
        c = _campaign(1, max_impressions=2, impression_count=1, pending_impression_tokens={"t"})
        assert _select([c]) is None

    def test_keyword_overlap_any(self):
        c = _campaign(1, target_keywords=frozenset({"iphone", "5G"}))
        assert _select([c], keywords=("android", "5G")) is c

    def test_keywords_are_case_sensitive(self):
        c = _campaign(1, target_keywords=frozenset({"iPhone"}))
        assert _select([c], keywords=("iphone",)) is None

    def test_no_campaigns(self):
        assert _select([]) is None

    def test_apply_filters_to_candidates(self):
        ok = _campaign(1)
        ended = _campaign(2, end_timestamp=NOW - 1)
        other = _campaign(3, target_keywords=frozenset({"hats"}))
        assert AuctionEngine().apply([ok, ended, other], {"shoes"}, NOW) == [ok]


class TestRanking:
    def test_highest_cpm_wins(self):
        low = _campaign(1, cpm=10.0)
        high = _campaign(2, cpm=15.0)
        assert _select([low, high]) is high

    def test_cpm_tie_prefers_earlier_end(self):
        later = _campaign(1, end_timestamp=NOW + 7200)
        sooner = _campaign(2, end_timestamp=NOW + 60)
        assert _select([later, sooner]) is sooner

    def test_full_tie_prefers_lower_id(self):
        a = _campaign(7)
        b = _campaign(3)
        assert _select([a, b]) is b

    def test_overlap_size_does_not_matter(self):
        broad = _campaign(1, target_keywords=frozenset({"shoes", "boots", "sale"}), cpm=5.0)
        narrow = _campaign(2, target_keywords=frozenset({"shoes"}), cpm=6.0)
        assert _select([broad, narrow], keywords=("shoes", "boots", "sale")) is narrow

    def test_ineligible_high_bidder_is_skipped(self):
        rich_but_done = _campaign(1, cpm=100.0, max_impressions=1, impression_count=1)
        modest = _campaign(2, cpm=1.0)
        assert _select([rich_but_done, modest]) is modest

    def test_rank_key_orders_like_select(self):
        campaigns = [
            _campaign(5, cpm=10.0, end_timestamp=NOW + 100),
            _campaign(4, cpm=10.0, end_timestamp=NOW + 100),
            _campaign(3, cpm=10.0, end_timestamp=NOW + 50),
            _campaign(2, cpm=12.0, end_timestamp=NOW + 900),
        ]
        ordered = sorted(campaigns, key=rank_key)
        assert [c.campaign_id for c in ordered] == [2, 3, 4, 5]


class TestReasons:
    def test_reasons(self):
        engine = AuctionEngine()
        kws = frozenset({"shoes"})
        assert engine.reason(_campaign(1), kws, NOW) == "allowed"
        assert engine.reason(_campaign(1, start_timestamp=NOW + 5), kws, NOW) == "denied: schedule_not_started"
        assert engine.reason(_campaign(1, end_timestamp=NOW), kws, NOW) == "denied: schedule_ended"
        assert engine.reason(_campaign(1, max_impressions=1, impression_count=1), kws, NOW) == "denied: budget_exhausted"
        assert engine.reason(_campaign(1), frozenset({"hats"}), NOW) == "denied: no_keyword_overlap"
