"""Match semantics — executable rules for eligibility and ranking.

These constants and docstrings lock the semantics. Tests in test_match_semantics.py
encode these as assertions to prevent accidental drift.

RULES (must never be ambiguous):
--------------------------------

1. SCHEDULE WINDOW
   A campaign serves iff start_timestamp <= now < end_timestamp.
   The end instant itself is already outside the window.

2. BUDGET
   A campaign serves iff impression_count + pending tokens < max_impressions.
   Outstanding tokens reserve budget, so concurrent decisions cannot oversell.

3. KEYWORDS
   campaign.target_keywords intersects request.keywords (ANY), exact and
   case-sensitive. The size of the overlap does not affect ranking.

4. RANKING
   Highest cpm wins; ties go to the earliest end_timestamp, then to the
   lowest campaign_id.

5. REDEMPTION
   A token is redeemable once. The second redemption is an unknown impression.
"""

# Rule names for reference in tests and audit
RULE_SCHEDULE_ACTIVE = "schedule: start_timestamp <= now < end_timestamp"
RULE_BUDGET_REMAINING = "budget: impression_count + pending tokens < max_impressions"
RULE_KEYWORDS_ANY = "keywords: campaign.target_keywords intersects request.keywords (ANY)"
RULE_RANK_ORDER = "ranking: cpm desc, end_timestamp asc, campaign_id asc"
RULE_REDEEM_ONCE = "redemption: a token is redeemable exactly once"

# Denial reasons reported by AuctionEngine.reason
DENIED_NOT_STARTED = "schedule_not_started"
DENIED_ENDED = "schedule_ended"
DENIED_BUDGET = "budget_exhausted"
DENIED_KEYWORDS = "no_keyword_overlap"
