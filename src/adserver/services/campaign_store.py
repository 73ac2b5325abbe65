"""CampaignStore: the in-memory campaign table and its single lock."""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator

from pydantic import ValidationError

from ..domain.campaign import Campaign, CampaignSpec
from ..domain.errors import InvalidCampaign, UnknownImpression
from ..domain.validation import validate_campaign_spec


class CampaignStore:
    """Own every campaign, keyed by id, behind one re-entrant lock.

    Callers that need a read-scan-then-mutate sequence wrap it in
    ``locked()``; the individual methods take the same lock, so they can be
    called from inside that block. Entries returned by ``scan()`` are the
    live objects and must only be read while the lock is held; mutation goes
    through the id-keyed methods.
    """

    def __init__(self, id_offset: int = 1000) -> None:
        self._lock = threading.RLock()
        self._campaigns: dict[int, Campaign] = {}
        self._next_id = id_offset + 1

    @contextmanager
    def locked(self) -> Iterator[None]:
        with self._lock:
            yield

    def __len__(self) -> int:
        with self._lock:
            return len(self._campaigns)

    def create(self, spec: CampaignSpec) -> int:
        """Validate and store a new campaign. Returns the assigned id."""
        result = validate_campaign_spec(spec)
        if not result.is_valid:
            raise InvalidCampaign(result.errors)
        with self._lock:
            campaign_id = self._next_id
            try:
                campaign = Campaign.from_spec(campaign_id, spec)
            except ValidationError as exc:
                raise InvalidCampaign([err["msg"] for err in exc.errors()]) from exc
            self._campaigns[campaign_id] = campaign
            self._next_id += 1
        return campaign_id

    def get(self, campaign_id: int) -> Campaign | None:
        """Return a detached copy of the campaign, or None."""
        with self._lock:
            campaign = self._campaigns.get(campaign_id)
            return campaign.model_copy(deep=True) if campaign is not None else None

    def scan(self) -> list[Campaign]:
        """Live campaigns in id order. Read them only while holding ``locked()``."""
        with self._lock:
            return [self._campaigns[k] for k in sorted(self._campaigns)]

    def issue_token(self, campaign_id: int, token: str) -> None:
        with self._lock:
            self._campaigns[campaign_id].pending_impression_tokens.add(token)

    def token_exists(self, token: str) -> bool:
        """True if the token was ever issued, pending or redeemed."""
        with self._lock:
            return any(
                token in c.pending_impression_tokens or token in c.redeemed_impression_tokens
                for c in self._campaigns.values()
            )

    def find_token_owner(self, token: str) -> int | None:
        """Id of the campaign holding ``token`` as pending, or None."""
        with self._lock:
            for campaign_id in sorted(self._campaigns):
                if token in self._campaigns[campaign_id].pending_impression_tokens:
                    return campaign_id
        return None

    def redeem_token(self, campaign_id: int, token: str) -> int:
        """Move ``token`` from pending to redeemed and count the impression.

        Returns the new impression count.
        """
        with self._lock:
            campaign = self._campaigns.get(campaign_id)
            if campaign is None or token not in campaign.pending_impression_tokens:
                raise UnknownImpression(token)
            campaign.pending_impression_tokens.discard(token)
            campaign.redeemed_impression_tokens.add(token)
            campaign.impression_count += 1
            return campaign.impression_count
