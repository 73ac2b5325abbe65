"""Tool registry for the MCP server.

Each tool mirrors one HTTP operation over the same DecisionService and
returns a JSON string shaped like the HTTP body. Domain errors become
``{"error": <name>, "detail": <message>}`` payloads instead of raising.
"""

from __future__ import annotations

import json
import time
import uuid

from ...domain.errors import AdServerError, InvalidCampaign
from ...models.api_requests import AdDecisionRequest, CreateCampaignRequest
from ...models.api_responses import AdDecisionResponse, CampaignCreatedResponse
from ...services.decision_service import DecisionService
from ..observability import log_operation

ALLOWED_TOOLS = frozenset({
    "campaigns_create",
    "ads_decide",
    "impressions_redeem",
})


def _error_payload(exc: AdServerError) -> dict:
    payload: dict = {"error": type(exc).__name__, "detail": str(exc)}
    if isinstance(exc, InvalidCampaign):
        payload["errors"] = exc.errors
    return payload


def _get_decision_service() -> DecisionService:
    from ...wiring import get_decision_service
    return get_decision_service()


def register_tools(mcp, service: DecisionService | None = None) -> None:
    """Register the ad server tools on a FastMCP instance."""

    def _service() -> DecisionService:
        return service if service is not None else _get_decision_service()

    @mcp.tool()
    def campaigns_create(
        start_timestamp: int,
        end_timestamp: int,
        target_keywords: list[str],
        max_impression: int,
        cpm: float,
    ) -> str:
        """Create a keyword-targeted campaign.

        Args:
            start_timestamp: Unix seconds the campaign starts serving
            end_timestamp: Unix seconds the campaign stops serving (exclusive)
            target_keywords: Keywords to target (exact, case-sensitive)
            max_impression: Impression budget ceiling (> 0)
            cpm: Bid price per 1000 impressions (> 0)

        Returns:
            JSON with campaign_id, or an error payload
        """
        t0 = time.monotonic()
        request = CreateCampaignRequest(
            start_timestamp=start_timestamp,
            end_timestamp=end_timestamp,
            target_keywords=target_keywords,
            max_impression=max_impression,
            cpm=cpm,
        )
        try:
            campaign_id = _service().create_campaign(request.to_spec())
        except AdServerError as exc:
            log_operation("campaigns_create", uuid.uuid4().hex, (time.monotonic() - t0) * 1000, "error", error=type(exc).__name__)
            return json.dumps(_error_payload(exc))
        log_operation("campaigns_create", uuid.uuid4().hex, (time.monotonic() - t0) * 1000, "ok")
        return json.dumps(CampaignCreatedResponse(campaign_id=campaign_id).model_dump())

    @mcp.tool()
    def ads_decide(keywords: list[str]) -> str:
        """Run the auction for a keyword set.

        Args:
            keywords: Context keywords (non-empty)

        Returns:
            JSON with campaign_id and impression_url, ``{}`` on no fill, or an error payload
        """
        t0 = time.monotonic()
        request = AdDecisionRequest(keywords=keywords)
        try:
            decision = _service().select_campaign(request.keywords)
        except AdServerError as exc:
            log_operation("ads_decide", uuid.uuid4().hex, (time.monotonic() - t0) * 1000, "error", error=type(exc).__name__)
            return json.dumps(_error_payload(exc))
        log_operation(
            "ads_decide",
            uuid.uuid4().hex,
            (time.monotonic() - t0) * 1000,
            "ok",
            extra={"filled": decision is not None},
        )
        if decision is None:
            return json.dumps({})
        return json.dumps(AdDecisionResponse.from_decision(decision).model_dump())

    @mcp.tool()
    def impressions_redeem(impression_token: str) -> str:
        """Confirm one impression for a token returned by ads_decide.

        Args:
            impression_token: Final path segment of the impression_url

        Returns:
            ``{"ok": true}`` or an error payload
        """
        t0 = time.monotonic()
        try:
            _service().redeem_impression(impression_token)
        except AdServerError as exc:
            log_operation("impressions_redeem", uuid.uuid4().hex, (time.monotonic() - t0) * 1000, "error", error=type(exc).__name__)
            return json.dumps(_error_payload(exc))
        log_operation("impressions_redeem", uuid.uuid4().hex, (time.monotonic() - t0) * 1000, "ok")
        return json.dumps({"ok": True})
