"""FastAPI application for the ad server HTTP boundary.

Endpoints:
    POST /campaign          create a campaign
    POST /addecision        run the auction for a keyword set
    GET  /{impression_token} redeem an impression

Error bodies are empty; the status code carries the outcome.
"""

from __future__ import annotations

import time
import uuid

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ...domain.errors import (
    ImpressionTokenError,
    InvalidCampaign,
    InvalidRequest,
    MethodNotSupported,
    UnknownImpression,
)
from ...models.api_requests import AdDecisionRequest, CreateCampaignRequest
from ...models.api_responses import AdDecisionResponse, CampaignCreatedResponse
from ...services.decision_service import DecisionService
from ..observability import log_operation

_ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
_NOT_POST = [m for m in _ALL_METHODS if m != "POST"]
_NOT_GET = [m for m in _ALL_METHODS if m != "GET"]

_OPERATIONS = {
    "/campaign": "campaigns_create",
    "/addecision": "ads_decide",
}


def _operation_for(path: str) -> str:
    return _OPERATIONS.get(path, "impressions_redeem")


def create_app(service: DecisionService | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        service: DecisionService to serve; defaults to the process-wide one.
    """
    if service is None:
        from ...wiring import get_decision_service

        service = get_decision_service()

    app = FastAPI(
        title="adserver",
        description="Keyword-targeted campaign auction with impression tracking",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.decision_service = service

    @app.middleware("http")
    async def _observe(request: Request, call_next):
        t0 = time.monotonic()
        trace_id = uuid.uuid4().hex
        response = await call_next(request)
        latency_ms = (time.monotonic() - t0) * 1000
        error = None if response.status_code < 400 else f"http_{response.status_code}"
        log_operation(
            _operation_for(request.url.path),
            trace_id,
            latency_ms,
            response.status_code,
            error=error,
            extra={"method": request.method},
        )
        return response

    # Map domain exceptions to HTTP responses
    @app.exception_handler(InvalidCampaign)
    async def _invalid_campaign(_: Request, exc: InvalidCampaign) -> Response:
        return Response(status_code=status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(InvalidRequest)
    async def _invalid_request(_: Request, exc: InvalidRequest) -> Response:
        return Response(status_code=status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(UnknownImpression)
    async def _unknown_impression(_: Request, exc: UnknownImpression) -> Response:
        return Response(status_code=status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(MethodNotSupported)
    async def _method_not_supported(_: Request, exc: MethodNotSupported) -> Response:
        return Response(status_code=status.HTTP_405_METHOD_NOT_ALLOWED)

    @app.exception_handler(ImpressionTokenError)
    async def _token_error(_: Request, exc: ImpressionTokenError) -> Response:
        return Response(status_code=status.HTTP_503_SERVICE_UNAVAILABLE)

    # Undecodable or mistyped bodies are client errors like any other
    @app.exception_handler(RequestValidationError)
    async def _body_invalid(_: Request, exc: RequestValidationError) -> Response:
        return Response(status_code=status.HTTP_400_BAD_REQUEST)

    @app.post("/campaign", response_model=None)
    def create_campaign(payload: CreateCampaignRequest) -> Response:
        campaign_id = service.create_campaign(payload.to_spec())
        return JSONResponse(CampaignCreatedResponse(campaign_id=campaign_id).model_dump())

    @app.api_route("/campaign", methods=_NOT_POST, response_model=None)
    def campaign_wrong_method(request: Request) -> Response:
        raise MethodNotSupported(request.method)

    @app.post("/addecision", response_model=None)
    def ad_decision(payload: AdDecisionRequest) -> Response:
        decision = service.select_campaign(payload.keywords)
        if decision is None:
            return Response(status_code=status.HTTP_200_OK)
        return JSONResponse(AdDecisionResponse.from_decision(decision).model_dump())

    @app.api_route("/addecision", methods=_NOT_POST, response_model=None)
    def ad_decision_wrong_method(request: Request) -> Response:
        raise MethodNotSupported(request.method)

    @app.get("/", response_model=None)
    def impression_missing_token() -> Response:
        raise InvalidRequest("impression token must not be empty")

    @app.get("/{impression_token}", response_model=None)
    def impression(impression_token: str) -> Response:
        service.redeem_impression(impression_token)
        return Response(status_code=status.HTTP_200_OK)

    @app.api_route("/", methods=_NOT_GET, response_model=None)
    @app.api_route("/{impression_token}", methods=_NOT_GET, response_model=None)
    def impression_wrong_method(request: Request) -> Response:
        raise MethodNotSupported(request.method)

    return app
