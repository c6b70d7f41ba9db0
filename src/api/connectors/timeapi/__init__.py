"""Connector timeapi.io — montagem de requisição e classificação de resposta.

Uso:
    from api.connectors.timeapi import TimeApiClient

    client = TimeApiClient()
    result = await client.fetch_json(
        "current-time",
        "/api/time/current/zone",
        query={"timeZone": "America/Denver"},
    )
    result.data, result.source
"""

from api.connectors.timeapi.errors import (
    BODY_PREVIEW_LIMIT,
    EMPTY_BODY_MARKER,
    EmptyBodyFailure,
    FailureKind,
    HttpStatusFailure,
    JsonParseFailure,
    NetworkFailure,
    TimeApiError,
    ValidationFailure,
    build_body_preview,
)
from api.connectors.timeapi.headers import default_headers, merge_headers
from api.connectors.timeapi.http_client import (
    FetchResult,
    TimeApiClient,
    TimeApiClientConfig,
    create_timeapi_client,
)
from api.connectors.timeapi.response import ResponseEnvelope, decode_json_body, ensure_success
from api.connectors.timeapi.urls import TIMEAPI_BASE_URL, build_url

__all__ = [
    "BODY_PREVIEW_LIMIT",
    "EMPTY_BODY_MARKER",
    "TIMEAPI_BASE_URL",
    "EmptyBodyFailure",
    "FailureKind",
    "FetchResult",
    "HttpStatusFailure",
    "JsonParseFailure",
    "NetworkFailure",
    "ResponseEnvelope",
    "TimeApiClient",
    "TimeApiClientConfig",
    "TimeApiError",
    "ValidationFailure",
    "build_body_preview",
    "build_url",
    "create_timeapi_client",
    "decode_json_body",
    "default_headers",
    "ensure_success",
    "merge_headers",
]
