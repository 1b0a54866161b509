# ------------------------------------------------------------------------------
# Stub transport for the prompt service
# ------------------------------------------------------------------------------
from httpx import MockTransport, Request, Response

from tests.fixtures.prompt_fixtures import (
    VALID_DESCRIBE_PROMPT_BODY,
    VALID_GET_PROMPT_BODY,
    VALID_LIST_PROMPTS_BODY,
)

API_KEY = "test-key"


def prompt_service_stub(request: Request) -> Response:
    """
    Stubbed HTTP handler for the prompt service.

    Serves the canned bodies from prompt_fixtures and enforces the auth
    header exactly as the real service would.
    """
    assert request.method == "GET"

    if request.headers.get("Authorization") != f"Bearer {API_KEY}":
        return Response(status_code=401, json={"error": "invalid api key"})

    path = request.url.path

    if path == "/prompts":
        return Response(status_code=200, json=VALID_LIST_PROMPTS_BODY)

    if path == "/prompts/welcome-email":
        return Response(status_code=200, json=VALID_GET_PROMPT_BODY)

    if path == "/prompts/welcome-email/describe":
        return Response(status_code=200, json=VALID_DESCRIBE_PROMPT_BODY)

    if path == "/prompts/broken":
        return Response(status_code=200, json={"prompt": {"text": "no model here", "version": "1"}})

    return Response(status_code=404, json={"error": f"Unhandled path {path}"})


def prompt_service_transport() -> MockTransport:
    return MockTransport(prompt_service_stub)
