from __future__ import annotations

import pytest

from promptsdk.endpoints import ListPromptsEndpoint
from promptsdk.entities import ListPromptsInput
from promptsdk.result import Err, Ok

from tests.fixtures.prompt_fixtures import NOT_JSON_OBJECTS, VALID_LIST_PROMPTS_BODY


def test_request_targets_prompt_collection() -> None:
    request = ListPromptsEndpoint.prepare_request(ListPromptsInput())

    assert request.path == "/prompts"
    assert request.method == "get"
    assert request.query == {"featureSlug": None}


def test_feature_slug_is_sent_as_query() -> None:
    request = ListPromptsEndpoint.prepare_request(ListPromptsInput(feature_slug="onboarding"))

    assert request.query == {"featureSlug": "onboarding"}


def test_request_without_input() -> None:
    assert ListPromptsEndpoint.prepare_request().path == "/prompts"


def test_positively_decodes_valid_response() -> None:
    result = ListPromptsEndpoint.decode_response(VALID_LIST_PROMPTS_BODY)

    assert isinstance(result, Ok)
    assert result.value.prompts == VALID_LIST_PROMPTS_BODY["prompts"]
    assert result.value.warning is None


def test_prompts_object_is_passed_through() -> None:
    body = {"prompts": {"welcome-email": {"status": "live"}}, "warning": "deprecated"}

    result = ListPromptsEndpoint.decode_response(body)

    assert result.value.prompts == body["prompts"]
    assert result.value.warning == "deprecated"


def test_empty_list_is_valid() -> None:
    assert ListPromptsEndpoint.decode_response({"prompts": []}).value.prompts == []


@pytest.mark.parametrize("body", NOT_JSON_OBJECTS)
def test_rejects_non_object_bodies(body) -> None:
    result = ListPromptsEndpoint.decode_response(body)

    assert isinstance(result, Err)
    assert "invalid body format" in result.error.message


@pytest.mark.parametrize("body", [{}, {"prompts": None}, {"prompts": "a,b"}, {"prompts": 3}])
def test_rejects_missing_or_mistyped_prompts(body) -> None:
    result = ListPromptsEndpoint.decode_response(body)

    assert isinstance(result, Err)
    assert result.error.field == "prompts"
    assert result.error.message == "List Prompts: Failed to decode response (missing prompts)"
