"""Endpoint contract.

An endpoint knows two things and nothing else:
- how to describe its HTTP request (``prepare_request``)
- how to turn an untrusted JSON body into a typed record (``decode_response``)

Sending the request is the transport's job (see ``promptsdk.transport.api``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Protocol, TypeVar

from promptsdk.result import Outcome

FetchMethod = Literal['get', 'post', 'put', 'delete']

InputT = TypeVar('InputT', contravariant=True)
OutputT = TypeVar('OutputT', covariant=True)


@dataclass(frozen=True)
class RequestInfo:
    path: str
    method: FetchMethod
    query: dict[str, str | None] = field(default_factory=dict)
    body: Any | None = None


class Endpoint(Protocol[InputT, OutputT]):
    def prepare_request(self, dto: InputT) -> RequestInfo:
        ...

    def decode_response(self, body: Any) -> Outcome[OutputT]:
        ...
