"""Prompt service endpoints: request shapes and response decoders.

Rules:
- No I/O here.
- Decoders never raise; malformed bodies come back as Err(MalformedResponse).
"""
from .base import Endpoint, FetchMethod, RequestInfo
from .describe_prompt import DescribePromptEndpoint
from .get_prompt import GetPromptEndpoint
from .list_prompts import ListPromptsEndpoint
