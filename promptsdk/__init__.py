"""Client SDK for managed prompts.

Fetch prompt text from the prompt service, then fill its ``{{variables}}``:

    >>> async with PromptClient(api_key="sk-...") as client:
    ...     result = await client.prompt.get("welcome-email", variables={"name": "Ada"})

The template engine and the outcome type are usable on their own:

    >>> names = extract_variable_names("Hello {{name}}")
    >>> picked = pick_variables(names, {"name": "Ada", "extra": 1})
    >>> replace_variables("Hello {{name}}", picked.unwrap())
    'Hello Ada'
"""
import logging

__version__ = "0.4.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

from .client import PromptClient
from .core.errors import (
    BadInput,
    BadRequest,
    ConfigurationError,
    ErrorInfo,
    Forbidden,
    MalformedResponse,
    MissingVariable,
    NetworkError,
    NotFound,
    OutcomeError,
    Unauthorized,
)
from .entities import PromptRecord, PromptResponse
from .result import Err, Ok, Outcome, err, ok
from .runtime.renderer import PromptRenderer
from .runtime.template import (
    extract_variable_names,
    missing_variables,
    pick_variables,
    replace_variables,
)
from .sdk.prompt_sdk import PromptSDK
