"""Prompt renderer ({{variable}} substitution).

We keep rendering separate so:
- it can be tested independently
- the SDK and callers share one set of rules
- prompt text fetched from the service is never re-parsed by hand
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from promptsdk.result import Err, Outcome, ok
from promptsdk.runtime.template import (
    extract_variable_names,
    missing_variables,
    pick_variables,
    replace_variables,
)

logger = logging.getLogger(__name__)


class PromptRenderer:
    """Render prompt templates, strictly or partially."""

    def validate(self, template: str, variables: Mapping[str, Any]) -> Outcome[dict[str, Any]]:
        """Check that every variable used by the template is supplied.

        Returns:
            The variables restricted to the names the template uses, or a
            ``MissingVariable`` error.
        """
        return pick_variables(extract_variable_names(template), variables)

    def render(self, template: str, variables: Mapping[str, Any]) -> Outcome[str]:
        """Render a prompt template, failing if any variable is missing.

        Args:
            template: Prompt text containing ``{{var}}`` placeholders.
            variables: Mapping of variable names to values.

        Returns:
            Rendered prompt, or ``Err(MissingVariable)``.
        """
        picked = self.validate(template, variables)
        if isinstance(picked, Err):
            return picked
        return ok(replace_variables(template, picked.value))

    def render_partial(self, template: str, variables: Mapping[str, Any]) -> str:
        """Render what can be rendered; unresolved placeholders stay in place."""
        missing = missing_variables(template, variables)
        if missing:
            logger.warning('Some variables are missing in the prompt text: %s', ', '.join(missing))
        return replace_variables(template, variables)
