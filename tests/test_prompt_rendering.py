from __future__ import annotations

import logging

from promptsdk.core.errors import MissingVariable
from promptsdk.result import Err, Ok
from promptsdk.runtime.renderer import PromptRenderer


def test_prompt_rendering_ok() -> None:
    renderer = PromptRenderer()
    rendered = renderer.render('Hello {{name}}', {'name': 'Alice', 'unused': 1})
    assert rendered == Ok('Hello Alice')


def test_prompt_rendering_missing_variable() -> None:
    renderer = PromptRenderer()
    rendered = renderer.render('Hello {{name}} from {{team}}', {'name': 'Alice'})
    assert isinstance(rendered, Err)
    assert isinstance(rendered.error, MissingVariable)
    assert rendered.error.names == ('team',)


def test_prompt_validation_returns_picked_variables() -> None:
    renderer = PromptRenderer()
    picked = renderer.validate('{{a}} {{b}}', {'a': 1, 'b': 2, 'c': 3})
    assert picked.value == {'a': 1, 'b': 2}


def test_partial_rendering_logs_missing_variables(caplog) -> None:
    renderer = PromptRenderer()

    with caplog.at_level(logging.WARNING, logger='promptsdk'):
        rendered = renderer.render_partial('Hello {{name}} from {{team}}', {'name': 'Alice'})

    assert rendered == 'Hello Alice from {{team}}'
    assert 'team' in caplog.text


def test_partial_rendering_is_quiet_when_complete(caplog) -> None:
    renderer = PromptRenderer()

    with caplog.at_level(logging.WARNING, logger='promptsdk'):
        rendered = renderer.render_partial('Hello {{name}}', {'name': 'Alice'})

    assert rendered == 'Hello Alice'
    assert caplog.records == []
