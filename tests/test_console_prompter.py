from __future__ import annotations

import io

import click
import pytest
from rich.console import Console

from adapters.console_prompter import ConsoleHostPrompter, compose_user_name
from core.config import AppSettings
from core.errors import PromptArgumentError


class ScriptedPrompt:
    def __init__(self, *answers):
        self.answers = list(answers)
        self.calls = []

    def __call__(self, text, **kwargs):
        self.calls.append((text, kwargs))
        answer = self.answers.pop(0)
        if isinstance(answer, BaseException):
            raise answer
        return answer


def make_prompter(prompt, **settings):
    console = Console(file=io.StringIO(), width=120)
    return ConsoleHostPrompter(console, settings=AppSettings(**settings), prompt_func=prompt), console


def test_prompts_for_user_and_hidden_secret():
    prompt = ScriptedPrompt(" alice ", "s3cret")
    prompter, console = make_prompter(prompt)

    credential = prompter.prompt_for_credential("Auth", "Enter creds", None, "", False)

    assert credential.username == "alice"
    assert credential.secret.get_secret_value() == "s3cret"
    assert prompt.calls[0][0] == "User"
    text, kwargs = prompt.calls[1]
    assert text == "Password for user alice"
    assert kwargs["hide_input"] is True
    assert kwargs["confirmation_prompt"] is False
    rendered = console.file.getvalue()
    assert "Auth" in rendered
    assert "Enter creds" in rendered


def test_prefilled_user_only_asks_for_secret_with_confirmation():
    prompt = ScriptedPrompt("s3cret")
    prompter, _ = make_prompter(prompt)

    credential = prompter.prompt_for_credential("Auth", "Enter creds", "alice", "", True)

    assert credential.username == "alice"
    assert len(prompt.calls) == 1
    assert prompt.calls[0][1]["confirmation_prompt"] is True


def test_domain_is_prefixed_to_user_name():
    prompter, _ = make_prompter(ScriptedPrompt("s3cret"))

    credential = prompter.prompt_for_credential("Auth", "Enter creds", "alice", "CORP", False)

    assert credential.username == "CORP\\alice"


@pytest.mark.parametrize(
    "user_name, domain, expected",
    [
        ("alice", "", "alice"),
        ("alice", "CORP", "CORP\\alice"),
        ("OTHER\\alice", "CORP", "OTHER\\alice"),
        ("alice@example.com", "CORP", "alice@example.com"),
    ],
)
def test_compose_user_name(user_name, domain, expected):
    assert compose_user_name(user_name, domain) == expected


@pytest.mark.parametrize(
    "title, message, user_name",
    [
        ("", "Enter creds", None),
        ("Auth", "", None),
        ("Au\x07th", "Enter creds", None),
        ("Auth", "Enter creds", "ali\nce"),
        ("Auth", "Enter creds", "a" * 200),
    ],
)
def test_malformed_arguments_raise_prompt_argument_error(title, message, user_name):
    prompt = ScriptedPrompt()
    prompter, _ = make_prompter(prompt)

    with pytest.raises(PromptArgumentError):
        prompter.prompt_for_credential(title, message, user_name, "", False)
    assert prompt.calls == []


def test_whitespace_only_texts_are_accepted():
    prompter, _ = make_prompter(ScriptedPrompt("s3cret"))

    credential = prompter.prompt_for_credential(" ", "   ", "alice", "", False)

    assert credential.username == "alice"


def test_multiline_message_is_accepted():
    prompter, _ = make_prompter(ScriptedPrompt("s3cret"))

    credential = prompter.prompt_for_credential("Auth", "Line one\n\tLine two", "alice", "", False)

    assert credential is not None


def test_max_field_length_comes_from_settings():
    prompter, _ = make_prompter(ScriptedPrompt(), max_field_length=4)

    with pytest.raises(PromptArgumentError, match="longer than 4"):
        prompter.prompt_for_credential("Auth", "Enter creds", "alice", "", False)


def test_abort_returns_none():
    prompter, _ = make_prompter(ScriptedPrompt("alice", click.exceptions.Abort()))

    assert prompter.prompt_for_credential("Auth", "Enter creds", None, "", False) is None
