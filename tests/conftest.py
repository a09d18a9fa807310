"""Shared fixtures: a scripted HostPrompter and an isolated environment."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest
from pydantic import SecretStr

from core.domain.models import Credential


@dataclass
class FakeHostPrompter:
    """Records every call and replays a scripted result or error."""

    result: Credential | None = None
    error: BaseException | None = None
    calls: list[dict[str, Any]] = field(default_factory=list)

    def prompt_for_credential(self, title, message, user_name, domain, confirm_password):
        self.calls.append(
            {
                "title": title,
                "message": message,
                "user_name": user_name,
                "domain": domain,
                "confirm_password": confirm_password,
            }
        )
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    for name in ("GETCRED_SECRET", "GETCRED_OUTPUT_FORMAT", "GETCRED_DEFAULT_LANGUAGE", "GETCRED_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def alice() -> Credential:
    return Credential(username="alice", secret=SecretStr("s3cret"))


@pytest.fixture
def prompter() -> FakeHostPrompter:
    return FakeHostPrompter()
