from __future__ import annotations

import pytest
from pydantic import SecretStr, TypeAdapter, ValidationError

from core.domain.language import Language
from core.domain.models import Credential, DirectCredential, ParameterSet, PromptConfig


def test_credential_is_immutable(alice):
    with pytest.raises(ValidationError):
        alice.username = "mallory"


def test_credential_repr_hides_secret():
    credential = Credential(username="alice", secret=SecretStr("hunter2"))

    assert "hunter2" not in repr(credential)
    assert "hunter2" not in str(credential)
    assert credential.secret.get_secret_value() == "hunter2"


def test_parameter_set_is_discriminated_by_mode():
    adapter = TypeAdapter(ParameterSet)

    direct = adapter.validate_python({"mode": "direct"})
    prompt = adapter.validate_python({"mode": "prompt", "title": "Auth"})

    assert isinstance(direct, DirectCredential)
    assert direct.credential is None
    assert isinstance(prompt, PromptConfig)
    assert prompt.title == "Auth"
    assert prompt.message == "Enter your credentials."


def test_prompt_config_default_is_localized():
    config = PromptConfig.default(Language.SPANISH, confirm_password=True)

    assert config.message == "Introduce tus credenciales."
    assert config.title == "Solicitud de credenciales"
    assert config.user_name is None
    assert config.confirm_password is True
