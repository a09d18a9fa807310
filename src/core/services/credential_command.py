"""Credential acquisition command.

The command either passes a caller-supplied credential through untouched or
asks the injected `HostPrompter` for one. It never touches the terminal
itself, which keeps the policy (what to emit, what to report) testable with a
scripted prompter and reusable from entry-points other than the CLI.
"""

from __future__ import annotations

import logging

from core.domain.language import Language
from core.domain.models import (
    CommandResult,
    Credential,
    DirectCredential,
    ErrorCategory,
    ErrorRecord,
    ParameterSet,
    PromptConfig,
)
from core.interfaces.host_prompter import HostPrompter

logger = logging.getLogger(__name__)

COULD_NOT_PROMPT_FOR_CREDENTIAL = "CouldNotPromptForCredential"


class GetCredentialCommand:
    """Produce zero or one `Credential` per invocation.

    Errors raised by the prompter as `ValueError` are reported as a
    non-terminating `ErrorRecord`; anything else propagates.
    """

    def __init__(self, prompter: HostPrompter, *, language: Language | None = None) -> None:
        self._prompter = prompter
        self._language = language or Language.default()

    def execute(self, parameters: ParameterSet) -> CommandResult:
        result = CommandResult()

        if isinstance(parameters, DirectCredential) and parameters.credential is not None:
            logger.debug("Direct credential supplied for %r; skipping prompt", parameters.credential.username)
            result.output.append(parameters.credential)
            return result

        prompt = self._prompt_config(parameters)
        logger.debug("Prompting for credential (title=%r, user_name=%r)", prompt.title, prompt.user_name)

        credential: Credential | None = None
        try:
            credential = self._prompter.prompt_for_credential(
                prompt.title,
                prompt.message,
                prompt.user_name,
                "",
                prompt.confirm_password,
            )
        except ValueError as exc:
            logger.warning("Could not prompt for credential: %s", exc)
            result.errors.append(
                ErrorRecord(
                    error_id=COULD_NOT_PROMPT_FOR_CREDENTIAL,
                    category=ErrorCategory.INVALID_OPERATION,
                    target=None,
                    exception=exc,
                )
            )

        if credential is not None:
            result.output.append(credential)
        elif not result.errors:
            logger.debug("Prompter returned no credential")
        return result

    def _prompt_config(self, parameters: ParameterSet) -> PromptConfig:
        if isinstance(parameters, PromptConfig):
            return parameters
        # Direct mode without a credential asks for the pending user's secret.
        return PromptConfig.default(
            self._language,
            user_name=parameters.user_name,
            confirm_password=parameters.confirm_password,
        )
