"""Language utilities for get-credential.

This module centralizes the language options supported across the
application, together with the localized default strings shown by the
credential prompt. Keeping it in the domain layer allows both the CLI and
the command core to share a single source of truth.
"""

from __future__ import annotations

from enum import Enum


_DEFAULT_MESSAGES: dict[str, str] = {
    "en": "Enter your credentials.",
    "es": "Introduce tus credenciales.",
}

_DEFAULT_CAPTIONS: dict[str, str] = {
    "en": "Credential request",
    "es": "Solicitud de credenciales",
}


class Language(str, Enum):
    """Supported natural-language choices for user-facing output."""

    ENGLISH = "en"
    SPANISH = "es"

    @classmethod
    def default(cls) -> "Language":
        """Return the default language used across the application."""

        return cls.ENGLISH

    def default_prompt_message(self) -> str:
        """Body text used when the caller does not supply `--message`."""

        return _DEFAULT_MESSAGES[self.value]

    def default_prompt_caption(self) -> str:
        """Caption used when the caller does not supply `--title`."""

        return _DEFAULT_CAPTIONS[self.value]
