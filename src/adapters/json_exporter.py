"""Exportación JSON de la credencial producida.

Por qué JSON:
- Interoperabilidad con scripts y pipelines que consumen la credencial.
- El secreto solo se incluye si se pide explícitamente; por defecto va
  enmascarado.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from core.domain.models import Credential

MASKED_SECRET = "**********"


def credential_to_payload(credential: Credential, *, reveal_secret: bool = False) -> dict[str, Any]:
    secret = credential.secret.get_secret_value() if reveal_secret else MASKED_SECRET
    return {"username": credential.username, "secret": secret}


def credential_to_json(credential: Credential, *, reveal_secret: bool = False) -> str:
    payload = credential_to_payload(credential, reveal_secret=reveal_secret)
    return json.dumps(payload, ensure_ascii=False, sort_keys=True)


def export_credential_json(
    *,
    credential: Credential,
    output_path: Path,
    reveal_secret: bool = False,
) -> Path:
    """Exporta la credencial a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = credential_to_payload(credential, reveal_secret=reveal_secret)
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
