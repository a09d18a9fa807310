"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: el comando depende del prompter abstracto,
  no de una terminal real.
"""

from core.interfaces.host_prompter import HostPrompter

__all__ = ["HostPrompter"]
