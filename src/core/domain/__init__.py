"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2).
- El dominio no conoce la terminal, la CLI ni el prompter concreto: solo
  credenciales, conjuntos de parámetros y registros de error.
"""
