"""Recursos REST (fachadas por endpoint).

Por qué un paquete:
- Cada módulo mapea los verbos de un recurso de la API sobre un `RestClient`.
"""

from adapters.resources.tickets import TicketResource

__all__ = [
    "TicketResource",
]
