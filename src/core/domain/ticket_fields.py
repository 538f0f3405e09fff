"""Ticket field vocabularies.

This module centralizes the closed value sets a Zendesk ticket accepts
for status, priority and type. Keeping them in the domain layer lets the
models, the CLI options and the tests share a single source of truth.
"""

from __future__ import annotations

from enum import Enum


class TicketStatus(str, Enum):
    """Lifecycle states of a ticket."""

    NEW = "new"
    OPEN = "open"
    PENDING = "pending"
    HOLD = "hold"
    SOLVED = "solved"
    CLOSED = "closed"


class TicketPriority(str, Enum):
    URGENT = "urgent"
    HIGH = "high"
    NORMAL = "normal"
    LOW = "low"


class TicketType(str, Enum):
    PROBLEM = "problem"
    INCIDENT = "incident"
    QUESTION = "question"
    TASK = "task"

    def label(self) -> str:
        """Human readable label for tables and logging."""

        return self.value.capitalize()
