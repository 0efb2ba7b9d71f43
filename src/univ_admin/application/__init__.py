"""Application – use-case building blocks (framework-agnostic)."""

from univ_admin.application.cqrs import Command, CommandHandler

__all__ = ["Command", "CommandHandler"]
