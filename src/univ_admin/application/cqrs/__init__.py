"""Application CQRS – command and handler base classes."""
from univ_admin.application.cqrs.commands import Command, CommandHandler

__all__ = ["Command", "CommandHandler"]
