"""IAM domain – enumerations."""
from __future__ import annotations

from enum import StrEnum


class UserRole(StrEnum):
    STUDENT = "STUDENT"
    TEACHER = "TEACHER"
    SECRETARY = "SECRETARY"
    ADMIN = "ADMIN"


__all__ = ["UserRole"]
