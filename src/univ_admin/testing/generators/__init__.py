"""Testing generators – Hypothesis strategies for kernel and IAM values."""
from univ_admin.testing.generators.strategies import (
    entity_id_strategy,
    raw_email_strategy,
    raw_person_name_strategy,
    raw_username_strategy,
    result_strategy,
)

__all__ = [
    "entity_id_strategy",
    "raw_email_strategy",
    "raw_person_name_strategy",
    "raw_username_strategy",
    "result_strategy",
]
