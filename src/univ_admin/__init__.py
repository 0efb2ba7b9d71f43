"""
univ_admin – University administration backend.

Import path convention::

    from univ_admin.kernel.types import Result, Ok, Err, Option
    from univ_admin.kernel.ddd import AggregateRoot, DomainEvent, ValueObject
    from univ_admin.modules.iam.domain import UserAccount
    from univ_admin.app import create_app
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
