"""IAM value objects."""
from univ_admin.modules.iam.domain.value_objects.active_flag import ActiveFlag
from univ_admin.modules.iam.domain.value_objects.email import EmailAddress
from univ_admin.modules.iam.domain.value_objects.hashed_password import HashedPassword
from univ_admin.modules.iam.domain.value_objects.person_name import PersonName
from univ_admin.modules.iam.domain.value_objects.role import Role
from univ_admin.modules.iam.domain.value_objects.username import Username

__all__ = [
    "ActiveFlag",
    "EmailAddress",
    "HashedPassword",
    "PersonName",
    "Role",
    "Username",
]
