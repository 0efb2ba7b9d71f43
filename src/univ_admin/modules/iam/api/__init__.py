"""IAM HTTP edge."""
from univ_admin.modules.iam.api.router import router

__all__ = ["router"]
