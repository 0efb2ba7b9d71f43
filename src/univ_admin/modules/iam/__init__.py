"""IAM – user accounts, credentials and authentication tokens."""
