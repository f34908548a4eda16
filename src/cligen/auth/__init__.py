"""Auth module public exports."""

from cligen.auth.validation import CredentialValidator, check_scopes

__all__ = ["CredentialValidator", "check_scopes"]
