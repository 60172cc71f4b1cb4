class PasswordHashingError(Exception):
    """Raised when the password hasher itself fails (not on a mismatch)."""
