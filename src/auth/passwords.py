"""Password and token hashing helpers."""

import hashlib
import secrets

import bcrypt


def hash_password(password: str) -> str:
    """Hash a password with bcrypt."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against a bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False


def new_token() -> str:
    """A fresh URL-safe bearer or verification token."""
    return secrets.token_urlsafe(32)


def hash_token(token: str) -> str:
    """sha256 of a bearer token, as stored in the sessions table."""
    return hashlib.sha256(token.encode("utf-8")).hexdigest()
