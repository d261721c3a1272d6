from passlib.hash import pbkdf2_sha256


def hash_password(plaintext: str) -> str:
    """Return a salted one-way hash; a fresh salt is drawn on every call."""
    return pbkdf2_sha256.hash(plaintext)


def verify_password(plaintext: str, hashed_password: str) -> bool:
    try:
        return pbkdf2_sha256.verify(plaintext, hashed_password)
    except ValueError:
        # Stored value is not a hash this handler understands.
        return False
