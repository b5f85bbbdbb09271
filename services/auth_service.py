"""
Password hashing
bcrypt hashes compatible with the web app's login check
"""
import bcrypt

import config


def _to_bcrypt_secret(password: str) -> bytes:
    # bcrypt only uses the first 72 bytes
    secret = str(password).encode("utf-8")
    return secret[:config.BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    """Hash a password with bcrypt (work factor BCRYPT_ROUNDS)"""
    salt = bcrypt.gensalt(rounds=config.BCRYPT_ROUNDS)
    return bcrypt.hashpw(_to_bcrypt_secret(password), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a password against a stored bcrypt hash"""
    try:
        return bcrypt.checkpw(_to_bcrypt_secret(plain_password), hashed_password.encode("utf-8"))
    except ValueError as e:
        print(f"[WARNING] Password verification error: {str(e)}")
        return False
