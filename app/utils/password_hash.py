# password_hash.py
from passlib.context import CryptContext


# pbkdf2_sha256 avoids the native bcrypt dependency.
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # Not a recognised hash (e.g. a legacy plaintext row).
        return False
