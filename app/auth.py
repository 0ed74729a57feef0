import logging

from passlib.context import CryptContext
from starlette.concurrency import run_in_threadpool

from app.exceptions import PasswordHashingError

# Initialize logging
logger = logging.getLogger(__name__)

# Password hashing context: argon2 is memory-hard and salts every hash
pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


# Function to hash a password
def hash_password(password: str) -> str:
    try:
        return pwd_context.hash(password)
    except Exception as e:
        logger.error(f"Password hashing backend failed: {type(e).__name__}")
        raise PasswordHashingError() from e


# Function to verify a password
def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Check a plaintext password against a stored hash.

    Any mismatch, malformed or foreign hash, or backend failure counts as
    a failed verification.
    """
    if not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        logger.warning("Stored password hash could not be parsed")
        return False
    except Exception as e:
        logger.error(f"Password verification backend failed: {type(e).__name__}")
        return False


# Hashing is CPU bound; keep it off the event loop
async def hash_password_async(password: str) -> str:
    return await run_in_threadpool(hash_password, password)


async def verify_password_async(plain_password: str, hashed_password: str) -> bool:
    return await run_in_threadpool(verify_password, plain_password, hashed_password)
