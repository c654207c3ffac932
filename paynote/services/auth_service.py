"""
Auth service: user registration and credential checks.

Session handling lives in the API layer. This service only
knows about users and password hashes.
"""

from passlib.context import CryptContext
from sqlalchemy import select
from sqlalchemy.orm import Session

from paynote.errors import AuthenticationError, ValidationError
from paynote.logging_setup import get_logger
from paynote.models.user import User
from paynote.schemas.auth import RegisterRequest

logger = get_logger(__name__)

# Password hashing
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def normalize_email(email: str) -> str:
    return email.strip().lower()


class AuthService:

    def __init__(self, db: Session):
        self.db = db

    def _find_by_email(self, email: str) -> User | None:
        return self.db.execute(
            select(User).where(User.email == normalize_email(email))
        ).scalar_one_or_none()

    def register(self, request: RegisterRequest) -> User:
        """Create a new user. Emails are unique, case-insensitively."""
        if self._find_by_email(request.email):
            raise ValidationError(
                f"User with email '{normalize_email(request.email)}' already exists"
            )

        name = request.name.strip()
        if not name:
            raise ValidationError("Name is required")

        user = User(
            email=normalize_email(request.email),
            name=name,
            password_hash=hash_password(request.password),
        )
        self.db.add(user)
        self.db.flush()

        logger.info("Registered user %s", user.id)
        return user

    def authenticate(self, email: str, password: str) -> User:
        """
        Return the user for a valid email/password pair.

        The same error is raised for an unknown email and a
        wrong password.
        """
        user = self._find_by_email(email)
        if not user or not verify_password(password, user.password_hash):
            logger.warning("Failed login attempt")
            raise AuthenticationError("Invalid email or password")
        return user

    def get_user(self, user_id: int) -> User:
        user = self.db.get(User, user_id)
        if not user:
            raise AuthenticationError("Unauthorized")
        return user
