"""
Ziplan Authentication Service
bcrypt password hashing and JWT bearer tokens for account management
"""

from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any
from jose import JWTError, jwt
import bcrypt
import structlog
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from core.config import Settings, get_settings
from core.exceptions import AuthError, ConflictError, ValidationError
from middleware.logging import log_business_event
from models.users import User

logger = structlog.get_logger()

# bcrypt only reads the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72
MIN_PASSWORD_LENGTH = 6

INVALID_CREDENTIALS = "Invalid credentials"
UNAUTHORIZED = "Unauthorized"


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


class AuthService:
    def __init__(self, settings: Optional[Settings] = None):
        settings = settings or get_settings()

        # JWT settings
        self.secret_key = settings.JWT_SECRET_KEY
        self.algorithm = settings.JWT_ALGORITHM
        self.token_expire_days = settings.JWT_EXPIRE_DAYS
        self.bcrypt_rounds = settings.BCRYPT_ROUNDS

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a password against its hash"""
        try:
            return bcrypt.checkpw(_password_bytes(plain_password), hashed_password.encode("utf-8"))
        except ValueError:
            # Stored value is not a bcrypt hash
            return False

    def get_password_hash(self, password: str) -> str:
        """Hash a password with a fresh salt"""
        salt = bcrypt.gensalt(rounds=self.bcrypt_rounds)
        return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")

    def create_access_token(self, user_id: Any, now: Optional[datetime] = None) -> str:
        """Create a JWT bound to the user's id, expiring after the configured number of days"""
        issued_at = now or datetime.now(timezone.utc)
        to_encode = {
            "sub": str(user_id),
            "iat": issued_at,
            "exp": issued_at + timedelta(days=self.token_expire_days),
        }
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def verify_token(self, token: str) -> Dict[str, Any]:
        """Verify signature and expiry and return the claims"""
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as e:
            logger.info("Token rejected", reason=str(e))
            raise AuthError(UNAUTHORIZED)

        if not payload.get("sub"):
            raise AuthError(UNAUTHORIZED)

        return payload

    async def get_current_user(self, token: Optional[str], db: AsyncSession) -> User:
        """Resolve a bearer token to the stored user"""
        if not token:
            raise AuthError(UNAUTHORIZED)

        payload = self.verify_token(token)

        try:
            user_id = int(payload["sub"])
        except (TypeError, ValueError):
            raise AuthError(UNAUTHORIZED)

        user = await db.get(User, user_id)
        if not user:
            raise AuthError(UNAUTHORIZED)

        return user

    async def get_user_by_email(self, email: str, db: AsyncSession) -> Optional[User]:
        result = await db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def signup(self, email: Optional[str], password: Optional[str], db: AsyncSession) -> str:
        """Register a new user and return a token for it"""
        if not email or not password:
            raise ValidationError("Email and password required")

        # The unique index on users.email closes the race left by this check
        if await self.get_user_by_email(email, db):
            raise ConflictError("Email already in use")

        password_hash = await run_in_threadpool(self.get_password_hash, password)

        user = User(email=email, password_hash=password_hash)
        db.add(user)
        try:
            await db.commit()
        except IntegrityError:
            await db.rollback()
            logger.warning("Concurrent signup rejected by unique index", email=email)
            raise ConflictError("Email already in use")

        await db.refresh(user)
        log_business_event("user_signed_up", {"user_id": user.id})

        return self.create_access_token(user.id)

    async def login(self, email: Optional[str], password: Optional[str], db: AsyncSession) -> str:
        """Authenticate by email and password and return a fresh token"""
        if not email or not password:
            raise ValidationError("Email and password required")

        user = await self.get_user_by_email(email, db)
        if not user:
            raise AuthError(INVALID_CREDENTIALS, status_code=400)

        is_match = await run_in_threadpool(self.verify_password, password, user.password_hash)
        if not is_match:
            raise AuthError(INVALID_CREDENTIALS, status_code=400)

        log_business_event("user_logged_in", {"user_id": user.id})
        return self.create_access_token(user.id)

    async def update_email(self, user: User, new_email: Optional[str], db: AsyncSession) -> None:
        """Change the user's email"""
        if not new_email or "@" not in new_email:
            raise ValidationError("Invalid email")

        existing = await self.get_user_by_email(new_email, db)
        if existing and existing.id != user.id:
            raise ConflictError("Email already in use")

        user.email = new_email
        try:
            await db.commit()
        except IntegrityError:
            await db.rollback()
            raise ConflictError("Email already in use")

        log_business_event("email_updated", {"user_id": user.id})

    async def update_password(self, user: User, new_password: Optional[str], db: AsyncSession) -> None:
        """Re-hash and store a new password"""
        if not new_password or len(new_password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")

        user.password_hash = await run_in_threadpool(self.get_password_hash, new_password)
        await db.commit()

        log_business_event("password_updated", {"user_id": user.id})


# Global auth service instance
auth_service = AuthService()
