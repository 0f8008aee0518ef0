import uuid
from datetime import datetime, timedelta, timezone

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from review_api.core.config import settings
from review_api.core.errors import Unauthenticated
from review_api.db.session import get_db
from review_api.db.models import User

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=settings.BCRYPT_ROUNDS)
bearer_scheme = HTTPBearer(auto_error=False)

class InvalidToken(Exception):
	pass

def _normalize_password(password: str) -> str:
	# bcrypt only considers the first 72 bytes; truncate consistently to avoid errors.
	raw = password.encode("utf-8")
	if len(raw) <= 72:
		return password
	return raw[:72].decode("utf-8", errors="ignore")

def hash_password(password: str) -> str:
	return pwd_context.hash(_normalize_password(password))

def verify_password(password: str, password_hash: str) -> bool:
	"""False on mismatch; a hash passlib cannot identify raises ValueError."""
	return pwd_context.verify(_normalize_password(password), password_hash)

def _create_token(subject: str, expires_delta: timedelta) -> str:
	now = datetime.now(timezone.utc)
	payload = {
		"sub": subject,
		"iat": int(now.timestamp()),
		"exp": int((now + expires_delta).timestamp()),
	}
	return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALG)

def create_access_token(user_id: uuid.UUID) -> str:
	return _create_token(str(user_id), timedelta(hours=settings.ACCESS_TOKEN_EXPIRES_HOURS))

def verify_token(token: str) -> uuid.UUID:
	try:
		payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALG])
	except JWTError as exc:
		raise InvalidToken(str(exc)) from exc

	subject = payload.get("sub")
	if not subject:
		raise InvalidToken("Token has no subject")
	try:
		return uuid.UUID(subject)
	except (TypeError, ValueError) as exc:
		raise InvalidToken("Token subject is not a user id") from exc

def get_current_user(
	creds: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
	db: Session = Depends(get_db),
) -> User:
	if not creds:
		raise Unauthenticated()
	try:
		user_id = verify_token(creds.credentials)
	except InvalidToken:
		raise Unauthenticated("Invalid or expired token")

	user = db.get(User, user_id)
	if not user:
		raise Unauthenticated("User not found")
	return user
