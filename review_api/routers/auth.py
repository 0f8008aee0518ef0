from fastapi import APIRouter, Depends, Request
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from review_api.db.session import get_db
from review_api.db.models import User
from review_api.schemas.auth import LoginRequest, RegisterResponse, TokenResponse, UserCreate, UserOut
from review_api.core.security import (
	hash_password, verify_password,
	create_access_token, get_current_user,
)
from review_api.core.errors import Conflict, Unauthenticated
from review_api.core.logging import log_event

router = APIRouter(prefix="/api", tags=["auth"])

@router.post("/users", response_model=RegisterResponse)
def register(request: Request, payload: UserCreate, db: Session = Depends(get_db)):
	exists = db.query(User).filter(User.username == payload.username).first()
	if exists:
		raise Conflict("Username already taken")

	user = User(username=payload.username, password_hash=hash_password(payload.password))
	db.add(user)
	try:
		db.commit()
	except IntegrityError:
		# lost a race with a concurrent registration of the same name
		db.rollback()
		raise Conflict("Username already taken")
	db.refresh(user)

	log_event("user_registered", user_id=str(user.id), username=user.username, request_id=request.state.request_id)
	return RegisterResponse(user=UserOut.model_validate(user), token=create_access_token(user.id))

@router.post("/login", response_model=TokenResponse)
def login(request: Request, payload: LoginRequest, db: Session = Depends(get_db)):
	user = db.query(User).filter(User.username == payload.username).first()

	if not user or not verify_password(payload.password, user.password_hash):
		raise Unauthenticated("Invalid credentials")

	log_event("user_login", user_id=str(user.id), request_id=request.state.request_id)
	return {"token": create_access_token(user.id)}

@router.get("/auth/me", response_model=UserOut)
def get_me(user: User = Depends(get_current_user)):
	return user
