import uuid

from pydantic import BaseModel, Field, validator

class UserCreate(BaseModel):
	username: str = Field(min_length=1, max_length=20)
	password: str = Field(min_length=1)

	@validator("username")
	def username_not_blank(cls, v):
		if not v.strip():
			raise ValueError("Username cannot be blank")
		return v.strip()

class LoginRequest(BaseModel):
	username: str
	password: str

	# stored usernames are stripped at registration
	@validator("username")
	def strip_username(cls, v):
		return v.strip()

class UserOut(BaseModel):
	id: uuid.UUID
	username: str

	class Config:
		from_attributes = True

class RegisterResponse(BaseModel):
	user: UserOut
	token: str

class TokenResponse(BaseModel):
	token: str
