import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, validator

class CommentCreate(BaseModel):
	user_id: uuid.UUID
	text: str

	@validator("text")
	def text_not_blank(cls, v):
		if not v.strip():
			raise ValueError("Comment text cannot be empty")
		return v

class CommentUpdate(BaseModel):
	text: str

	@validator("text")
	def text_not_blank(cls, v):
		if not v.strip():
			raise ValueError("Comment text cannot be empty")
		return v

class CommentOut(BaseModel):
	id: uuid.UUID
	user_id: uuid.UUID
	review_id: uuid.UUID
	text: str
	created_at: datetime
	updated_at: Optional[datetime] = None

	class Config:
		from_attributes = True

class CommentMessage(BaseModel):
	message: str
	comment: CommentOut
