import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, validator

class ReviewCreate(BaseModel):
	user_id: uuid.UUID
	rating: int = Field(ge=1, le=5, strict=True)
	text: str

	@validator("text")
	def text_not_blank(cls, v):
		if not v.strip():
			raise ValueError("Review text cannot be empty")
		return v

class ReviewUpdate(BaseModel):
	rating: int = Field(ge=1, le=5, strict=True)
	text: str

	@validator("text")
	def text_not_blank(cls, v):
		if not v.strip():
			raise ValueError("Review text cannot be empty")
		return v

class ReviewOut(BaseModel):
	id: uuid.UUID
	user_id: uuid.UUID
	items_id: uuid.UUID
	rating: int
	text: str
	created_at: datetime
	updated_at: Optional[datetime] = None

	class Config:
		from_attributes = True

class ReviewMessage(BaseModel):
	message: str
	review: ReviewOut
