import uuid
from typing import Optional

from pydantic import BaseModel, Field, validator

class ItemCreate(BaseModel):
	name: str = Field(min_length=1, max_length=50)
	description: Optional[str] = None

	@validator("name")
	def name_not_blank(cls, v):
		if not v.strip():
			raise ValueError("Name cannot be blank")
		return v

class ItemOut(BaseModel):
	id: uuid.UUID
	name: str
	description: Optional[str] = None

	class Config:
		from_attributes = True
