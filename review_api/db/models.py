import uuid
from datetime import datetime

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import relationship

from review_api.db.base import Base

class User(Base):
	__tablename__ = "users"

	id = Column(Uuid, primary_key=True, default=uuid.uuid4)
	username = Column(String(20), unique=True, index=True, nullable=False)
	password_hash = Column(String(255), nullable=False)

	reviews = relationship("Review", back_populates="user", cascade="all", passive_deletes=True)
	comments = relationship("Comment", back_populates="user", cascade="all", passive_deletes=True)

class Item(Base):
	__tablename__ = "items"

	id = Column(Uuid, primary_key=True, default=uuid.uuid4)
	name = Column(String(50), nullable=False)
	description = Column(Text, nullable=True)

	reviews = relationship("Review", back_populates="item", cascade="all", passive_deletes=True)

class Review(Base):
	__tablename__ = "reviews"
	__table_args__ = (CheckConstraint("rating >= 1 AND rating <= 5", name="ck_reviews_rating_range"),)

	id = Column(Uuid, primary_key=True, default=uuid.uuid4)
	user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
	items_id = Column(Uuid, ForeignKey("items.id", ondelete="CASCADE"), nullable=False, index=True)
	rating = Column(Integer, nullable=False)
	text = Column(Text, nullable=False)
	created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
	updated_at = Column(DateTime, nullable=True)

	user = relationship("User", back_populates="reviews")
	item = relationship("Item", back_populates="reviews")
	comments = relationship("Comment", back_populates="review", cascade="all", passive_deletes=True)

class Comment(Base):
	__tablename__ = "comments"

	id = Column(Uuid, primary_key=True, default=uuid.uuid4)
	user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
	review_id = Column(Uuid, ForeignKey("reviews.id", ondelete="CASCADE"), nullable=False, index=True)
	text = Column(Text, nullable=False)
	created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
	updated_at = Column(DateTime, nullable=True)

	user = relationship("User", back_populates="comments")
	review = relationship("Review", back_populates="comments")
