from datetime import datetime

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from review_api.db.session import get_db
from review_api.db.models import Item, Review, User
from review_api.schemas.reviews import ReviewCreate, ReviewMessage, ReviewOut, ReviewUpdate
from review_api.core.security import get_current_user
from review_api.core.errors import Forbidden, NotFound
from review_api.core.logging import log_event
from review_api.routers.deps import parse_id, require_path_user

router = APIRouter(prefix="/api", tags=["reviews"])

@router.post("/items/{item_id}/reviews", response_model=ReviewOut, status_code=status.HTTP_201_CREATED)
def create_review(request: Request, item_id: str, payload: ReviewCreate, db: Session = Depends(get_db)):
	item = db.get(Item, parse_id(item_id, "Item not found"))
	if not item:
		raise NotFound("Item not found")
	if not db.get(User, payload.user_id):
		raise NotFound("User not found")

	review = Review(user_id=payload.user_id, items_id=item.id, rating=payload.rating, text=payload.text)
	db.add(review)
	db.commit()
	db.refresh(review)

	log_event("review_created", review_id=str(review.id), item_id=str(item.id), request_id=request.state.request_id)
	return review

@router.get("/items/{item_id}/reviews/{review_id}", response_model=ReviewOut)
def get_review(item_id: str, review_id: str, db: Session = Depends(get_db)):
	review = (
		db.query(Review)
		.filter(
			Review.id == parse_id(review_id, "Review not found"),
			Review.items_id == parse_id(item_id, "Review not found"),
		)
		.first()
	)
	if not review:
		raise NotFound("Review not found")
	return review

@router.get("/reviews/me", response_model=list[ReviewOut])
def list_my_reviews(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
	return (
		db.query(Review)
		.filter(Review.user_id == user.id)
		.order_by(Review.created_at.desc())
		.all()
	)

@router.put("/users/{user_id}/reviews/{review_id}", response_model=ReviewMessage)
def update_review(
	request: Request,
	user_id: str,
	review_id: str,
	payload: ReviewUpdate,
	db: Session = Depends(get_db),
	user: User = Depends(get_current_user),
):
	require_path_user(user_id, user)
	review = db.get(Review, parse_id(review_id, "Review not found"))
	if not review:
		raise NotFound("Review not found")
	if review.user_id != user.id:
		raise Forbidden()

	review.rating = payload.rating
	review.text = payload.text
	review.updated_at = datetime.utcnow()
	db.commit()
	db.refresh(review)

	log_event("review_updated", review_id=str(review.id), actor=str(user.id), request_id=request.state.request_id)
	return ReviewMessage(message="Review updated", review=ReviewOut.model_validate(review))

@router.delete("/reviews/{review_id}", response_model=ReviewMessage)
def delete_review(
	request: Request,
	review_id: str,
	db: Session = Depends(get_db),
	user: User = Depends(get_current_user),
):
	review = db.get(Review, parse_id(review_id, "Review not found"))
	if not review:
		raise NotFound("Review not found")
	if review.user_id != user.id:
		raise Forbidden()

	deleted = ReviewOut.model_validate(review)
	db.delete(review)
	db.commit()

	log_event("review_deleted", review_id=str(deleted.id), actor=str(user.id), request_id=request.state.request_id)
	return ReviewMessage(message="Review deleted", review=deleted)
