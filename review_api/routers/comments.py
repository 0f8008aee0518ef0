from datetime import datetime

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from review_api.db.session import get_db
from review_api.db.models import Comment, Review, User
from review_api.schemas.comments import CommentCreate, CommentMessage, CommentOut, CommentUpdate
from review_api.core.security import get_current_user
from review_api.core.errors import Forbidden, NotFound
from review_api.core.logging import log_event
from review_api.routers.deps import parse_id, require_path_user

router = APIRouter(prefix="/api", tags=["comments"])

def _owned_comment(db: Session, comment_id: str, user: User) -> Comment:
	comment = db.get(Comment, parse_id(comment_id, "Comment not found"))
	if not comment:
		raise NotFound("Comment not found")
	if comment.user_id != user.id:
		raise Forbidden()
	return comment

@router.get("/reviews/{review_id}/comments", response_model=list[CommentOut])
def list_review_comments(review_id: str, db: Session = Depends(get_db)):
	return (
		db.query(Comment)
		.filter(Comment.review_id == parse_id(review_id, "Review not found"))
		.order_by(Comment.created_at.desc())
		.all()
	)

@router.post(
	"/items/{item_id}/reviews/{review_id}/comments",
	response_model=CommentOut,
	status_code=status.HTTP_201_CREATED,
)
def create_comment(
	request: Request,
	item_id: str,
	review_id: str,
	payload: CommentCreate,
	db: Session = Depends(get_db),
	user: User = Depends(get_current_user),
):
	if payload.user_id != user.id:
		raise Forbidden("Cannot comment on behalf of another user")

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

	comment = Comment(user_id=user.id, review_id=review.id, text=payload.text)
	db.add(comment)
	db.commit()
	db.refresh(comment)

	log_event("comment_created", comment_id=str(comment.id), review_id=str(review.id), request_id=request.state.request_id)
	return comment

@router.get("/comments/me", response_model=list[CommentOut])
def list_my_comments(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
	return (
		db.query(Comment)
		.filter(Comment.user_id == user.id)
		.order_by(Comment.created_at.desc())
		.all()
	)

@router.put("/users/{user_id}/comments/{comment_id}", response_model=CommentMessage)
def update_comment(
	request: Request,
	user_id: str,
	comment_id: str,
	payload: CommentUpdate,
	db: Session = Depends(get_db),
	user: User = Depends(get_current_user),
):
	require_path_user(user_id, user)
	comment = _owned_comment(db, comment_id, user)

	comment.text = payload.text
	comment.updated_at = datetime.utcnow()
	db.commit()
	db.refresh(comment)

	log_event("comment_updated", comment_id=str(comment.id), actor=str(user.id), request_id=request.state.request_id)
	return CommentMessage(message="Comment updated", comment=CommentOut.model_validate(comment))

@router.delete("/users/{user_id}/comments/{comment_id}", response_model=CommentMessage)
def delete_comment(
	request: Request,
	user_id: str,
	comment_id: str,
	db: Session = Depends(get_db),
	user: User = Depends(get_current_user),
):
	require_path_user(user_id, user)
	comment = _owned_comment(db, comment_id, user)

	deleted = CommentOut.model_validate(comment)
	db.delete(comment)
	db.commit()

	log_event("comment_deleted", comment_id=str(deleted.id), actor=str(user.id), request_id=request.state.request_id)
	return CommentMessage(message="Comment deleted", comment=deleted)
