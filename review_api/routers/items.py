from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from review_api.db.session import get_db
from review_api.db.models import Item
from review_api.schemas.items import ItemCreate, ItemOut
from review_api.core.errors import NotFound
from review_api.core.logging import log_event
from review_api.routers.deps import parse_id

router = APIRouter(prefix="/api/items", tags=["items"])

@router.get("", response_model=list[ItemOut])
def list_items(db: Session = Depends(get_db)):
	return db.query(Item).all()

@router.post("", response_model=ItemOut)
def create_item(request: Request, payload: ItemCreate, db: Session = Depends(get_db)):
	item = Item(name=payload.name, description=payload.description)
	db.add(item)
	db.commit()
	db.refresh(item)

	log_event("item_created", item_id=str(item.id), request_id=request.state.request_id)
	return item

@router.get("/{item_id}", response_model=ItemOut)
def get_item(item_id: str, db: Session = Depends(get_db)):
	item = db.get(Item, parse_id(item_id, "Item not found"))
	if not item:
		raise NotFound("Item not found")
	return item
