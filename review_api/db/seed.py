"""Administrative reset and seed of the review database.

Destructive: ``reset_database`` drops every table. It only runs when asked
for, either with ``RESEED_ON_STARTUP=true`` or from the command line::

    python -m review_api.db.seed --reset
"""

import argparse
from typing import Dict

from sqlalchemy.orm import Session

from review_api.core.logging import log_event
from review_api.core.security import hash_password
from review_api.db.base import Base
from review_api.db.models import Comment, Item, Review, User

SEED_USERS = [("alice", "password123"), ("bob", "password123"), ("charlie", "password123")]

SEED_ITEMS = [
	("Widget A", "A basic widget for daily tasks."),
	("Gadget B", "A powerful gadget with multiple uses."),
]


def reset_database(engine) -> None:
	Base.metadata.drop_all(bind=engine)
	Base.metadata.create_all(bind=engine)
	log_event("database_reset", url=engine.url.render_as_string(hide_password=True))


def seed_data(db: Session) -> Dict[str, int]:
	alice, bob, charlie = [
		User(username=username, password_hash=hash_password(password))
		for username, password in SEED_USERS
	]
	widget, gadget = [Item(name=name, description=description) for name, description in SEED_ITEMS]
	db.add_all([alice, bob, charlie, widget, gadget])
	db.flush()

	widget_review = Review(user_id=alice.id, items_id=widget.id, rating=5, text="This widget is fantastic!")
	gadget_review = Review(
		user_id=bob.id,
		items_id=gadget.id,
		rating=4,
		text="Gadget B is pretty good, but has some flaws.",
	)
	db.add_all([widget_review, gadget_review])
	db.flush()

	db.add_all([
		Comment(user_id=charlie.id, review_id=widget_review.id, text="I agree, Widget A is great!"),
		Comment(user_id=alice.id, review_id=gadget_review.id, text="What flaws did you find?"),
	])
	db.commit()

	counts = {"users": 3, "items": 2, "reviews": 2, "comments": 2}
	log_event("database_seeded", **counts)
	return counts


def main(argv=None) -> None:
	from review_api.db.session import SessionLocal, engine

	ap = argparse.ArgumentParser(description="Create tables and load the fixed seed rows")
	ap.add_argument("--reset", action="store_true", help="drop and recreate every table first (destroys data)")
	args = ap.parse_args(argv)

	if args.reset:
		reset_database(engine)
	else:
		Base.metadata.create_all(bind=engine)

	db = SessionLocal()
	try:
		if not args.reset and db.query(User).first():
			log_event("database_seed_skipped", reason="not_empty")
			return
		seed_data(db)
	finally:
		db.close()


if __name__ == "__main__":
	main()
