import uuid

from review_api.core.errors import Forbidden, NotFound
from review_api.db.models import User

def parse_id(raw: str, not_found_message: str) -> uuid.UUID:
	# a malformed id can never match a row
	try:
		return uuid.UUID(raw)
	except ValueError:
		raise NotFound(not_found_message)

def require_path_user(raw_user_id: str, user: User) -> None:
	try:
		path_user_id = uuid.UUID(raw_user_id)
	except ValueError:
		raise Forbidden()
	if path_user_id != user.id:
		raise Forbidden()
