from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from review_api.core.config import settings, check_settings
from review_api.core.logging import request_id_middleware
from review_api.core.errors import (
	http_exception_handler, validation_exception_handler,
	integrity_error_handler, store_error_handler,
)
from review_api.db.session import engine, SessionLocal
from review_api.db.base import Base
from review_api.db.seed import reset_database, seed_data

from review_api.routers.auth import router as auth_router
from review_api.routers.items import router as items_router
from review_api.routers.reviews import router as reviews_router
from review_api.routers.comments import router as comments_router


def reseed(bind, session_factory) -> None:
	reset_database(bind)
	db = session_factory()
	try:
		seed_data(db)
	finally:
		db.close()

def create_app() -> FastAPI:
	# an unsigned or guessable token secret is fatal, not a default
	check_settings(settings)

	app = FastAPI(title=settings.APP_NAME)

	# DB init
	if settings.RESEED_ON_STARTUP:
		reseed(engine, SessionLocal)
	else:
		Base.metadata.create_all(bind=engine)

	# Middleware
	app.middleware("http")(request_id_middleware)

	# Errors share one JSON shape
	app.add_exception_handler(StarletteHTTPException, http_exception_handler)
	app.add_exception_handler(RequestValidationError, validation_exception_handler)
	app.add_exception_handler(IntegrityError, integrity_error_handler)
	app.add_exception_handler(SQLAlchemyError, store_error_handler)

	# Routers
	app.include_router(auth_router)
	app.include_router(items_router)
	app.include_router(reviews_router)
	app.include_router(comments_router)

	@app.get("/health")
	def health():
		return {"status": "OK"}

	return app

app = create_app()

if __name__ == "__main__":
	import uvicorn
	uvicorn.run(app, host="0.0.0.0", port=8000)
