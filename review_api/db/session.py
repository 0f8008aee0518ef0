from sqlalchemy import create_engine, event
from sqlalchemy.engine.url import make_url
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from review_api.core.config import settings

def build_engine(database_url: str):
	url = make_url(database_url)
	if not url.drivername.startswith("sqlite"):
		return create_engine(database_url, pool_pre_ping=True)

	kwargs = {"connect_args": {"check_same_thread": False}}
	if url.database in (None, "", ":memory:"):
		# one shared connection, otherwise every session sees its own empty database
		kwargs["poolclass"] = StaticPool
	sqlite_engine = create_engine(database_url, **kwargs)

	@event.listens_for(sqlite_engine, "connect")
	def _enable_foreign_keys(dbapi_connection, connection_record):
		cursor = dbapi_connection.cursor()
		cursor.execute("PRAGMA foreign_keys=ON")
		cursor.close()

	return sqlite_engine

engine = build_engine(settings.DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def get_db():
	db = SessionLocal()
	try:
		yield db
	finally:
		db.close()
