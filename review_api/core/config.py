import os
from dotenv import load_dotenv

load_dotenv()

def _bool(value: str | None, default: bool = False) -> bool:
	if value is None:
		return default
	return value.strip().lower() in {"1", "true", "yes", "on"}

class Settings:
	APP_NAME = "Review Platform API"
	DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./app.db")

	JWT_SECRET = os.getenv("JWT_SECRET", "")
	JWT_ALG = "HS256"

	ACCESS_TOKEN_EXPIRES_HOURS = int(os.getenv("ACCESS_TOKEN_EXPIRES_HOURS", "24"))
	BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "10"))

	# Drops every table and loads the fixed seed rows on startup.
	RESEED_ON_STARTUP = _bool(os.getenv("RESEED_ON_STARTUP"), False)

	LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

settings = Settings()

class ConfigurationError(RuntimeError):
	pass

def check_settings(current: Settings = settings) -> None:
	if not current.JWT_SECRET:
		raise ConfigurationError("JWT_SECRET must be set before the API can start")
	if current.ACCESS_TOKEN_EXPIRES_HOURS <= 0:
		raise ConfigurationError("ACCESS_TOKEN_EXPIRES_HOURS must be positive")
	if not 4 <= current.BCRYPT_ROUNDS <= 31:
		raise ConfigurationError("BCRYPT_ROUNDS must be between 4 and 31")
