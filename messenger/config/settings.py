"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    ENV = os.getenv("MESSENGER_ENV", "development")
    DEBUG = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes", "on"}

    # Network
    HOST = os.getenv("HOST", "0.0.0.0")
    AUTH_SERVICE_PORT = int(os.getenv("AUTH_SERVICE_PORT", "8001"))
    USER_SERVICE_PORT = int(os.getenv("USER_SERVICE_PORT", "8002"))
    MESSAGE_SERVICE_PORT = int(os.getenv("MESSAGE_SERVICE_PORT", "8003"))
    WEBSOCKET_SERVICE_PORT = int(os.getenv("WEBSOCKET_SERVICE_PORT", "8004"))
    CORS_ALLOW_ORIGINS = os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")

    # Tokens
    # "demo": prefix-matched opaque tokens, "jwt": HS256-signed tokens
    TOKEN_BACKEND = os.getenv("TOKEN_BACKEND", "demo")
    TOKEN_SECRET = os.getenv("TOKEN_SECRET", "dev-secret-change-me")
    TOKEN_ISSUER = os.getenv("TOKEN_ISSUER", "messenger-auth")
    TOKEN_EXPIRES_IN = int(os.getenv("TOKEN_EXPIRES_IN", "3600"))  # seconds
    MIN_PASSWORD_LENGTH = int(os.getenv("MIN_PASSWORD_LENGTH", "4"))

    # Messages
    MESSAGE_MAX_LENGTH = int(os.getenv("MESSAGE_MAX_LENGTH", "1000"))
    MESSAGE_PREVIEW_LENGTH = int(os.getenv("MESSAGE_PREVIEW_LENGTH", "50"))

    # Connection registry
    CONNECTION_IDLE_TIMEOUT = int(os.getenv("CONNECTION_IDLE_TIMEOUT", "300"))
    CONNECTION_SWEEP_INTERVAL = float(os.getenv("CONNECTION_SWEEP_INTERVAL", "30"))

    # Sample users and messages loaded into the in-memory stores on construction
    SEED_SAMPLE_DATA = os.getenv("SEED_SAMPLE_DATA", "true").lower() in {
        "1",
        "true",
        "yes",
        "on",
    }

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH", "")
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "[%(asctime)s] [%(levelname)s] [%(correlation_id)s] %(name)s: %(message)s",
    )
