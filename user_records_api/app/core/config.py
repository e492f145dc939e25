"""
Configuration management.

The ``Settings`` dataclass reads configuration directly from environment
variables.  Defaults target a local development setup with DynamoDB
Local listening on ``http://localhost:8000``.  In a deployment, point
``DYNAMODB_ENDPOINT`` at the regional endpoint (or leave it empty to let
boto3 resolve it) and provide real credentials.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional

STARTUP_BEST_EFFORT = "best_effort"
STARTUP_FAIL_FAST = "fail_fast"


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


def _env_list(name: str, default: str) -> List[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "User Records API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # DynamoDB connection.  An empty endpoint means "use the AWS default
    # endpoint for the region".  Credentials left unset fall through to
    # boto3's usual provider chain (profile, instance role, ...).
    aws_region: str = os.getenv("AWS_REGION", "local")
    dynamodb_endpoint: str = os.getenv("DYNAMODB_ENDPOINT", "http://localhost:8000")
    aws_access_key_id: Optional[str] = os.getenv("AWS_ACCESS_KEY_ID")
    aws_secret_access_key: Optional[str] = os.getenv("AWS_SECRET_ACCESS_KEY")
    users_table: str = os.getenv("USERS_TABLE", "Users")

    # What to do when table bootstrap or seeding fails at startup:
    # ``best_effort`` logs and keeps serving, ``fail_fast`` aborts.
    startup_policy: str = os.getenv("STARTUP_POLICY", STARTUP_BEST_EFFORT)
    seed_on_startup: bool = _env_flag("SEED_ON_STARTUP", "true")

    cors_origins: List[str] = field(default_factory=lambda: _env_list("CORS_ORIGINS", "*"))

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    @property
    def fail_fast(self) -> bool:
        return self.startup_policy.lower() == STARTUP_FAIL_FAST


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# therefore be set before this module is imported.
settings = Settings()
