"""
Nainaland Backend — Application Configuration
===============================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe environment variable loading with validation on startup.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by every module that needs configuration values.
When:  Loaded once at module import time; checked again when the app starts.
"""

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator
from typing import List

DEFAULT_JWT_SECRET = "nainaland-secret-key"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have development defaults. Production deployments MUST
    override JWT_SECRET and ADMIN_PASSWORD.
    """

    # ── Authentication ────────────────────────────────────────────────────
    # What: HMAC key used to sign admin bearer tokens (HS256)
    jwt_secret: str = Field(default=DEFAULT_JWT_SECRET)
    jwt_algorithm: str = Field(default="HS256")

    # What: Token lifetime; the admin UI re-prompts for login after expiry
    access_token_expire_minutes: int = Field(default=60 * 24, ge=1, le=60 * 24 * 30)

    # What: Account created in every fresh store
    admin_username: str = Field(default="admin", min_length=1)
    admin_password: str = Field(default="admin123", min_length=1)

    # What: bcrypt cost factor (2^rounds iterations)
    # Trade-off: 12 is the library default; tests drop to 4 to stay fast
    bcrypt_rounds: int = Field(default=12, ge=4, le=16)

    # ── Storage ───────────────────────────────────────────────────────────
    # What: Insert the sample properties, blog posts and testimonials at startup
    seed_sample_data: bool = Field(default=True)

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated URLs
    cors_origins: str = Field(default="http://localhost:5173,http://localhost:3000")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8000, ge=1024, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Rate Limiting ─────────────────────────────────────────────────────
    # What: Per-IP sliding window on the public write endpoints
    #       (contact form submissions and login attempts)
    rate_limit_requests: int = Field(default=30, ge=1, le=10000)
    rate_limit_window: int = Field(default=3600, ge=1, le=86400)  # seconds

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }

    def validate_required_for_production(self) -> None:
        """
        What:  Flags settings that are still at their insecure development defaults.
        When:  Called during app startup (lifespan).
        How:   Collects every problem and raises one ValueError listing them.
        """
        errors = []
        if self.jwt_secret == DEFAULT_JWT_SECRET:
            errors.append("JWT_SECRET is using the development default; tokens can be forged.")
        if self.admin_password == "admin123":
            errors.append("ADMIN_PASSWORD is using the development default.")
        if errors:
            raise ValueError(
                "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
            )


# Singleton instance — imported throughout the application
settings = Settings()
