"""Centralized configuration — all env vars in one place."""

import os

RESPONSE_FORMATS = ("trails", "raw")


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self._problems: list[str] = []

        self.cors_origins: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
        self.git_sha: str = os.getenv("GIT_SHA", "unknown")
        self.environment: str = os.getenv("ENVIRONMENT", "local")
        self.port: int = self._number("PORT", "8080", int)

        # Guardian Content API
        self.capi_api_key: str | None = os.getenv("CAPI_API_KEY")
        self.capi_base_url: str = os.getenv("CAPI_BASE_URL", "https://content.guardianapis.com").rstrip("/")
        self.capi_timeout_seconds: float = self._number("CAPI_TIMEOUT_SECONDS", "10", float)

        # Most-viewed cache
        self.cache_ttl_seconds: float = self._number("CACHE_TTL_SECONDS", "300", float)
        self.cache_cleanup_seconds: float = self._number("CACHE_CLEANUP_SECONDS", "600", float)
        self.cached_editions: frozenset[str] = frozenset(
            code.strip() for code in os.getenv("CACHED_EDITIONS", "uk,us,au").split(",") if code.strip()
        )
        self.response_format: str = os.getenv("MOST_VIEWED_FORMAT", "trails").lower()

    def _number(self, env_var: str, default: str, kind):
        """Parse a numeric env var; unparsable values fall back to the default
        and are reported by ``validate()``."""
        raw = os.getenv(env_var, default)
        try:
            return kind(raw)
        except ValueError:
            self._problems.append(f"{env_var} must be numeric ({kind.__name__}), got {raw!r}")
            return kind(default)

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def validate(self) -> list[str]:
        """Return a list of configuration problems; empty when usable."""
        problems = list(self._problems)
        if not self.capi_api_key:
            problems.append("CAPI_API_KEY is required")
        if self.response_format not in RESPONSE_FORMATS:
            problems.append(
                f"MOST_VIEWED_FORMAT must be one of {list(RESPONSE_FORMATS)}, got {self.response_format!r}"
            )
        if self.cache_ttl_seconds <= 0:
            problems.append("CACHE_TTL_SECONDS must be positive")
        if self.capi_timeout_seconds <= 0:
            problems.append("CAPI_TIMEOUT_SECONDS must be positive")
        return problems


settings = Settings()
