"""Runtime configuration for the stats client and insights store.

Values come from constructor arguments first, then environment variables
(a local ``.env`` file is loaded on import).

Environment Variables:
    - WPCOM_API_BASE_URL: REST API base URL (defaults to the public API)
    - WPCOM_ACCESS_TOKEN: OAuth2 bearer token with stats access
    - STATS_TAGS_MAX: Number of tag groups requested per fetch
"""
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .api.exceptions import ConfigurationError

load_dotenv()

DEFAULT_BASE_URL = "https://public-api.wordpress.com/rest/v1.1"
DEFAULT_TAGS_MAX = 10


@dataclass(frozen=True)
class StatsConfig:
    """Settings shared by StatsClient and WPComInsightsStore."""

    access_token: str
    base_url: str = DEFAULT_BASE_URL
    tags_max: int = DEFAULT_TAGS_MAX

    @classmethod
    def from_env(
        cls,
        access_token: Optional[str] = None,
        base_url: Optional[str] = None,
        tags_max: Optional[int] = None,
    ) -> "StatsConfig":
        """Build a config, falling back to environment variables.

        Raises:
            ConfigurationError: If no access token is available or
                STATS_TAGS_MAX is not a positive integer.
        """
        token = access_token or os.getenv("WPCOM_ACCESS_TOKEN")
        if not token:
            raise ConfigurationError(
                "Access token is required. Provide access_token or set WPCOM_ACCESS_TOKEN.",
                missing_keys=["WPCOM_ACCESS_TOKEN"],
            )

        url = (base_url or os.getenv("WPCOM_API_BASE_URL") or DEFAULT_BASE_URL).rstrip("/")

        if tags_max is None:
            raw_max = os.getenv("STATS_TAGS_MAX")
            try:
                tags_max = int(raw_max) if raw_max else DEFAULT_TAGS_MAX
            except ValueError as e:
                raise ConfigurationError(
                    f"STATS_TAGS_MAX must be an integer, got {raw_max!r}",
                    cause=e,
                )
        if tags_max < 1:
            raise ConfigurationError(f"tags_max must be positive, got {tags_max}")

        return cls(access_token=token, base_url=url, tags_max=tags_max)
