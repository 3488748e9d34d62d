"""Application configuration."""

from pathlib import Path
from typing import Literal
from pydantic import BaseModel, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_BOT_KEYWORDS = [
    "bot",
    "crawl",
    "spider",
    "slurp",
    "bingpreview",
    "facebookexternalhit",
    "applesearch",
    "google",
    "duckduckbot",
    "baiduspider",
    "yandex",
    "discordbot",
    "twitterbot",
    "whatsapp",
    "embedly",
    "linkedinbot",
    "vkshare",
    "telegrambot",
    "okhttp",
    "curl",
    "wget",
    "python-requests",
    "java/",
    "libwww",
    "go-http-client",
]


class GateSettings(BaseModel):
    """Terms-of-service gate configuration."""

    # Acceptance cookie
    cookie_name: str = "t3_terms_accepted"
    cookie_value: str = "true"
    cookie_max_age_seconds: int = 365 * 24 * 60 * 60

    # Only paths under this prefix are gated
    guarded_prefix: str = "/bot"
    accept_path: str = "/__accept-terms"

    # Interstitial page, with a placeholder for the encoded return URL
    document_path: Path = Path("public/tos.html")
    placeholder: str = "%%RETURN_TO%%"

    # Case-insensitive substrings identifying crawlers and HTTP libraries
    bot_keywords: list[str] = DEFAULT_BOT_KEYWORDS


class InviteSettings(BaseModel):
    """Discord invite broker configuration."""

    # JSON object mapping link id -> upstream Authorization header value
    credentials_path: Path = Path("invite-tokens.json")

    # Upstream invite-creation endpoint
    create_url: str = "https://discord.com/api/v10/channels/CHANGE_ME/invites"

    # Prefix joined with the returned invite code
    invite_base_url: str = "https://discord.gg/"

    # Validity assumed when upstream does not declare max_age
    default_max_age_seconds: int = 24 * 60 * 60


class KeySettings(BaseModel):
    """PGP key directory configuration."""

    # Directory holding keys.json
    directory: Path = Path("keys")
    index_file: str = "keys.json"

    # pubkey_url entries are site paths (e.g. "/keys/main.asc") under this root
    site_root: Path = Path(".")


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, using ``__`` for nested sections:

        ENVIRONMENT=production
        INVITES__CREDENTIALS_PATH=/etc/waypoint/invite-tokens.json
        INVITES__CREATE_URL=https://discord.com/api/v10/channels/123/invites
        GATE__DOCUMENT_PATH=/srv/site/public/tos.html
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows INVITES__CREATE_URL syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Git commit SHA (loaded from version.txt file or defaults to "unknown")
    git_sha: str = "unknown"

    host: str = "0.0.0.0"
    port: int = 8000

    # Nested settings
    gate: GateSettings = GateSettings()
    invites: InviteSettings = InviteSettings()
    keys: KeySettings = KeySettings()
    observability: ObservabilitySettings = ObservabilitySettings()

    @model_validator(mode="after")
    def load_version(self) -> "Settings":
        """Fill in the git SHA from the deployed version file."""
        self.git_sha = self._load_git_sha()
        return self

    @staticmethod
    def _load_git_sha() -> str:
        """Load git SHA from version file.

        Returns:
            Git SHA if version file exists, otherwise "unknown"
        """
        version_file = Path("/app/version.txt")
        if version_file.exists():
            try:
                return version_file.read_text().strip()
            except OSError:
                return "unknown"
        # In development, version file may not exist
        return "unknown"
