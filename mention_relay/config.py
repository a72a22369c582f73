"""Configuration loaded once at startup."""

__version__ = "0.1.0"

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple

from dotenv import load_dotenv

WEBHOOK_TIMEOUT_SECONDS = 10

REQUIRED_ENV_VARS = ("DISCORD_TOKEN", "BOT_ID", "N8N_WEBHOOK")

_TRUTHY = ("1", "true", "yes", "on")


class ConfigError(ValueError):
    """Raised when a required startup value is missing."""

    def __init__(self, missing: Tuple[str, ...]):
        self.missing = tuple(missing)
        super().__init__(
            f"Missing env vars: {', '.join(self.missing)}. "
            f"Set {', '.join(REQUIRED_ENV_VARS)} in .env"
        )


@dataclass(frozen=True)
class RelayConfig:
    """Immutable relay settings — passed explicitly, never read globally."""

    discord_token: str = field(repr=False)
    bot_id: str
    webhook_url: str
    timeout_seconds: float = WEBHOOK_TIMEOUT_SECONDS
    debug: bool = False

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        *,
        dotenv: bool = True,
    ) -> "RelayConfig":
        """Create RelayConfig from environment variables.

        Reads a ``.env`` file first unless ``dotenv`` is False. Raises
        ConfigError naming every required variable that is absent or blank.
        """
        if environ is None:
            if dotenv:
                load_dotenv()
            environ = os.environ

        values = {name: environ.get(name, "").strip() for name in REQUIRED_ENV_VARS}
        missing = tuple(name for name, value in values.items() if not value)
        if missing:
            raise ConfigError(missing)

        return cls(
            discord_token=values["DISCORD_TOKEN"],
            bot_id=values["BOT_ID"],
            webhook_url=values["N8N_WEBHOOK"],
            debug=environ.get("RELAY_DEBUG", "").strip().lower() in _TRUTHY,
        )
