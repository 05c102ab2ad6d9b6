"""Configuration for a togglCheck run."""
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .api.client import DEFAULT_BASE_URL
from .errors import ConfigError
from .reports.overlap_validator import DEFAULT_ALLOWED_WINDOW
from .utils.duration_utils import parse_duration

ENV_FILE = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'togglcheck.env')
TOKEN_VAR = "TOGGL_API_TOKEN"
URL_VAR = "TOGGL_API_URL"


@dataclass(frozen=True)
class CheckConfig:
    """Settings for one check, passed explicitly to whatever needs them."""
    token: str
    since: Optional[int] = None
    allowed_window: int = DEFAULT_ALLOWED_WINDOW
    base_url: str = DEFAULT_BASE_URL


def load_environment(env_file: str = ENV_FILE) -> bool:
    """Load environment variables from the togglcheck.env file, if there is one.

    Args:
        env_file: Path to the env file

    Returns:
        True if the file was found and loaded
    """
    if not os.path.exists(env_file):
        return False
    return load_dotenv(env_file)

def build_config(token: Optional[str] = None, since: Optional[str] = None,
                 allowed: Optional[str] = None) -> CheckConfig:
    """Build a CheckConfig from command line values.

    Duration strings are parsed here so bad input fails before any request.

    Args:
        token: API token (falls back to TOGGL_API_TOKEN)
        since: Duration string for how far back to fetch (optional)
        allowed: Duration string for the allowed window (optional)

    Returns:
        CheckConfig

    Raises:
        ParseError: If a duration string is invalid
        ConfigError: If no API token is available
    """
    since_sec = parse_duration(since) if since is not None else None
    allowed_sec = parse_duration(allowed) if allowed is not None else DEFAULT_ALLOWED_WINDOW

    token = token or os.getenv(TOKEN_VAR)
    if not token:
        raise ConfigError(f"No API token given. Use --token or set {TOKEN_VAR} in your environment or togglcheck.env.")
    return CheckConfig(token, since_sec, allowed_sec, os.getenv(URL_VAR) or DEFAULT_BASE_URL)
