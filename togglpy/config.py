"""Settings resolution and persistence for togglpy.

Values come from the environment (optionally loaded from a dotenv file)
and fall back to interactive prompts. Resolution never writes anything;
`persist_settings` stores the prompted values afterwards.
"""
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, FrozenSet, Mapping, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv, set_key

from .api.client import TogglClient
from .errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_ENV_FILE = ".env"
DEFAULT_TIMEZONE = "UTC"

TOKEN_KEY = "API_TOKEN"
WORKSPACE_KEY = "WORKSPACE_ID"
TIMEZONE_KEY = "TOGGL_TIMEZONE"


@dataclass(frozen=True)
class Settings:
    """Everything a run needs to fetch a report."""

    api_token: str
    workspace_id: int
    timezone: str = DEFAULT_TIMEZONE
    prompted: FrozenSet[str] = frozenset()

    @property
    def tzinfo(self) -> ZoneInfo:
        return get_timezone(self.timezone)


def load_environment(env_file: str = DEFAULT_ENV_FILE) -> bool:
    """Load environment variables from a dotenv file if it exists.

    Args:
        env_file: Path to the dotenv file

    Returns:
        True if the file was found and loaded
    """
    if not os.path.exists(env_file):
        logger.debug("No env file at %s", env_file)
        return False
    load_dotenv(env_file)
    return True


def get_timezone(name: str) -> ZoneInfo:
    """Look up an IANA timezone.

    Raises:
        ConfigError: If the name is not a known timezone
    """
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ConfigError(f"Unknown timezone: {name!r}") from e


def resolve_token(environ: Mapping[str, str], prompter) -> str:
    """Get the API token from the environment or by asking for it.

    Args:
        environ: Environment mapping
        prompter: Object with an ask(message) method

    Returns:
        API token

    Raises:
        ConfigError: If no token was given
    """
    token = (environ.get(TOKEN_KEY) or "").strip()
    if not token:
        token = prompter.ask("Enter your Toggl API Token:").strip()
    if not token:
        raise ConfigError("No Toggl API token given.")
    return token


def resolve_workspace_id(environ: Mapping[str, str], prompter, client: TogglClient) -> int:
    """Get the workspace ID from the environment or let the user pick one.

    Args:
        environ: Environment mapping
        prompter: Object with a choose(message, choices) method
        client: Client used to list the available workspaces

    Returns:
        Workspace ID

    Raises:
        ConfigError: If the configured ID is not an integer or no workspace exists
    """
    env_value = (environ.get(WORKSPACE_KEY) or "").strip()
    if env_value:
        try:
            return int(env_value)
        except ValueError as e:
            raise ConfigError(f"{WORKSPACE_KEY} must be an integer, got {env_value!r}") from e

    workspaces = client.get_workspaces()
    if not workspaces:
        raise ConfigError("This Toggl account has no workspaces.")
    index = prompter.choose("Select the Workspace:", [ws.label for ws in workspaces])
    return workspaces[index].id


def resolve_settings(environ: Mapping[str, str], prompter,
                     client_factory: Callable[[str], TogglClient] = TogglClient,
                     timezone: Optional[str] = None) -> Settings:
    """Resolve token, workspace and timezone, prompting for what is missing.

    Args:
        environ: Environment mapping (usually os.environ)
        prompter: Object with ask/choose methods
        client_factory: Builds a client from a token for the workspace lookup
        timezone: Timezone name overriding TOGGL_TIMEZONE (optional)

    Returns:
        Settings, with `prompted` naming the keys that still need persisting
    """
    tz_name = timezone or environ.get(TIMEZONE_KEY) or DEFAULT_TIMEZONE
    get_timezone(tz_name)

    prompted = set()
    if not (environ.get(TOKEN_KEY) or "").strip():
        prompted.add(TOKEN_KEY)
    token = resolve_token(environ, prompter)

    if not (environ.get(WORKSPACE_KEY) or "").strip():
        prompted.add(WORKSPACE_KEY)
    workspace_id = resolve_workspace_id(environ, prompter, client_factory(token))

    return Settings(token, workspace_id, tz_name, frozenset(prompted))


def persist_settings(env_file: str, settings: Settings) -> None:
    """Append the prompted values to the dotenv file.

    Args:
        env_file: Path to the dotenv file
        settings: Resolved settings

    Raises:
        ConfigError: If the dotenv file cannot be written
    """
    values = {TOKEN_KEY: settings.api_token, WORKSPACE_KEY: str(settings.workspace_id)}
    keys = [key for key in (TOKEN_KEY, WORKSPACE_KEY) if key in settings.prompted]
    if not keys:
        return
    try:
        Path(env_file).touch()
        for key in keys:
            set_key(env_file, key, values[key])
    except OSError as e:
        raise ConfigError(f"Could not save settings to '{env_file}': {e}") from e
    print(f"[INFO] Saved {', '.join(keys)} to '{env_file}'.")
