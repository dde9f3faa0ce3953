"""
Configuration lookup for ci-term.

Every setting is resolved in priority order (highest to lowest):
1. Command line option
2. Environment variable
3. Config file (~/.ci/config), for the server URL
4. Built-in default

Environment variables:
- CI_SERVER_URL: Base URL of the CI API server
- CI_REQUEST_TIMEOUT: Seconds to wait for each API request
- CI_TERM_LOG_FILE: File the interactive dashboard logs to
"""

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_SERVER_URL = "http://localhost:7745"
DEFAULT_TIMEOUT = 10.0


def get_config_path() -> Path:
    return Path.home() / ".ci" / "config"


def read_config_value(name: str, config_path: Path | None = None) -> str | None:
    """
    Read one ``name=value`` line from the config file.

    Args:
        name: Setting name, e.g. "server_url"
        config_path: Config file to read; defaults to ~/.ci/config

    Returns:
        The value, or None if the file or the setting is missing

    Config file format (~/.ci/config):
        server_url=http://ci.example.com:7745
    """
    path = config_path or get_config_path()
    if not path.exists():
        return None
    try:
        content = path.read_text()
    except OSError as e:
        logger.warning(f"Could not read config file {path}: {e}")
        return None
    prefix = f"{name}="
    for line in content.splitlines():
        line = line.strip()
        if line.startswith(prefix):
            return line[len(prefix):].strip()
    return None


def get_server_url(cli_arg: str | None = None, config_path: Path | None = None) -> str:
    """Get the CI server URL from the CLI, environment, config file or default."""
    if cli_arg:
        return cli_arg

    env_url = os.environ.get("CI_SERVER_URL")
    if env_url:
        return env_url

    file_url = read_config_value("server_url", config_path)
    if file_url:
        return file_url

    return DEFAULT_SERVER_URL


def get_request_timeout(cli_arg: float | None = None) -> float:
    """
    Get the request timeout from the CLI or environment.

    Invalid or non-positive values are logged and replaced by the default.
    """
    if cli_arg is not None:
        if cli_arg <= 0:
            logger.warning(f"Invalid timeout={cli_arg}, using default {DEFAULT_TIMEOUT}")
            return DEFAULT_TIMEOUT
        return cli_arg

    raw = os.environ.get("CI_REQUEST_TIMEOUT", str(DEFAULT_TIMEOUT))
    try:
        timeout = float(raw)
    except ValueError:
        logger.warning(
            f"Invalid CI_REQUEST_TIMEOUT={raw}, using default {DEFAULT_TIMEOUT}"
        )
        return DEFAULT_TIMEOUT
    if timeout <= 0:
        logger.warning(
            f"Invalid CI_REQUEST_TIMEOUT={timeout}, using default {DEFAULT_TIMEOUT}"
        )
        return DEFAULT_TIMEOUT
    return timeout


def get_log_file(cli_arg: str | None = None) -> Path:
    """Get the file the interactive dashboard writes its log to."""
    if cli_arg:
        return Path(cli_arg)
    env_path = os.environ.get("CI_TERM_LOG_FILE")
    if env_path:
        return Path(env_path)
    return Path.home() / ".ci" / "ci-term.log"
