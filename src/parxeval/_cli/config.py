"""Configuration loading from pyproject.toml."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, replace
from pathlib import Path

DEFAULT_SERVER = "http://localhost:7200"


class ConfigError(Exception):
    """Error in parxeval configuration."""


@dataclass(slots=True, frozen=True)
class ParxevalConfig:
    """Connection settings from `[tool.parxeval]`.

    `endpoint` wins over `server` + `repository` when both are given.
    """

    endpoint: str | None = None
    server: str = DEFAULT_SERVER
    repository: str | None = None
    timeout: float | None = None
    project_root: Path | None = None

    def with_overrides(
        self,
        *,
        endpoint: str | None = None,
        server: str | None = None,
        repository: str | None = None,
        timeout: float | None = None,
    ) -> ParxevalConfig:
        """Return a copy with every non-None argument replacing the stored value."""
        changes = {
            key: value
            for key, value in {
                "endpoint": endpoint,
                "server": server,
                "repository": repository,
                "timeout": timeout,
            }.items()
            if value is not None
        }
        return replace(self, **changes)

    def query_endpoint(self) -> str:
        """Return the URL SPARQL queries are sent to.

        Raises:
            ConfigError: If neither an endpoint nor a repository is set.

        """
        if self.endpoint is not None:
            return self.endpoint
        if self.repository is None:
            msg = "No SPARQL endpoint configured. Pass --endpoint or --repository, or set [tool.parxeval].repository"
            raise ConfigError(msg)
        return f"{self.server.rstrip('/')}/repositories/{self.repository}"


def find_pyproject_toml(start_dir: Path | None = None) -> Path | None:
    """Find pyproject.toml by walking up from start_dir.

    Args:
        start_dir: Starting directory. Defaults to current working directory.

    Returns:
        Path to pyproject.toml if found, None otherwise.

    """
    current = (start_dir if start_dir is not None else Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate
    return None


def _get_str(section: dict[str, object], key: str) -> str | None:
    if key not in section:
        return None
    value = section[key]
    if not isinstance(value, str) or not value:
        msg = f"Invalid [tool.parxeval].{key}: expected a non-empty string"
        raise ConfigError(msg)
    return value


def _get_timeout(section: dict[str, object]) -> float | None:
    if "timeout" not in section:
        return None
    value = section["timeout"]
    if isinstance(value, bool) or not isinstance(value, int | float) or value <= 0:
        msg = "Invalid [tool.parxeval].timeout: expected a positive number of seconds"
        raise ConfigError(msg)
    return float(value)


def load_config(pyproject_path: Path) -> ParxevalConfig:
    """Load and validate [tool.parxeval] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed ParxevalConfig

    Raises:
        ConfigError: If the configuration is invalid

    """
    project_root = pyproject_path.parent

    with pyproject_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {pyproject_path}: {e}"
            raise ConfigError(msg) from e

    section = data.get("tool", {}).get("parxeval", {})
    if not isinstance(section, dict):
        msg = "Invalid [tool.parxeval]: expected a table"
        raise ConfigError(msg)

    return ParxevalConfig(
        endpoint=_get_str(section, "endpoint"),
        server=_get_str(section, "server") or DEFAULT_SERVER,
        repository=_get_str(section, "repository"),
        timeout=_get_timeout(section),
        project_root=project_root,
    )


def get_config() -> ParxevalConfig:
    """Get config from pyproject.toml in current directory or parents.

    Returns:
        ParxevalConfig (defaults if there is no pyproject.toml or no [tool.parxeval] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return ParxevalConfig()
    return load_config(pyproject_path)
