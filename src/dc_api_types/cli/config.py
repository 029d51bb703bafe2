"""
Configuration loading and validation for the dc-api-types CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from ..core.errors import ConfigError

DEFAULT_CONFIG_PATH = "dc-api-types.yaml"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
OUTPUT_FORMATS = ("json", "yaml")


@dataclass
class OpenAPIConfig:
    """Settings of the generated OpenAPI document."""
    title: str = "Hasura GraphQL Data Connector Agent API"
    version: str = "0.1.0"
    format: str = "json"


@dataclass
class AgentConfig:
    """Settings used when talking to a live agent."""
    timeout: float = 30.0
    config: Optional[dict[str, Any]] = None
    source_name: Optional[str] = None


@dataclass
class ToolConfig:
    """Main CLI configuration."""
    log_level: str = "WARNING"
    openapi: OpenAPIConfig = field(default_factory=OpenAPIConfig)
    agent: AgentConfig = field(default_factory=AgentConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ToolConfig":
        """Create config from dictionary."""
        if not isinstance(data, dict):
            raise ConfigError("Configuration must be a mapping")

        log_level = str(data.get("log_level", "WARNING")).upper()
        if log_level not in LOG_LEVELS:
            raise ConfigError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got '{log_level}'")

        openapi_data = _section(data, "openapi")
        openapi = OpenAPIConfig(
            title=str(openapi_data.get("title", OpenAPIConfig.title)),
            version=str(openapi_data.get("version", OpenAPIConfig.version)),
            format=str(openapi_data.get("format", OpenAPIConfig.format)),
        )
        if openapi.format not in OUTPUT_FORMATS:
            raise ConfigError(f"openapi.format must be json or yaml, got '{openapi.format}'")

        agent_data = _section(data, "agent")
        timeout = agent_data.get("timeout", AgentConfig.timeout)
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            raise ConfigError(f"agent.timeout must be a positive number, got {timeout!r}")
        agent_source_config = agent_data.get("config")
        if agent_source_config is not None and not isinstance(agent_source_config, dict):
            raise ConfigError("agent.config must be a mapping")
        agent = AgentConfig(
            timeout=float(timeout),
            config=agent_source_config,
            source_name=agent_data.get("source_name"),
        )

        return cls(log_level=log_level, openapi=openapi, agent=agent)

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for YAML serialization."""
        return {
            "log_level": self.log_level,
            "openapi": {
                "title": self.openapi.title,
                "version": self.openapi.version,
                "format": self.openapi.format,
            },
            "agent": {
                "timeout": self.agent.timeout,
                "config": self.agent.config,
                "source_name": self.agent.source_name,
            },
        }

    def save(self, path: Path | str = DEFAULT_CONFIG_PATH) -> None:
        """Save configuration to YAML file."""
        path = Path(path)
        content = yaml.dump(self.to_dict(), default_flow_style=False, sort_keys=False)
        path.write_text(content)


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"'{name}' must be a mapping")
    return section


def load_config(path: Path | str = DEFAULT_CONFIG_PATH) -> ToolConfig | None:
    """Load configuration from YAML file. Returns None when the file is absent."""
    path = Path(path)
    if not path.exists():
        return None

    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    return ToolConfig.from_dict(data or {})
