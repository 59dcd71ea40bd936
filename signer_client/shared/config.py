"""
Configuration Management

Provides the client configuration class and environment/file based loading.
"""

import json
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
from urllib.parse import urlsplit

from .constants import (
    DEFAULT_SERVER_URL,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    SUPPORTED_URL_SCHEMES,
)
from .exceptions import (
    ConfigurationError,
    InvalidConfigurationError,
    MissingConfigurationError,
)


@dataclass
class ClientConfig:
    """Signer client configuration settings."""

    server_url: str = DEFAULT_SERVER_URL
    network: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT  # 0 disables the transport timeout
    user_agent: str = DEFAULT_USER_AGENT

    def validate(self) -> None:
        """Validate configuration values."""
        errors: List[str] = []

        if not isinstance(self.server_url, str) or not self.server_url.strip():
            errors.append("server_url must be a non-empty string")
        else:
            parts = urlsplit(self.server_url)
            if parts.scheme not in SUPPORTED_URL_SCHEMES or not parts.netloc:
                errors.append("server_url must be an absolute http or https URL")

        if self.network is not None and (not isinstance(self.network, str) or not self.network.strip()):
            errors.append("network must be a non-empty string when set")

        if isinstance(self.timeout, bool) or not isinstance(self.timeout, (int, float)) or self.timeout < 0:
            errors.append("timeout must be a non-negative number")

        if not isinstance(self.user_agent, str) or not self.user_agent.strip():
            errors.append("user_agent must be a non-empty string")

        if errors:
            raise InvalidConfigurationError(
                f"Client configuration validation failed: {'; '.join(errors)}",
                details={"errors": errors}
            )

    @property
    def effective_timeout(self) -> Optional[float]:
        """Timeout handed to the transport; None means wait indefinitely."""
        return float(self.timeout) if self.timeout else None

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Load configuration from environment variables."""
        try:
            config = cls(
                server_url=os.getenv("SIGNER_SERVER_URL", cls.server_url),
                network=os.getenv("SIGNER_NETWORK") or None,
                timeout=float(os.getenv("SIGNER_TIMEOUT", str(cls.timeout))),
                user_agent=os.getenv("SIGNER_USER_AGENT", cls.user_agent),
            )
            config.validate()
            return config
        except ValueError as e:
            raise ConfigurationError(f"Failed to load client configuration from environment: {e}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ClientConfig":
        """Create configuration from dictionary."""
        try:
            # Filter only known fields
            field_names = {f.name for f in fields(cls)}
            filtered_data = {k: v for k, v in data.items() if k in field_names}
            config = cls(**filtered_data)
            config.validate()
            return config
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Failed to create client configuration from dictionary: {e}")


class ConfigurationLoader:
    """Configuration loader with support for multiple sources."""

    DEFAULT_CONFIG_PATHS = [
        "signer.json",
        ".signer.json",
        "signer.yaml",
        ".signer.yaml",
        "signer.yml",
        ".signer.yml"
    ]

    @staticmethod
    def load_from_file(config_path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
        """
        Load configuration from a JSON or YAML file.

        Args:
            config_path: Path to configuration file. If None, looks for default locations.

        Returns:
            Dictionary containing configuration values.

        Raises:
            ConfigurationError: If file cannot be loaded or parsed.
        """
        if config_path is None:
            for path in ConfigurationLoader.DEFAULT_CONFIG_PATHS:
                if os.path.exists(path):
                    config_path = path
                    break

        if config_path is None:
            return {}

        config_path = Path(config_path)

        if not config_path.exists():
            raise MissingConfigurationError(f"Configuration file not found: {config_path}")

        if config_path.suffix not in ('.json', '.yml', '.yaml'):
            raise ConfigurationError(f"Unsupported configuration file format: {config_path.suffix}")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                if config_path.suffix == '.json':
                    return json.load(f)
                try:
                    import yaml
                except ImportError:
                    raise ConfigurationError("PyYAML is required for YAML configuration files. Install with: pip install PyYAML")
                return yaml.safe_load(f) or {}
        except ConfigurationError:
            raise
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in configuration file {config_path}: {e}")
        except Exception as e:
            raise ConfigurationError(f"Failed to load configuration from {config_path}: {e}")

    @staticmethod
    def load_client_config(
        config_path: Optional[Union[str, Path]] = None,
        use_env: bool = True
    ) -> ClientConfig:
        """
        Load client configuration from file and/or environment.

        Values are read from the ``signer`` section of the file; environment
        variables override any value that differs from the default.

        Args:
            config_path: Path to configuration file.
            use_env: Whether to load from environment variables.

        Returns:
            ClientConfig instance.
        """
        config_data: Dict[str, Any] = {}

        if config_path or any(os.path.exists(p) for p in ConfigurationLoader.DEFAULT_CONFIG_PATHS):
            file_config = ConfigurationLoader.load_from_file(config_path)
            config_data.update(file_config.get('signer', {}))

        if config_data:
            config = ClientConfig.from_dict(config_data)
        else:
            config = ClientConfig()

        if use_env:
            env_config = ClientConfig.from_env()
            default_config = ClientConfig()
            for field in fields(ClientConfig):
                env_value = getattr(env_config, field.name)
                default_value = getattr(default_config, field.name)
                if env_value != default_value:
                    setattr(config, field.name, env_value)

        config.validate()
        return config
