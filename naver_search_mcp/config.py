"""Configuration management for the Naver Search MCP server.

This module provides the configuration dataclass and loads it from the
process environment. A ``.env`` file in the working directory is honoured
via python-dotenv; variables already set in the environment win.
"""

import os
from dataclasses import dataclass, asdict
from typing import Literal, Mapping, Optional

from dotenv import load_dotenv

from .naver_client import Credentials

# Environment variable names
ENV_CLIENT_ID = "NAVER_CLIENT_ID"
ENV_CLIENT_SECRET = "NAVER_CLIENT_SECRET"

_ENV_FIELDS = {
    "NAVER_SEARCH_MCP_TRANSPORT": "transport",
    "NAVER_SEARCH_MCP_HTTP_HOST": "http_host",
    "NAVER_SEARCH_MCP_HTTP_PORT": "http_port",
    "NAVER_SEARCH_MCP_HTTP_PATH": "http_path",
    "NAVER_API_BASE_URL": "api_base_url",
    "NAVER_API_TIMEOUT": "api_timeout",
    "NAVER_SEARCH_MCP_LOG_LEVEL": "log_level",
}


@dataclass
class Config:
    """
    Server configuration.

    Everything except the credential pair has a sensible default, so the
    server runs over stdio with only NAVER_CLIENT_ID and NAVER_CLIENT_SECRET
    set.
    """

    # Naver Open API credentials (issued at developers.naver.com)
    client_id: str = ""
    client_secret: str = ""

    # Transport: stdio for local agents, http for streamable HTTP
    transport: Literal["stdio", "http"] = "stdio"

    # HTTP settings (only used when transport == "http")
    http_host: str = "127.0.0.1"
    http_port: int = 8000
    http_path: str = "/mcp"

    # Remote API
    api_base_url: str = "https://openapi.naver.com"
    api_timeout: float = 10.0

    # Logging
    log_level: str = "INFO"

    def is_valid_for_mode(self) -> tuple[bool, str]:
        """
        Check if config is valid for the selected transport.

        Returns:
            Tuple of (is_valid, error_message). If valid, error_message is empty string.

        Examples:
            >>> Config(client_id="id", client_secret="secret").is_valid_for_mode()
            (True, '')

            >>> Config().is_valid_for_mode()
            (False, 'NAVER_CLIENT_ID and NAVER_CLIENT_SECRET environment variables are required')
        """
        if not self.client_id or not self.client_secret:
            return False, f"{ENV_CLIENT_ID} and {ENV_CLIENT_SECRET} environment variables are required"
        if self.transport == "stdio":
            return True, ""
        if self.transport == "http":
            if not (1 <= self.http_port <= 65535):
                return False, "Port must be between 1 and 65535"
            return True, ""
        return False, f"Unknown transport: {self.transport}"

    def credentials(self) -> Credentials:
        return Credentials(client_id=self.client_id, client_secret=self.client_secret)

    def to_dict(self) -> dict:
        """Convert to a plain dict with the secret masked, for logging."""
        data = asdict(self)
        if data["client_secret"]:
            data["client_secret"] = "***"
        return data

    @classmethod
    def from_dict(cls, data: Mapping) -> "Config":
        """
        Create from dict, using defaults for missing keys.

        Keys that are not dataclass fields are ignored, and numeric fields
        given as strings (as they come from the environment) are converted.

        Examples:
            >>> Config.from_dict({"http_port": "8080"}).http_port
            8080

            >>> Config.from_dict({"unknown_field": "ignored"}).transport
            'stdio'
        """
        values = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        if "http_port" in values:
            values["http_port"] = int(values["http_port"])
        if "api_timeout" in values:
            values["api_timeout"] = float(values["api_timeout"])
        if "transport" in values:
            values["transport"] = str(values["transport"]).lower()
        if "log_level" in values:
            values["log_level"] = str(values["log_level"]).upper()
        return cls(**values)

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        env_file: Optional[str] = ".env",
    ) -> "Config":
        """
        Load config from environment variables.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.
            env_file: Path of a dotenv file to load into ``os.environ`` first.
                Pass None to skip. Ignored when ``environ`` is given.

        Returns:
            Config instance. Credentials may be empty; call
            is_valid_for_mode() before using it.
        """
        if environ is None:
            if env_file:
                load_dotenv(env_file, override=False)
            environ = os.environ

        data = {
            "client_id": environ.get(ENV_CLIENT_ID, ""),
            "client_secret": environ.get(ENV_CLIENT_SECRET, ""),
        }
        for env_name, field_name in _ENV_FIELDS.items():
            value = environ.get(env_name)
            if value:
                data[field_name] = value
        return cls.from_dict(data)
