"""Configuration provider following Black Box Design principles."""
import os
from dataclasses import dataclass
from typing import Optional, Protocol, Union


@dataclass
class ControlPlaneConfig:
    """Kubernetes API server connection configuration."""
    base_url: str
    timeout_seconds: float
    verify_ssl: bool
    ca_cert_path: Optional[str] = None
    token: Optional[str] = None

    @property
    def verify(self) -> Union[bool, str]:
        """Value for requests' ``verify``: the CA bundle when set, else the flag."""
        return self.ca_cert_path if self.ca_cert_path else self.verify_ssl

    @property
    def uses_tls(self) -> bool:
        return self.base_url.startswith("https://")


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str


class ConfigProvider(Protocol):
    """Protocol for configuration providers."""

    def get_control_plane_config(self) -> ControlPlaneConfig:
        """Get control plane configuration."""
        ...

    def get_logging_config(self) -> LoggingConfig:
        """Get logging configuration."""
        ...


class EnvConfigProvider:
    """Environment-based configuration provider."""

    def get_control_plane_config(self) -> ControlPlaneConfig:
        """Get control plane configuration from environment variables."""
        raw_timeout = os.getenv("KUBEXEC_TIMEOUT_SECONDS", "30")
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ValueError(
                f"KUBEXEC_TIMEOUT_SECONDS must be a number of seconds, got {raw_timeout!r}"
            )
        if timeout <= 0:
            raise ValueError(f"KUBEXEC_TIMEOUT_SECONDS must be positive, got {raw_timeout!r}")

        return ControlPlaneConfig(
            base_url=os.getenv("KUBEXEC_API_URL", "http://localhost:8080").rstrip("/"),
            timeout_seconds=timeout,
            verify_ssl=os.getenv("KUBEXEC_SSL_VERIFY", "true").lower() == "true",
            ca_cert_path=os.getenv("KUBEXEC_CA_CERT") or None,
            token=os.getenv("KUBEXEC_TOKEN") or None,
        )

    def get_logging_config(self) -> LoggingConfig:
        """Get logging configuration from environment variables."""
        return LoggingConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
