from .provider import ConfigProvider, ControlPlaneConfig, EnvConfigProvider, LoggingConfig

__all__ = ["ConfigProvider", "ControlPlaneConfig", "EnvConfigProvider", "LoggingConfig"]
