"""Errors raised while wiring the application together."""


class UtilError(Exception):
    pass


class ConfigurationError(UtilError):
    """A setting is missing or unsafe for the current environment."""

    def __init__(self, setting: str, reason: str):
        self.setting = setting
        super().__init__(f"{setting}: {reason}")


class DependencyInjectionError(UtilError):
    """No provider implementation matches the requested component."""
