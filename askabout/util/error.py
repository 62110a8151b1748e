"""Errors raised outside the domain layer."""


class ConfigurationError(Exception):
    """A setting is missing or unsafe for the current environment."""

    def __init__(self, setting: str, environment: str):
        self.setting = setting
        self.environment = environment
        super().__init__(f"{setting} must be set in {environment}")
