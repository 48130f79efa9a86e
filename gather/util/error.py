"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""


class ConfigurationError(UtilError):
    """A setting is missing or unsafe for the current environment."""

    def __init__(self, setting: str, reason: str) -> None:
        self.setting = setting
        self.reason = reason
        super().__init__(f"{setting} {reason}")
