"""Exceptions raised by BoosterForge services."""


class BoosterForgeError(RuntimeError):
    """Base class for domain exceptions."""


class CatalogUnavailable(BoosterForgeError):
    """Raised when the card catalog cannot be reached or its reply cannot be read."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class PackGenerationFailed(BoosterForgeError):
    """Raised when a slot query fails while building a pack."""

    def __init__(self, cause: CatalogUnavailable) -> None:
        super().__init__(cause.message)
        self.cause = cause


class ConfigurationMissing(BoosterForgeError):
    """Raised at startup when a required setting is absent."""

    def __init__(self, setting: str) -> None:
        super().__init__(f"Required setting {setting} is not configured")
        self.setting = setting


class GenerationInProgress(BoosterForgeError):
    """Raised when a pack is requested while another one is still being opened."""
