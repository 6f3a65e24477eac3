"""Configuration management via environment variables and pydantic-settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class HelpSettings(BaseSettings):
    """
    Help center configuration loaded from environment variables.

    Priority (highest to lowest):
    1. CLI arguments (handled separately)
    2. Environment variables
    3. .env file
    4. Defaults defined here
    """

    # Help definitions
    help_dir: str = Field(
        default="./help",
        alias="LAM_HELP_DIR",
        description="Directory containing external help pages",
    )

    registry_file: str = Field(
        default="./help/help.json",
        alias="LAM_HELP_REGISTRY",
        description="JSON file with the global help registry",
    )

    modules_dir: str = Field(
        default="./help/modules",
        alias="LAM_MODULES_DIR",
        description="Directory with one <module>.json help registry per module",
    )

    main_module: str = Field(
        default="main",
        alias="LAM_MAIN_MODULE",
        description="Module name that selects the global help registry",
    )

    # Presentation
    language: str = Field(
        default="en",
        alias="LAM_LANGUAGE",
        description="Language for labels and error messages: en, de",
    )

    page_header: str | None = Field(
        default=None,
        alias="LAM_PAGE_HEADER",
        description="Document header emitted before the page title (None = HTML 4.01 default)",
    )

    page_title: str = Field(
        default="LDAP Account Manager Help Center",
        alias="LAM_PAGE_TITLE",
        description="HTML title of help pages",
    )

    stylesheet: str = Field(
        default="../style/layout.css",
        alias="LAM_STYLESHEET",
        description="Stylesheet linked from help pages",
    )

    # External sources
    http_timeout: float = Field(
        default=10.0,
        alias="LAM_HTTP_TIMEOUT",
        description="Timeout in seconds for external help pages served over HTTP",
    )

    verbose: bool = Field(
        default=False, alias="LAM_VERBOSE", description="Enable verbose output"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "populate_by_name": True,
    }

    @property
    def help_path(self) -> Path:
        """Get external help page directory as Path."""
        return Path(self.help_dir)

    @property
    def registry_path(self) -> Path:
        """Get global registry file as Path."""
        return Path(self.registry_file)

    @property
    def modules_path(self) -> Path:
        """Get module registry directory as Path."""
        return Path(self.modules_dir)

    def validate_paths(self) -> None:
        """
        Validate that the configured help definitions exist.

        Raises:
            ConfigError: If the global registry file is missing
        """
        from src.lib.exceptions import ConfigError

        if not self.registry_path.is_file():
            raise ConfigError(
                f"Help registry not found: {self.registry_file}. "
                "Set the LAM_HELP_REGISTRY environment variable."
            )


# Global settings instance (lazy loaded)
_settings: HelpSettings | None = None


def get_settings() -> HelpSettings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = HelpSettings()
    return _settings


def reset_settings() -> None:
    """Reset settings (useful for testing)."""
    global _settings
    _settings = None
