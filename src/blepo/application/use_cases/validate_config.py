"""Use case for validating application configuration."""

from __future__ import annotations

import shutil

from blepo.domain.services.configuration_provider import ConfigurationProvider


class ValidateConfigUseCase:
    """
    Use case for validating the application configuration.

    Schema problems are already rejected when the configuration loads; this
    checks what the schema cannot, such as the external tools being installed.
    """

    def __init__(self, config_provider: ConfigurationProvider) -> None:
        """
        Initialize the validation use case.

        Args:
            config_provider: Configuration provider to validate
        """
        self.config_provider = config_provider

    def execute(self) -> list[str]:
        """
        Execute configuration validation.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors: list[str] = []

        try:
            channels = self.config_provider.get_channels()
            if not channels:
                errors.append("No channels configured")

            ytdlp_path = self.config_provider.get_fetch_settings().ytdlp_path
            error = self.validate_executable(ytdlp_path)
            if error:
                errors.append(error)

            error = self.validate_executable(self.config_provider.get_player_command())
            if error:
                errors.append(error)

        except Exception as e:
            errors.append(f"Configuration validation failed: {e}")

        return errors

    def validate_executable(self, command: str) -> str | None:
        """
        Check that an external command can be found.

        Args:
            command: Command name or path

        Returns:
            Error message if the command is missing, None if it was found
        """
        if shutil.which(command) is None:
            return f"{command} is not installed or not on PATH"
        return None
