"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use SIMPLET4_ prefix (e.g., SIMPLET4_CLASS_NAME=Renderer).

Settings can also be loaded from a .env file in the working directory.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use SIMPLET4_ prefix.

    Examples:
        SIMPLET4_CLASS_NAME=Renderer
        SIMPLET4_SOURCE_ENCODING=latin-1
        SIMPLET4_SOURCE_EXTENSION_LENGTH=3
    """

    model_config = SettingsConfigDict(
        env_prefix="SIMPLET4_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Generated program shape
    class_name: str = Field(
        default="Generator",
        description="Name of the generated class",
    )

    writer_name: str = Field(
        default="_writer",
        description="Name of the StreamWriter field the generated code writes through",
    )

    entry_method: str = Field(
        default="_Main",
        description="Name of the instance method wrapping the script region",
    )

    indent: str = Field(
        default=" " * 8,
        description="Prefix of every synthesized emit instruction",
    )

    # File handling
    source_encoding: str = Field(
        default="utf-8-sig",
        description="Encoding used to read templates (a leading byte-order mark is dropped)",
    )

    program_encoding: str = Field(
        default="utf-8",
        description="Encoding used to write the generated program",
    )

    source_extension_length: int = Field(
        default=3,
        ge=0,
        description="Characters stripped from the template path by the output directive (\".tt\")",
    )

    def outputPath_derive(self, template_path: str, extension: str) -> str:
        """
        Derive the rendered output path from the template path.

        The trailing source_extension_length characters of the template path
        are dropped and the extension appended. A '.' separator is inserted
        when the extension does not carry one.

        Args:
            template_path: Path of the template as given
            extension: Value of the output directive's extension property

        Returns:
            Output path string

        Example:
            >>> settings = AppSettings()
            >>> settings.outputPath_derive("Report.tt", "txt")
            'Report.txt'
            >>> settings.outputPath_derive("Report.tt", ".html")
            'Report.html'
        """
        cut = len(template_path) - self.source_extension_length
        stem = template_path[:max(cut, 0)]
        if not extension.startswith('.'):
            extension = '.' + extension
        return stem + extension


# Singleton instance - import this in your code
appsettings = AppSettings()
