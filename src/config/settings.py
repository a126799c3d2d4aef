"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use BEAMDOWN_ prefix (e.g., BEAMDOWN_TITLEPAGE=false).

Settings can also be loaded from a .env file in the project root.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use BEAMDOWN_ prefix.

    Examples:
        BEAMDOWN_TITLEPAGE=false
        BEAMDOWN_STRICT_MODE=true
        BEAMDOWN_GRAPHICS_OPTIONS=width=\\textwidth
    """

    model_config = SettingsConfigDict(
        env_prefix="BEAMDOWN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Preamble configuration
    document_class: str = Field(
        default="beamer",
        description="LaTeX document class written on the first line of the output",
    )

    graphics_package: str = Field(
        default="graphicx",
        description="Package providing \\includegraphics, loaded in the fixed preamble",
    )

    # Body configuration
    titlepage: bool = Field(
        default=True,
        description="Emit a \\frame{\\titlepage} slide when the document body opens",
    )

    graphics_options: str = Field(
        default="width=0.8\\textwidth,height=0.6\\textheight,keepaspectratio",
        description="Sizing options passed to every \\includegraphics command",
    )

    # Conversion configuration
    strict_mode: bool = Field(
        default=False,
        description="Strict mode: treat unsupported-feature warnings as errors",
    )

    # Output configuration
    output_suffix: str = Field(
        default=".tex",
        description="Suffix of the generated file when no output name is given",
    )

    def outputName_make(self, input_name: str) -> str:
        """
        Derive the output filename from the input filename.

        Example:
            >>> settings = AppSettings()
            >>> settings.outputName_make("talk.md")
            'talk.tex'
        """
        return f"{Path(input_name).stem}{self.output_suffix}"


# Singleton instance - import this in your code
appsettings = AppSettings()
