"""Environment-driven rendering defaults."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tabchart.core.enums import OutputFormat


class RenderSettings(BaseSettings):
    """Defaults applied when a plot request leaves rendering options unset."""

    model_config = SettingsConfigDict(
        env_prefix="TABCHART_",
        env_file=".env",
        extra="ignore",
    )

    width: int = Field(1000, ge=100, le=4000, description="Default chart width in pixels")
    height: int = Field(700, ge=100, le=4000, description="Default chart height in pixels")
    dpi: int = Field(150, ge=72, le=600, description="Default PNG resolution")
    format: OutputFormat = Field(OutputFormat.PNG, description="Format used when the output suffix is unknown")
