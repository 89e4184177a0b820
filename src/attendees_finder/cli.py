from pydantic import Field, FilePath
from pydantic_settings import BaseSettings, SettingsConfigDict


class Cli(BaseSettings):
    model_config = SettingsConfigDict(
        cli_parse_args=True,
        cli_prog_name="attendees-finder",
        env_prefix="ATTENDEES_FINDER_CLI_",
    )

    query: str = Field("", description="Substring to look for in first names")
    attendees: list[str] = Field(default_factory=list, description="First names to search")
    config: FilePath | None = Field(None, description="TOML settings file")
