"""
Attendees finder

Prints, as JSON, the attendees whose first name contains the query.
"""

import logging
import sys

from pydantic_settings import SettingsConfigDict

from .cli import Cli
from .command import FindAttendeesCommand
from .json_converter import JsonImmutableConverter
from .settings import Settings

logger = logging.getLogger(__name__)


def main() -> int:
    """Run the command line entry point."""
    cli = Cli()

    settings_config = SettingsConfigDict()
    if cli.config is not None:
        settings_config["toml_file"] = cli.config
    settings = Settings.build(settings_config)

    logging.basicConfig(level=settings.log_level)
    logger.info("using step %s", settings.finder.step)

    command = FindAttendeesCommand(JsonImmutableConverter(), settings.finder.step)
    text = command.perform(
        {
            "query": cli.query,
            "attendees": [{"firstName": name} for name in cli.attendees],
        }
    )
    print(text)
    return 1 if text.startswith("Error:") else 0


if __name__ == "__main__":
    sys.exit(main())
