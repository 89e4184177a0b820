import json
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from .contract import ContractViolationError
from .finder import STEPS, StepName
from .handler import FindAttendeesArgs, handle_find_attendees
from .json_converter import JsonImmutableConverter

logger = logging.getLogger(__name__)


class FindAttendeesCommand:
    def __init__(
        self,
        json_converter: JsonImmutableConverter,
        step: StepName,
    ) -> None:
        self.json_converter = json_converter
        self.step = step
        self.finder = STEPS[step]

    @property
    def name(self) -> str:
        return "find_attendees"

    def perform(self, arguments: Mapping[str, Any] | None) -> str:
        try:
            args = FindAttendeesArgs.model_validate(arguments or {})
        except ValidationError as e:
            return f"Error: Invalid arguments for {self.name}: {e}"

        logger.debug("running %s with step %s", self.name, self.step)
        try:
            result = handle_find_attendees(self.json_converter, args, self.finder)
        except ContractViolationError as e:
            logger.exception("Error finding attendees")
            return f"Error: Failed to find attendees: {e}"
        return json.dumps(result, indent=2)
