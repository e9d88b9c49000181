"""Presentation adapter between raw user input and the arccos engine."""
import time

from pydantic import BaseModel, ConfigDict, Field

from arccos_calculator.common.errors import (
    ArccosError,
    FactorialOverflowError,
    InvalidFormatError,
    OutOfRangeError,
)
from arccos_calculator.common.logger import logger
from arccos_calculator.common.models import ArccosResult, SeriesSettings
from arccos_calculator.common.parser import InputParser
from arccos_calculator.common.series import ArccosEngine


# User-visible message for each error kind
ERROR_MESSAGES: dict[type, str] = {
    InvalidFormatError: "Invalid input: please enter a numeric value.",
    OutOfRangeError: "Input must be in the range [-1, 1].",
    FactorialOverflowError: "Factorial overflow during calculation.",
}


class ArccosCalculator(BaseModel):
    """
    Front end for a single arccos evaluation.

    Lifecycle of a call:
        - Parse the input text
        - Evaluate arccos(x) and time the engine call
        - Return the result, or turn an error into a user-visible message

    The calculator holds no display state; callers own their input and output.
    """

    # Make the Pydantic instance immutable (read-only) so settings cannot drift between calls
    model_config = ConfigDict(frozen=True)

    settings: SeriesSettings = Field(default_factory=SeriesSettings, description="Series cutoffs used by the engine")

    def compute(self, text: str) -> ArccosResult:
        """
        Parse text and evaluate arccos on it.

        :param str text: Raw input text

        :return: Computed result with degrees and timing
        :rtype: ArccosResult
        :raises InvalidFormatError: If text is not a number
        :raises OutOfRangeError: If the number is outside [-1, 1]
        :raises FactorialOverflowError: If the series overflows
        """
        x = InputParser.parse(text)
        logger.debug(f"🧮 Computing arccos({x}) with {self.settings}")

        start = time.perf_counter_ns()
        radians = ArccosEngine.compute_arccos(x, self.settings)
        end = time.perf_counter_ns()

        return ArccosResult(
            value=x,
            radians=radians,
            degrees=ArccosEngine.to_degrees(radians),
            duration_ms=(end - start) / 1_000_000.0,
        )

    @staticmethod
    def error_message(exc: Exception) -> str:
        """
        Map an error to the message shown to the user.

        :param Exception exc: Error raised by compute()

        :return: User-visible message
        :rtype: str
        """
        for error_type, message in ERROR_MESSAGES.items():
            if isinstance(exc, error_type):
                return message
        return f"An unexpected error occurred: {exc}"

    def render(self, text: str) -> str:
        """
        Evaluate text and return what the user should see.

        :param str text: Raw input text

        :return: Formatted result, or an error message
        :rtype: str
        """
        try:
            result = self.compute(text)
        except ArccosError as exc:
            logger.debug(f"❌ Rejected input {text!r}: {exc}")
            return self.error_message(exc)
        except Exception as exc:
            logger.error(f"❌ Unexpected failure on input {text!r}: {exc}")
            return self.error_message(exc)

        logger.info(f"✅ arccos({result.value}) = {result.radians}")
        return result.format()
