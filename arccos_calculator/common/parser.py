"""Parse user input into a real number."""
from arccos_calculator.common.errors import InvalidFormatError


class InputParser:
    """
    Turn raw input text into a float.

    Accepts the decimal notations Python's float() understands (e.g. "0.5",
    "-.25", "1e-3"), surrounded by optional whitespace. Range checking is left
    to the engine.
    """

    @staticmethod
    def _is_number(text: str) -> bool:
        """
        Determine if a string represents a numeric value.

        :param str text: Candidate string

        :return: True if text can be converted to float, else False
        :rtype: bool
        """
        try:
            float(text)
            return True
        except ValueError:
            return False

    @staticmethod
    def parse(text: str) -> float:
        """
        Convert input text to a float.

        :param str text: Raw input text

        :return: Parsed value
        :rtype: float
        :raises InvalidFormatError: If text is empty or not a number
        """
        stripped = text.strip()
        if not stripped or not InputParser._is_number(stripped):
            raise InvalidFormatError(f"Invalid input, not a numeric value: {text!r}")
        return float(stripped)
