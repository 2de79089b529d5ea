"""Interactive operator prompts."""

import logging
from collections.abc import Callable

from labelprint.models.label import (
    BARCODE_SENTINEL,
    InvalidDateError,
    LabelData,
    capture_timestamp,
    normalize_dob,
    parse_copies,
)
from labelprint.printers.base import PrinterError

logger = logging.getLogger(__name__)

AFFIRMATIVE = {"y", "yes"}


def is_affirmative(answer: str) -> bool:
    """True for y/yes in any case."""
    return answer.strip().lower() in AFFIRMATIVE


class Console:
    """Line-based prompts for the operator.

    ``input_fn`` and ``output_fn`` default to the builtins; tests pass
    scripted replacements.
    """

    def __init__(
        self,
        input_fn: Callable[[str], str] | None = None,
        output_fn: Callable[[str], None] | None = None,
    ) -> None:
        self._input = input_fn or input
        self._output = output_fn or print

    def say(self, message: str) -> None:
        self._output(message)

    def ask(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def ask_yes_no(self, prompt: str) -> bool:
        return is_affirmative(self.ask(prompt))

    def ask_dob(self) -> str:
        """Prompt until a valid date of birth is entered."""
        while True:
            raw = self.ask("Date of birth (DDMMYYYY or DD/MM/YYYY): ")
            try:
                return normalize_dob(raw)
            except InvalidDateError as e:
                logger.debug(f"Rejected date of birth: {e}")
                self.say("Invalid date format. Please use DDMMYYYY or DD/MM/YYYY")

    def ask_copies(self) -> int:
        """Prompt once for the number of labels.

        Raises:
            InvalidCopiesError: If the answer is not a positive integer.
        """
        return parse_copies(self.ask("Num Labels: "))

    def collect_label(self, timestamp_format: str) -> LabelData:
        """Collect all label fields from the operator."""
        first_name = self.ask("First name: ")
        last_name = self.ask("Last name: ")
        dob = self.ask_dob()
        gender = self.ask("Gender: ")
        current_datetime = capture_timestamp(timestamp_format)

        barcode_enabled = self.ask_yes_no("Do you want to print a barcode? (Y/N): ")
        barcode_value = BARCODE_SENTINEL
        if barcode_enabled:
            barcode_value = self.ask("Please enter a barcode: ")

        return LabelData(
            first_name=first_name,
            last_name=last_name,
            dob=dob,
            gender=gender,
            current_datetime=current_datetime,
            barcode_enabled=barcode_enabled,
            barcode_value=barcode_value,
        )

    def report_copy_printed(self, copy: int, copies: int) -> None:
        self.say(f"✓ Label {copy}/{copies} sent to printer successfully!")

    def confirm_retry(self, error: PrinterError) -> bool:
        """Show a print failure and ask whether to try again."""
        self.say(f"✗ Error printing label: {error}")
        return self.ask_yes_no("Try again? (Y/N): ")
