"""Tests for operator prompts."""

from datetime import datetime

import pytest

from labelprint.console import Console, is_affirmative
from labelprint.models.label import BARCODE_SENTINEL, InvalidCopiesError
from labelprint.printers.base import PrinterError


class ScriptedIO:
    """Feeds canned answers to prompts and captures output."""

    def __init__(self, answers: list[str]) -> None:
        self.answers = list(answers)
        self.prompts: list[str] = []
        self.output: list[str] = []

    def input(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.answers.pop(0)

    def console(self) -> Console:
        return Console(input_fn=self.input, output_fn=self.output.append)


@pytest.mark.parametrize("answer", ["y", "Y", "yes", "YES", " Yes "])
def test_affirmative(answer):
    assert is_affirmative(answer) is True


@pytest.mark.parametrize("answer", ["n", "N", "no", "", "yep", "1"])
def test_not_affirmative(answer):
    assert is_affirmative(answer) is False


class TestAskDob:
    """Tests for the date of birth prompt loop."""

    def test_valid_first_time(self):
        io = ScriptedIO(["05081990"])
        assert io.console().ask_dob() == "05/08/1990"
        assert len(io.prompts) == 1

    def test_reprompts_until_valid(self):
        io = ScriptedIO(["31/02/2000", "1990", "garbage", "29021900", "29/02/2000"])
        assert io.console().ask_dob() == "29/02/2000"
        assert len(io.prompts) == 5
        assert io.output.count("Invalid date format. Please use DDMMYYYY or DD/MM/YYYY") == 4


class TestAskCopies:
    def test_valid(self):
        assert ScriptedIO(["3"]).console().ask_copies() == 3

    def test_invalid_is_fatal(self):
        io = ScriptedIO(["three", "3"])
        with pytest.raises(InvalidCopiesError):
            io.console().ask_copies()
        # No second prompt
        assert len(io.prompts) == 1


class TestCollectLabel:
    """Tests for full label collection."""

    def test_without_barcode(self):
        io = ScriptedIO(["Jane", "Doe", "05081990", "f", "n"])
        label = io.console().collect_label("%d/%m/%Y,%H:%M")

        assert label.first_name == "Jane"
        assert label.last_name == "Doe"
        assert label.dob == "05/08/1990"
        assert label.gender == "f"
        assert label.barcode_enabled is False
        assert label.barcode_value == BARCODE_SENTINEL
        assert io.prompts == [
            "First name: ",
            "Last name: ",
            "Date of birth (DDMMYYYY or DD/MM/YYYY): ",
            "Gender: ",
            "Do you want to print a barcode? (Y/N): ",
        ]
        datetime.strptime(label.current_datetime, "%d/%m/%Y,%H:%M")

    def test_with_barcode(self):
        io = ScriptedIO(["Jane", "Doe", "05/08/1990", "F", "YES", "abc-123"])
        label = io.console().collect_label("%d/%m/%Y,%H:%M")

        assert label.barcode_enabled is True
        assert label.barcode_value == "abc-123"
        assert io.prompts[-1] == "Please enter a barcode: "

    def test_answers_are_trimmed(self):
        io = ScriptedIO(["  Jane ", "Doe\n", "05081990", " m ", "n"])
        label = io.console().collect_label("%H:%M")
        assert label.first_name == "Jane"
        assert label.last_name == "Doe"
        assert label.gender == "m"


class TestConfirmRetry:
    def test_shows_error_and_accepts(self):
        io = ScriptedIO(["y"])
        error = PrinterError("Cannot open printer at /dev/usb/lp0: busy")
        assert io.console().confirm_retry(error) is True
        assert "/dev/usb/lp0" in io.output[0]
        assert io.prompts == ["Try again? (Y/N): "]

    def test_declines(self):
        assert ScriptedIO(["n"]).console().confirm_retry(PrinterError("x")) is False
