"""Print session: write N copies with operator-confirmed retry."""

import logging
from collections.abc import Callable

from labelprint.models.session import AttemptState, SessionOutcome
from labelprint.printers.base import BasePrinter, PrinterError

logger = logging.getLogger(__name__)


class PrintSession:
    """Sends one rendered document to a printer ``copies`` times.

    A pass writes copies 1..N and stops at the first failure. After a failed
    pass ``confirm_retry`` is asked whether to try again. A yes starts a new
    pass from copy 1, and copies written in earlier passes are not subtracted.
    The session only ends as succeeded when every copy of a pass was written.
    """

    def __init__(
        self,
        printer: BasePrinter,
        confirm_retry: Callable[[PrinterError], bool],
        on_copy_printed: Callable[[int, int], None] | None = None,
    ) -> None:
        self.printer = printer
        self.confirm_retry = confirm_retry
        self.on_copy_printed = on_copy_printed

    def run(self, document: bytes, copies: int) -> SessionOutcome:
        """Run passes until one succeeds or the operator declines a retry."""
        if copies < 1:
            raise ValueError(f"copies must be at least 1, got {copies}")

        outcome = SessionOutcome()
        while True:
            outcome.passes += 1
            outcome.state = AttemptState.ATTEMPTING
            error = self._run_pass(document, copies, outcome)

            if error is None:
                outcome.state = AttemptState.SUCCEEDED
                outcome.last_error = None
                logger.debug(f"Printed {copies} label(s) on {self.printer.name} (pass {outcome.passes})")
                return outcome

            outcome.state = AttemptState.FAILED
            outcome.last_error = str(error)
            if not self.confirm_retry(error):
                logger.debug(f"Retry declined after pass {outcome.passes}, giving up")
                return outcome
            logger.debug(f"Retrying print on {self.printer.name}")

    def _run_pass(self, document: bytes, copies: int, outcome: SessionOutcome) -> PrinterError | None:
        """Write each copy in turn, returning the first error (if any)."""
        for copy in range(1, copies + 1):
            try:
                self.printer.print_raw(document)
            except PrinterError as e:
                logger.debug(f"Copy {copy}/{copies} failed on {self.printer.name}: {e}")
                return e

            outcome.copies_printed += 1
            logger.debug(f"Copy {copy}/{copies} sent to {self.printer.name}")
            if self.on_copy_printed:
                self.on_copy_printed(copy, copies)
        return None
