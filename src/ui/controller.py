"""Interaction controller for the specification generator UI.

Holds the product description, the single RequestState and the two copy
flags. Rendering code only reads from the controller and forwards user
actions to it.
"""

import logging
import time
from collections.abc import Callable

from src.chains.spec_generator import (
    SpecGeneratorChain,
    SpecificationResult,
    validate_description,
)
from src.errors import GenerationError, ValidationError
from src.ui.clipboard import Clipboard
from src.ui.state import (
    COPY_FEEDBACK_SECONDS,
    Failed,
    Idle,
    Loading,
    RequestState,
    SpecField,
    Succeeded,
    TimedFlag,
)
from src.ui.utils import copy_label, generate_label

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred."


class UIController:
    """State machine behind the generate, clear and copy actions."""

    def __init__(
        self,
        generator: SpecGeneratorChain,
        clipboard: Clipboard,
        clock: Callable[[], float] = time.monotonic,
        copy_feedback_seconds: float = COPY_FEEDBACK_SECONDS,
    ):
        """Initialize the controller.

        Args:
            generator: Chain used for generation requests.
            clipboard: Clipboard collaborator used by copy actions.
            clock: Monotonic clock in seconds, used for copy flag expiry.
            copy_feedback_seconds: How long a copy flag stays on.
        """
        self.generator = generator
        self.clipboard = clipboard
        self.clock = clock
        self.description = ""
        self.state: RequestState = Idle()
        self.copied: dict[SpecField, TimedFlag] = {
            field: TimedFlag(lifetime=copy_feedback_seconds) for field in SpecField
        }

    @property
    def is_loading(self) -> bool:
        return isinstance(self.state, Loading)

    @property
    def result(self) -> SpecificationResult | None:
        if isinstance(self.state, Succeeded):
            return self.state.result
        return None

    @property
    def error_message(self) -> str | None:
        if isinstance(self.state, Failed):
            return self.state.message
        if isinstance(self.state, Idle):
            return self.state.error_message
        return None

    @property
    def generate_label(self) -> str:
        return generate_label(self.is_loading)

    def set_description(self, text: str) -> None:
        self.description = text

    def is_copied(self, field: SpecField) -> bool:
        return self.copied[field].is_set(self.clock())

    @property
    def any_copied(self) -> bool:
        """Whether any copy label is currently showing its confirmation."""
        return any(self.is_copied(field) for field in SpecField)

    def copy_label(self, field: SpecField) -> str:
        return copy_label(field, self.is_copied(field))

    def _reset_copy_flags(self) -> None:
        for flag in self.copied.values():
            flag.reset()

    async def generate(self) -> None:
        """Run one generation request for the current description.

        A trigger while a request is already in flight is ignored.
        """
        if self.is_loading:
            logger.debug("Generation already in flight; ignoring trigger")
            return

        self.state = Idle()
        self._reset_copy_flags()

        try:
            description = validate_description(self.description)
        except ValidationError as e:
            self.state = Idle(error_message=str(e))
            return

        loading = Loading()
        self.state = loading
        try:
            result = await self.generator.agenerate(description)
            outcome: RequestState = Succeeded(result=result)
        except GenerationError as e:
            logger.error(f"Failed to generate specifications: {e}")
            outcome = Failed(message=str(e))
        except Exception as e:
            logger.exception("Unexpected error during generation")
            outcome = Failed(message=str(e) or UNEXPECTED_ERROR_MESSAGE)

        # A clear() during the request replaced the Loading state; drop the outcome.
        if self.state is loading:
            self.state = outcome
        else:
            logger.debug("Discarding generation outcome after clear")

    def clear(self) -> None:
        """Reset description, result, error and copy flags."""
        self.description = ""
        self.state = Idle()
        self._reset_copy_flags()

    async def copy(self, field: SpecField) -> None:
        """Copy one field of the current result to the clipboard.

        Failures are logged and otherwise ignored.
        """
        result = self.result
        if result is None:
            return

        text = result.english_specs if field is SpecField.ENGLISH else result.arabic_specs
        try:
            await self.clipboard.write_text(text)
        except Exception as e:
            logger.warning(f"Failed to copy text: {e}")
            self.copied[field].reset()
            return

        self.copied[field].set(self.clock())
