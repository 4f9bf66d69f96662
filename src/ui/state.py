"""State management models for the UI controller."""

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from src.chains.spec_generator import SpecificationResult

COPY_FEEDBACK_SECONDS = 2.0


class SpecField(str, Enum):
    """Displayed specification fields."""

    ENGLISH = "englishSpecs"
    ARABIC = "arabicSpecs"


class Idle(BaseModel):
    """No request in flight. May carry an input validation message."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["idle"] = "idle"
    error_message: str | None = Field(default=None, description="Input validation message")


class Loading(BaseModel):
    """A generation request is in flight."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["loading"] = "loading"


class Succeeded(BaseModel):
    """The last request produced a result."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["succeeded"] = "succeeded"
    result: SpecificationResult


class Failed(BaseModel):
    """The last request failed."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["failed"] = "failed"
    message: str


RequestState = Annotated[Idle | Loading | Succeeded | Failed, Field(discriminator="kind")]


class TimedFlag(BaseModel):
    """Boolean flag that switches itself off after a fixed lifetime.

    Expiry is computed from the caller's clock on read, so no timer task is
    left behind when the owner goes away.
    """

    lifetime: float = Field(default=COPY_FEEDBACK_SECONDS, gt=0)
    expires_at: float | None = None

    def set(self, now: float) -> None:
        """Switch the flag on; restarts the lifetime if already on."""
        self.expires_at = now + self.lifetime

    def reset(self) -> None:
        self.expires_at = None

    def is_set(self, now: float) -> bool:
        return self.expires_at is not None and now < self.expires_at
