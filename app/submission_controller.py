# app/submission_controller.py
"""Form -> loading -> results state machine for one session.

The controller is the only owner of the submission state. Every change goes
through ``_transition``; a (state, event) pair missing from ``TRANSITIONS``
raises ``InvalidTransitionError``.

Each submission is stamped with a generation number. ``reset`` and every new
submission bump the generation, so a fact fetch that resolves after the
controller has moved on is dropped instead of overwriting newer state.
"""

import asyncio
from enum import Enum
from typing import List, Optional

import structlog

from app.age_converter import DogSize, convert_dog_age_to_human_years
from app.errors import InvalidTransitionError
from app.models import DogFactOutput, Notification, SubmissionSnapshot, SubmissionState

logger = structlog.get_logger()

DEFAULT_FACT_ERROR = "Failed to generate dog fact"
MISSING_INPUT_ERROR = "Dog age and size are required"

FACT_FAILURE_NOTIFICATION = Notification(
    title="Oh no! Something went wrong.",
    description="We couldn't fetch a fun fact right now. Please try again.",
    variant="destructive",
)


class SubmissionEvent(str, Enum):
    SUBMIT = "submit"
    FACT_READY = "fact_ready"
    FACT_FAILED = "fact_failed"
    RESET = "reset"


TRANSITIONS = {
    (SubmissionState.FORM, SubmissionEvent.SUBMIT): SubmissionState.LOADING,
    (SubmissionState.LOADING, SubmissionEvent.FACT_READY): SubmissionState.RESULTS,
    (SubmissionState.LOADING, SubmissionEvent.FACT_FAILED): SubmissionState.RESULTS,
    (SubmissionState.FORM, SubmissionEvent.RESET): SubmissionState.FORM,
    (SubmissionState.LOADING, SubmissionEvent.RESET): SubmissionState.FORM,
    (SubmissionState.RESULTS, SubmissionEvent.RESET): SubmissionState.FORM,
}


class SubmissionController:
    def __init__(self, fact_provider, fact_timeout: Optional[float] = None):
        self.fact_provider = fact_provider
        self.fact_timeout = fact_timeout
        self.state = SubmissionState.FORM
        self.generation = 0
        self.dog_age: Optional[float] = None
        self.dog_size: Optional[DogSize] = None
        self.human_age: Optional[int] = None
        self.dog_fact: Optional[DogFactOutput] = None
        self.error: Optional[str] = None
        self._notifications: List[Notification] = []

    def _transition(self, event: SubmissionEvent) -> SubmissionState:
        next_state = TRANSITIONS.get((self.state, event))
        if next_state is None:
            raise InvalidTransitionError(self.state, event)
        logger.debug("Submission transition", submission_event=event.value,
                     from_state=self.state.value, to_state=next_state.value)
        self.state = next_state
        return next_state

    def _clear_results(self):
        self.human_age = None
        self.dog_fact = None
        self.error = None

    def set_dog_age(self, age: float):
        self.dog_age = age

    def set_dog_size(self, size: DogSize):
        self.dog_size = DogSize(size)

    async def submit_calculation(self) -> SubmissionSnapshot:
        """Submit the pending age and size set on this controller."""
        if self.dog_age is None or self.dog_size is None:
            self.error = MISSING_INPUT_ERROR
            return self.snapshot()
        return await self.submit(self.dog_age, self.dog_size)

    async def submit(self, age: float, size: DogSize) -> SubmissionSnapshot:
        if self.state is SubmissionState.LOADING:
            logger.info("Submission already in progress, ignoring", generation=self.generation)
            return self.snapshot()

        size = DogSize(size)
        human_age = convert_dog_age_to_human_years(age, size)

        self._transition(SubmissionEvent.SUBMIT)
        self.generation += 1
        generation = self.generation
        self.dog_age = age
        self.dog_size = size
        self._clear_results()

        try:
            fact = await self._fetch_fact()
        except asyncio.CancelledError:
            if generation == self.generation:
                logger.info("Submission cancelled, back to form", generation=generation)
                self.reset()
            raise
        except Exception as e:
            if generation != self.generation:
                logger.info("Discarding stale fact failure", generation=generation,
                            current_generation=self.generation)
                return self.snapshot()
            logger.warning("Failed to generate dog fact", error=str(e), generation=generation)
            self._transition(SubmissionEvent.FACT_FAILED)
            self.human_age = human_age
            self.error = str(e) or DEFAULT_FACT_ERROR
            self._notifications.append(FACT_FAILURE_NOTIFICATION)
            return self.snapshot()

        if generation != self.generation:
            logger.info("Discarding stale fact", generation=generation,
                        current_generation=self.generation)
            return self.snapshot()

        self._transition(SubmissionEvent.FACT_READY)
        self.human_age = human_age
        self.dog_fact = fact
        return self.snapshot()

    async def _fetch_fact(self) -> DogFactOutput:
        if self.fact_timeout is None:
            return await self.fact_provider.fetch_fact()
        try:
            return await asyncio.wait_for(self.fact_provider.fetch_fact(), self.fact_timeout)
        except asyncio.TimeoutError:
            raise asyncio.TimeoutError(f"Dog fact timed out after {self.fact_timeout}s")

    def reset(self) -> SubmissionSnapshot:
        self._transition(SubmissionEvent.RESET)
        self.generation += 1
        self.dog_age = None
        self.dog_size = None
        self._clear_results()
        self._notifications.clear()
        return self.snapshot()

    def drain_notifications(self) -> List[Notification]:
        notifications, self._notifications = self._notifications, []
        return notifications

    def snapshot(self) -> SubmissionSnapshot:
        if self.state is SubmissionState.RESULTS:
            return SubmissionSnapshot(
                state=self.state,
                dog_age=self.dog_age,
                dog_size=self.dog_size,
                human_age=self.human_age,
                dog_fact=self.dog_fact,
                error=self.error
            )
        return SubmissionSnapshot(
            state=self.state,
            dog_age=self.dog_age,
            dog_size=self.dog_size,
            error=self.error
        )
