"""Errors raised by the fact provider and the submission state machine"""


class FactUnavailableError(Exception):
    """The fact provider could not produce a fact."""


class InvalidTransitionError(Exception):
    """An event is not allowed in the controller's current state."""

    def __init__(self, state, event):
        self.state = state
        self.event = event
        super().__init__(f"Cannot handle '{event.value}' while in '{state.value}' state")
