"""
Session state for the joke fetcher.

The state is a single immutable record. It only changes through
JokeStore.dispatch, which runs each update through reduce().
"""

from dataclasses import dataclass, replace
from typing import Callable, List, Optional, Union


@dataclass(frozen=True)
class JokeState:
    """What the view reads: current joke text, fetch count and the cutoff flag."""
    joke: str = ""
    joke_count: int = 0
    too_many: bool = False


@dataclass(frozen=True)
class IncrementCount:
    """One more joke fetched successfully."""


@dataclass(frozen=True)
class SetJoke:
    """Replace the displayed joke text."""
    text: str


@dataclass(frozen=True)
class SetTooMany:
    """Enter the terminal state. No more fetches after this."""


Update = Union[IncrementCount, SetJoke, SetTooMany]

Listener = Callable[[JokeState], None]


def reduce(state: JokeState, update: Update) -> JokeState:
    """
    Apply one update to a state record.

    Args:
        state: Current record (left untouched)
        update: One of IncrementCount, SetJoke, SetTooMany

    Returns:
        The new record.
    """
    if isinstance(update, IncrementCount):
        return replace(state, joke_count=state.joke_count + 1)
    if isinstance(update, SetJoke):
        return replace(state, joke=update.text)
    if isinstance(update, SetTooMany):
        return replace(state, too_many=True)
    raise TypeError(f"Unknown state update: {update!r}")


class JokeStore:
    """Holds the current JokeState and notifies listeners on change."""

    def __init__(self, initial: Optional[JokeState] = None):
        self._state = initial if initial is not None else JokeState()
        self._listeners: List[Listener] = []

    @property
    def state(self) -> JokeState:
        return self._state

    def dispatch(self, *updates: Update) -> JokeState:
        """
        Apply updates in order, then notify listeners once.

        Listeners never see a record with only part of the updates applied.
        """
        state = self._state
        for update in updates:
            state = reduce(state, update)
        self._state = state

        for listener in list(self._listeners):
            listener(state)
        return state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener. Returns a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
