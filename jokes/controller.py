"""
Fetch-and-limit logic for jokes.

Each request either fetches one joke, or (once the session limit is hit)
switches to the terminal "too many" state without touching the network.
"""

from .client import JokeClient
from .state import IncrementCount, JokeState, JokeStore, SetJoke, SetTooMany


MAX_JOKES = 5

CUTOFF_MESSAGE = "cutting you off"
NO_MORE_MESSAGE = "no more jokes"


class JokeFetchController:
    """Decides whether a fetch request hits the API or the limit."""

    def __init__(self, client: JokeClient, store: JokeStore, limit: int = MAX_JOKES):
        self.client = client
        self.store = store
        self.limit = limit

    async def request_joke(self) -> JokeState:
        """
        Handle one fetch request.

        The limit checks run before any network access, so once the
        terminal state is reached no request is ever sent again.
        Fetch errors propagate to the caller and leave the state as it was.

        Returns:
            The state after the request completes.
        """
        state = self.store.state

        if state.too_many:
            return self.store.dispatch(SetJoke(NO_MORE_MESSAGE))

        if state.joke_count >= self.limit:
            return self.store.dispatch(SetTooMany(), SetJoke(CUTOFF_MESSAGE))

        text = await self.client.fetch_joke()
        return self.store.dispatch(IncrementCount(), SetJoke(text))

    async def trigger(self) -> JokeState:
        """Zero-argument entry point for the UI's fetch button."""
        return await self.request_joke()
