# Joke fetching core: state store, API client and fetch controller
from .client import JOKE_API_URL, JokeClient, MalformedJokeError
from .controller import CUTOFF_MESSAGE, MAX_JOKES, NO_MORE_MESSAGE, JokeFetchController
from .state import IncrementCount, JokeState, JokeStore, SetJoke, SetTooMany, reduce

__all__ = [
    "JOKE_API_URL", "JokeClient", "MalformedJokeError",
    "CUTOFF_MESSAGE", "MAX_JOKES", "NO_MORE_MESSAGE", "JokeFetchController",
    "IncrementCount", "JokeState", "JokeStore", "SetJoke", "SetTooMany", "reduce",
]
