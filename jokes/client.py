"""
Joke API client - fetches a random Chuck Norris joke.
"""

import httpx
from typing import Optional


JOKE_API_URL = "https://api.chucknorris.io/jokes/random"


class MalformedJokeError(ValueError):
    """The API answered with JSON that has no usable joke text."""


class JokeClient:
    """Async client for the Chuck Norris joke API."""

    def __init__(
        self,
        url: str = JOKE_API_URL,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.url = url
        self.client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def fetch_joke(self) -> str:
        """
        Fetch one random joke.

        Returns:
            The joke text (the "value" field of the response).

        Raises:
            httpx.HTTPError: Transport failure or non-2xx status
            ValueError: Body is not JSON, or carries no "value" text
        """
        response = await self.client.get(self.url)
        response.raise_for_status()

        data = response.json()
        value = data.get("value") if isinstance(data, dict) else None
        if not isinstance(value, str):
            raise MalformedJokeError(f"No joke text in response from {self.url}")
        return value

    async def aclose(self):
        """Close the underlying HTTP client."""
        await self.client.aclose()

    async def __aenter__(self) -> "JokeClient":
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()
