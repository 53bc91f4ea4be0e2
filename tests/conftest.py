import sys
from pathlib import Path

import httpx
import pytest
import pytest_asyncio

# Add project root
sys.path.insert(0, str(Path(__file__).parent.parent))

from jokes.client import JOKE_API_URL, JokeClient


class FakeJokeAPI:
    """Stands in for the joke API and records every request it receives."""

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.body = None
        self.jokes = iter(f"Chuck Norris joke #{i}" for i in range(1, 1000))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.body is not None:
            return httpx.Response(self.status_code, content=self.body)
        return httpx.Response(self.status_code, json={"value": next(self.jokes)})

    @property
    def calls(self) -> int:
        return len(self.requests)


@pytest.fixture
def joke_api():
    return FakeJokeAPI()


@pytest_asyncio.fixture
async def client(joke_api):
    async with JokeClient(url=JOKE_API_URL, transport=httpx.MockTransport(joke_api.handler)) as c:
        yield c
