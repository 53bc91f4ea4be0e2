#!/usr/bin/env python3
"""
Main orchestrator - ties all components together.
"""

import sys
import signal
import asyncio
import threading
from pathlib import Path
from typing import Awaitable, Callable, Optional

import httpx

# Add project root to path
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import Config
from jokes.client import JokeClient
from jokes.controller import JokeFetchController
from jokes.state import JokeStore
from ui.view import JokeView

QUIT_COMMANDS = ("q", "quit", "exit")


def _pump_stdin(loop: asyncio.AbstractEventLoop, queue: asyncio.Queue):
    """Forward stdin lines into the event loop. None marks EOF."""
    for line in sys.stdin:
        loop.call_soon_threadsafe(queue.put_nowait, line)
    loop.call_soon_threadsafe(queue.put_nowait, None)


class Orchestrator:
    """Main system orchestrator."""

    def __init__(
        self,
        config: Config,
        client: Optional[JokeClient] = None,
        read_line: Optional[Callable[[], Awaitable[Optional[str]]]] = None,
        output: Callable[[str], None] = print
    ):
        self.config = config
        self.output = output
        self._running = False
        self._task: Optional[asyncio.Task] = None
        self._read_line = read_line

        output("Initializing joke fetcher...")

        output("  - Joke client")
        self._owns_client = client is None
        self.client = client or JokeClient(
            url=config.joke_api_url,
            timeout=config.request_timeout
        )

        output("  - State store")
        self.store = JokeStore()

        output(f"  - Fetch controller (limit {config.max_jokes})")
        self.controller = JokeFetchController(
            self.client, self.store, limit=config.max_jokes
        )

        output("  - View")
        self.view = JokeView(output=output, show_banner=config.show_banner)
        self.view.attach(self.store)

        output("Initialization complete!")

    async def run(self):
        """Run the interactive loop until quit, EOF or a shutdown signal."""
        self._running = True
        self._task = asyncio.current_task()
        self._install_signal_handlers()

        if self._read_line is None:
            self._read_line = self._start_stdin_reader()

        self.view.show(self.store.state)

        try:
            while self._running:
                line = await self._read_line()
                if line is None or line.strip().lower() in QUIT_COMMANDS:
                    break
                await self._fetch()
        except asyncio.CancelledError:
            pass
        finally:
            await self._cleanup()

    async def _fetch(self):
        """Handle one "fetch requested" press."""
        before = self.store.state
        try:
            after = await self.controller.trigger()
        except (httpx.HTTPError, ValueError) as e:
            self.output(f"Warning: couldn't fetch a joke: {e}")
            return

        if after.joke_count > before.joke_count:
            self.output(f"[fetch] joke {after.joke_count} of {self.controller.limit}")
        elif after.too_many and not before.too_many:
            self.output(f"[limit] {after.joke_count} jokes, cutting off")
        else:
            self.output("[limit] already cut off")

    def _start_stdin_reader(self) -> Callable[[], Awaitable[Optional[str]]]:
        loop = asyncio.get_running_loop()
        queue: asyncio.Queue = asyncio.Queue()
        # Daemon so a blocked read never holds up exit
        threading.Thread(target=_pump_stdin, args=(loop, queue), daemon=True).start()
        return queue.get

    def _install_signal_handlers(self):
        loop = asyncio.get_running_loop()
        for signum in (signal.SIGINT, signal.SIGTERM):
            try:
                loop.add_signal_handler(signum, self._signal_handler)
            except (NotImplementedError, RuntimeError):
                # Not supported on this platform/thread
                pass

    def _signal_handler(self):
        """Handle shutdown signals."""
        self.output("\nShutting down...")
        self._running = False
        if self._task and not self._task.done():
            self._task.cancel()

    async def _cleanup(self):
        """Clean up resources."""
        self._running = False
        loop = asyncio.get_running_loop()
        for signum in (signal.SIGINT, signal.SIGTERM):
            try:
                loop.remove_signal_handler(signum)
            except (NotImplementedError, RuntimeError):
                pass
        self.view.detach()
        if self._owns_client:
            await self.client.aclose()


def main():
    """Main entry point."""
    config = Config.load()
    orchestrator = Orchestrator(config)
    asyncio.run(orchestrator.run())


if __name__ == "__main__":
    main()
