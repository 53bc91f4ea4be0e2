"""
Text view for the joke fetcher.
"""

from typing import Callable, Optional

from jokes.state import JokeState, JokeStore


HEADING = "Get a new Chuck Norris Joke"
BUTTON_LABEL = "Click Me!"
TOO_MANY_BANNER = "That's Too Many Chuck Norris Jokes.  Please refresh!"


class JokeView:
    """Renders the joke state to the console."""

    def __init__(self, output: Callable[[str], None] = print, show_banner: bool = True):
        self.output = output
        self.show_banner = show_banner
        self._unsubscribe: Optional[Callable[[], None]] = None

    def render(self, state: JokeState) -> str:
        """Build the screen text for a state."""
        lines = [HEADING, ""] if self.show_banner else []

        if state.too_many:
            lines.append(TOO_MANY_BANNER)
        else:
            lines.append(f"[{BUTTON_LABEL}]  (press Enter, or q to quit)")
            if state.joke:
                lines.append("")
                lines.append(state.joke)

        return "\n".join(lines)

    def show(self, state: JokeState):
        self.output(self.render(state))

    def attach(self, store: JokeStore):
        """Re-render on every store update."""
        self.detach()
        self._unsubscribe = store.subscribe(self.show)

    def detach(self):
        if self._unsubscribe:
            self._unsubscribe()
            self._unsubscribe = None
