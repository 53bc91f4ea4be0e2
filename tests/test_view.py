"""
Test the text view.
"""

from jokes.state import IncrementCount, JokeState, JokeStore, SetJoke, SetTooMany
from ui.view import BUTTON_LABEL, HEADING, TOO_MANY_BANNER, JokeView


def test_initial_screen_shows_button_without_joke():
    text = JokeView().render(JokeState())

    assert text.splitlines()[0] == HEADING
    assert BUTTON_LABEL in text
    assert TOO_MANY_BANNER not in text


def test_joke_is_shown_under_button():
    text = JokeView().render(JokeState(joke="Chuck counted to infinity. Twice.", joke_count=1))

    lines = text.splitlines()
    assert lines[-1] == "Chuck counted to infinity. Twice."
    assert any(BUTTON_LABEL in line for line in lines)


def test_too_many_hides_button_and_joke():
    text = JokeView().render(JokeState(joke="cutting you off", joke_count=5, too_many=True))

    assert TOO_MANY_BANNER in text
    assert BUTTON_LABEL not in text
    assert "cutting you off" not in text


def test_no_banner_option():
    text = JokeView(show_banner=False).render(JokeState())
    assert HEADING not in text


def test_attached_view_renders_on_dispatch():
    screens = []
    view = JokeView(output=screens.append)
    store = JokeStore()
    view.attach(store)

    store.dispatch(IncrementCount(), SetJoke("one"))
    store.dispatch(SetTooMany(), SetJoke("cutting you off"))
    view.detach()
    store.dispatch(SetJoke("ignored"))

    assert len(screens) == 2
    assert screens[0].endswith("one")
    assert TOO_MANY_BANNER in screens[1]
