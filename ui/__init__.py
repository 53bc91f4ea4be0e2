# UI module for the joke fetcher
from .view import JokeView

__all__ = ["JokeView"]
