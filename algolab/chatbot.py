"""An elementary customer-service chatbot."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

_FAREWELL_INPUT = "bye"

_RESPONSES = {
    "hello": "Hi there! How can I assist you today?",
    "how are you?": "I'm just a program, but thanks for asking!",
    _FAREWELL_INPUT: "Goodbye! Have a great day!",
}

_FALLBACK = "Sorry, I didn't understand that. Can you please rephrase?"


def generate_response(user_input: str) -> str:
    """Return the bot's reply to an exact, already normalised message."""
    return _RESPONSES.get(user_input, _FALLBACK)


def chat(lines: Iterable[str]) -> Iterator[str]:
    """Yield a reply for each line, case-insensitively, stopping after a farewell."""
    for line in lines:
        message = line.rstrip("\r\n").lower()
        yield generate_response(message)
        if message == _FAREWELL_INPUT:
            return


def _prompted_lines(stream: TextIO) -> Iterator[str]:
    while True:
        print("You: ", end="", flush=True)
        line = stream.readline()
        if not line:
            return
        yield line


def main(argv: list[str] | None = None) -> int:
    """Run an interactive chat on standard input and output."""
    parser = argparse.ArgumentParser(description="Chat with a simple customer-service bot.")
    parser.parse_args(argv)

    print("Welcome! How can I assist you today?")
    print("You can start typing your questions or messages.")
    print("Type 'bye' to exit the chat.")
    for reply in chat(_prompted_lines(sys.stdin)):
        print(f"Bot: {reply}")
    return 0


if __name__ == "__main__":
    sys.exit(main())