"""Console session loop for the Grok agent."""

from __future__ import annotations

import argparse
from typing import Callable, Optional, Sequence

from app_config import ConfigError
from chat.errors import ChatError

from .chat import ChatAgent

BANNER = "Grok CLI: Enter your query (type 'exit' to quit). Tools and live search are enabled."
EXIT_COMMAND = "exit"


def _print_reply(response: dict) -> None:
    print("Grok:", response["text"] or "")
    citations = response.get("citations") or []
    if citations:
        print("Sources:")
        for index, url in enumerate(citations, start=1):
            print(f"  [{index}] {url}")


def run_chat(agent: ChatAgent, *, input_func: Callable[[str], str] = input) -> None:
    """Read one utterance at a time until ``exit``, end of input, or Ctrl+C."""
    print(BANNER)
    while True:
        try:
            text = input_func("You: ").strip()
        except EOFError:
            print()
            return
        except KeyboardInterrupt:
            print("\nbye!")
            return

        if text == EXIT_COMMAND:
            return

        try:
            response = agent.respond(text)
        except ChatError as exc:
            print("Error:", exc)
            continue

        _print_reply(response)


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return number


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Chat with Grok, with local tools and live search.")
    parser.add_argument("--model", default=None, help="Model identifier (overrides GROK_MODEL).")
    parser.add_argument(
        "--max-round-trips",
        type=_positive_int,
        default=None,
        help="Stop resolving an utterance after this many model requests (default: unbounded).",
    )
    args = parser.parse_args(argv)

    try:
        agent = ChatAgent.from_settings(model=args.model, max_round_trips=args.max_round_trips)
    except ConfigError as exc:
        print(exc)
        return

    run_chat(agent)


if __name__ == "__main__":
    main()
