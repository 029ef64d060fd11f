"""
Interactive REPL for AdventureMachine.

Provides a text-based interface for playing a story. Input is read
in a worker thread so the tick scheduler keeps running on the event
loop while the player is typing.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from collections.abc import Callable

from adventure_machine.console import Console, TerminalConsole, tokenize
from adventure_machine.content import create_the_silence
from adventure_machine.engine import Game, GameConfig, StoryData

logger = logging.getLogger(__name__)

QUIT_WORDS = {"quit", "q"}


class GameREPL:
    """
    Interactive REPL for playing AdventureMachine stories.

    Handles user input, the quit command, and game output.
    """

    def __init__(
        self,
        *,
        story_factory: Callable[[], StoryData] = create_the_silence,
        config: GameConfig | None = None,
        console: Console | None = None,
    ) -> None:
        self.story_factory = story_factory
        self.config = config or GameConfig()
        self.console = console or TerminalConsole()
        self.game = Game(self.console, self.config)
        self.running = True

    def start(self) -> None:
        self.game.new_game(self.story_factory())

    def handle_line(self, text: str) -> None:
        """Process one line of player input."""
        text = text.strip()
        if not text:
            return
        if text.lower() in QUIT_WORDS:
            self.running = False
            return
        self.game.print_command(text)
        self.game.parse_command(text, tokenize(text))

    async def run(self) -> None:
        loop = asyncio.get_running_loop()
        self.start()

        while self.running:
            try:
                line = await loop.run_in_executor(None, input, "> ")
            except (KeyboardInterrupt, EOFError):
                print("\n")
                self.running = False
                continue
            self.handle_line(line)

        self.game.scheduler.clear()
        print("Thanks for playing!")


def run_game(config: GameConfig | None = None) -> None:
    """
    Run the sample story in the terminal.

    Args:
        config: Engine configuration; read from the environment if omitted
    """
    config = config or GameConfig.from_env()
    logging.basicConfig(level=getattr(logging, config.log_level.upper(), logging.WARNING))
    repl = GameREPL(config=config)
    asyncio.run(repl.run())


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="AdventureMachine text adventure")
    parser.add_argument(
        "--tick-interval",
        type=float,
        default=None,
        help="Seconds between background ticks",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level",
    )
    parser.add_argument(
        "--no-help-hint",
        action="store_true",
        help="Don't print the help hint when the game starts",
    )

    args = parser.parse_args(argv)
    config = GameConfig.from_env(
        tick_interval=args.tick_interval,
        log_level=args.log_level,
        show_help_hint=False if args.no_help_hint else None,
    )
    run_game(config)


if __name__ == "__main__":
    main()
