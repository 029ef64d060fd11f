"""Command-line interface for AdventureMachine."""

from adventure_machine.cli.repl import GameREPL, main, run_game

__all__ = ["GameREPL", "main", "run_game"]
