"""
Content module for AdventureMachine.

Provides pre-built stories for immediate play.
"""

from adventure_machine.content.the_silence import create_the_silence

__all__ = ["create_the_silence"]
