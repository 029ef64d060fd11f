"""
Input tokenizer for AdventureMachine.

Splits a raw command line on whitespace. Double quotes toggle a quoted
span in which whitespace is kept; the quote characters themselves are
dropped.
"""

from __future__ import annotations


def tokenize(text: str) -> list[str]:
    """
    Split player input into tokens.

    Examples:
        >>> tokenize('go "south door"')
        ['go', 'south door']
        >>> tokenize("take  key")
        ['take', 'key']
    """
    tokens: list[str] = []
    part = ""
    quoted = False

    for char in text:
        if char.isspace() and not quoted:
            if part:
                tokens.append(part)
            part = ""
        elif char == '"':
            quoted = not quoted
        else:
            part += char

    if part:
        tokens.append(part)
    return tokens
