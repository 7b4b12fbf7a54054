"""
Single-character lookahead reader over a template stream

The cursor holds one current character and can peek at the next one. At end
of stream the current character is None, which can never be confused with a
real character of the template.

Example:
    >>> cursor = CharacterCursor(io.StringIO("ab"))
    >>> cursor.advance(), cursor.current, cursor.peek()
    (True, 'a', 'b')
    >>> cursor.advance(), cursor.advance(), cursor.current
    (True, False, None)
"""

from typing import Optional, TextIO


class CharacterCursor:
    """
    Reads a text stream one character at a time

    Attributes:
        current: Character under the cursor, None before the first advance()
                 and after end of stream
        line_number: 1-based line of the current character
        column: 1-based column of the current character
    """

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream
        self.current: Optional[str] = None
        self.line_number = 1
        self.column = 0
        self._lookahead: Optional[str] = self.char_read()

    def char_read(self) -> Optional[str]:
        char = self.stream.read(1)
        return char if char else None

    def advance(self) -> bool:
        """
        Move to the next character.

        Returns:
            False once the stream is exhausted; current is then None and
            stays None
        """
        if self.current == '\n':
            self.line_number += 1
            self.column = 0

        self.current = self._lookahead
        if self.current is None:
            return False

        self.column += 1
        self._lookahead = self.char_read()
        return True

    def peek(self) -> Optional[str]:
        """Next character without consuming it, None at end of stream"""
        return self._lookahead

    def atEnd(self) -> bool:
        return self.current is None

    def current_isWhitespace(self) -> bool:
        return self.current is not None and self.current.isspace()

    def current_isLetter(self) -> bool:
        return self.current is not None and self.current.isalpha()

    def pair_matches(self, first: str, second: str) -> bool:
        """True if current and peek() are exactly the given two characters"""
        return self.current == first and self._lookahead == second

    def whitespace_skip(self) -> None:
        while self.current_isWhitespace():
            self.advance()
