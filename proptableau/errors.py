from enum import Enum


class ParseErrorKind(Enum):
    UNEXPECTED_CHARACTER = 'unexpected character'
    UNTERMINATED_EXPRESSION = 'unterminated expression'
    UNKNOWN_OPERATOR = 'unknown operator'
    EMPTY_VARIABLE_NAME = 'empty variable name'
    TRAILING_INPUT = 'trailing input'
    UNEXPECTED_END_OF_INPUT = 'unexpected end of input'


class ParseError(Exception):
    """
    Raised when a string is not a well-formed formula.

    position is the index into the original input (whitespace included),
    or None when the input ran out.
    """

    def __init__(self, kind: ParseErrorKind, position: int | None = None, character: str | None = None) -> None:
        self.kind = kind
        self.position = position
        self.character = character
        super().__init__(self._describe())

    def _describe(self) -> str:
        msg = self.kind.value
        if self.character is not None:
            msg += ' %r' % self.character
        if self.position is not None:
            msg += ' at position %d' % self.position
        return msg
