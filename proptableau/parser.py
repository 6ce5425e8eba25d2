"""
Recursive descent parser for propositional formulas.

Grammar, after all whitespace is discarded:

    formula  := variable | '-' formula | '(' formula binop formula ')'
    variable := [A-Za-z][A-Za-z0-9]*
    binop    := '^' | '|' | '->' | '<->'

Binary connectives always carry their own parentheses, so there is no
precedence to resolve. Negation and variables take none.
"""
from .errors import ParseError, ParseErrorKind
from .formula import BINARY_CONNECTIVES, NEGATION, Formula, Not, Var

OPEN = '('
CLOSE = ')'

# Multi-character operators, longest first so '<->' wins over any prefix.
MULTI_CHAR_OPERATORS = sorted((op for op in BINARY_CONNECTIVES if len(op) > 1), key=len, reverse=True)


def is_letter(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()

def is_name_char(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()

def negate(f: Formula, times: int) -> Formula:
    for _ in range(times):
        f = Not(f)
    return f


class Parser:
    def __init__(self, text: str) -> None:
        # (index in text, character) for every non-whitespace character
        self.chars = [(i, ch) for i, ch in enumerate(text) if not ch.isspace()]
        self.pos = 0
        self.open_parens = 0

    # ========== Cursor ==========

    def peek(self) -> str | None:
        if self.pos < len(self.chars):
            return self.chars[self.pos][1]
        return None

    def lookahead(self, n: int) -> str:
        return ''.join(ch for _, ch in self.chars[self.pos:self.pos + n])

    def error(self, kind: ParseErrorKind) -> ParseError:
        if self.pos >= len(self.chars):
            return ParseError(kind)
        index, ch = self.chars[self.pos]
        return ParseError(kind, index, ch)

    def end_of_input(self) -> ParseError:
        if self.open_parens:
            return ParseError(ParseErrorKind.UNTERMINATED_EXPRESSION)
        return ParseError(ParseErrorKind.UNEXPECTED_END_OF_INPUT)

    # ========== Grammar ==========

    def parse(self) -> Formula:
        """
        Parse the whole input without recursion.

        Every '(' opens a frame on an explicit stack, so nesting depth is
        bounded by memory rather than by the call stack.
        """
        frames: list[dict] = []
        while True:
            negations = self.negations()
            ch = self.peek()
            if ch is None:
                raise self.end_of_input()
            if ch == OPEN:
                self.pos += 1
                self.open_parens += 1
                frames.append({'negations': negations, 'left': None, 'connective': None})
                continue
            if not is_letter(ch):
                raise self.error(ParseErrorKind.UNEXPECTED_CHARACTER)
            f = negate(self.variable(), negations)

            # Close every frame whose right operand is now complete.
            while frames and frames[-1]['left'] is not None:
                ch = self.peek()
                if ch is None:
                    raise self.end_of_input()
                if ch != CLOSE:
                    raise self.error(ParseErrorKind.UNEXPECTED_CHARACTER)
                self.pos += 1
                self.open_parens -= 1
                frame = frames.pop()
                f = negate(frame['connective'](frame['left'], f), frame['negations'])

            if not frames:
                break
            frames[-1]['left'] = f
            frames[-1]['connective'] = self.operator()

        if self.peek() is not None:
            raise self.error(ParseErrorKind.TRAILING_INPUT)
        return f

    def negations(self) -> int:
        n = 0
        while self.peek() == NEGATION:
            self.pos += 1
            n += 1
        return n

    def variable(self) -> Var:
        start = self.pos
        while self.pos < len(self.chars) and is_name_char(self.chars[self.pos][1]):
            self.pos += 1
        return Var(''.join(ch for _, ch in self.chars[start:self.pos]))

    def operator(self):
        ch = self.peek()
        if ch is None:
            raise self.end_of_input()

        for symbol in MULTI_CHAR_OPERATORS:
            if self.lookahead(len(symbol)) == symbol:
                self.pos += len(symbol)
                return BINARY_CONNECTIVES[symbol]

        if ch in BINARY_CONNECTIVES:
            self.pos += 1
            return BINARY_CONNECTIVES[ch]

        # '<', '<-' or a '-' without its '>' are never guessed at
        raise self.error(ParseErrorKind.UNKNOWN_OPERATOR)


def parse(fmla: str) -> Formula:
    """
    Parse fmla into a Formula.

    Raises ParseError if fmla is not a well-formed formula.
    """
    return Parser(fmla).parse()
