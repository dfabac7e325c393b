"""Lexer splitting one ndb line into raw attr=value tokens."""

import ply.lex as lex


class LineLexer:
    """Lexer for tokenizing a single line of an ndb file.

    A WORD is a run of non-whitespace characters in which a double quote
    toggles a quoted span; whitespace and '#' inside the span belong to the
    word. The raw text is kept, quotes included. A '#' outside quotes
    starts a comment that runs to end of line.
    """

    tokens = ["WORD"]

    # Ignored characters (whitespace between words)
    t_ignore = " \t\r\f\v"

    def __init__(self) -> None:
        self.lexer: lex.LexToken = None  # type: ignore

    def t_COMMENT(self, t: lex.LexToken) -> None:
        r"\#[^\n]*"
        pass  # Ignore comments

    def t_WORD(self, t: lex.LexToken) -> lex.LexToken:
        r'(?:[^\s"\#]|"[^"\n]*"?)+'
        return t

    def t_error(self, t: lex.LexToken) -> None:
        # Only whitespace outside t_ignore (e.g. U+00A0) reaches here.
        t.lexer.skip(1)

    def build(self, **kwargs) -> None:  # type: ignore
        """Build the lexer."""
        self.lexer = lex.lex(module=self, **kwargs)

    def input(self, data: str) -> None:
        """Set the input string to tokenize."""
        self.lexer.input(data)

    def token(self) -> lex.LexToken | None:
        """Return the next token."""
        return self.lexer.token()

    def tokenize(self, data: str) -> list[lex.LexToken]:
        """Tokenize the input and return all tokens."""
        self.input(data)
        tokens = []
        while True:
            tok = self.token()
            if tok is None:
                break
            tokens.append(tok)
        return tokens

    def words(self, line: str) -> list[str]:
        """Return the raw text of every word on a line."""
        return [tok.value for tok in self.tokenize(line)]
