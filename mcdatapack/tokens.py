"""Lexer tokens, keyword and symbol classification, and a debug table."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from mcdatapack.errors import CompileError
from mcdatapack.loc import UNKNOWN, Loc

_TABLE_WIDTH = 10


class TokenType(Enum):
    """Token kinds; each value is the label shown in token tables."""

    ERRTYPE = "ERR"
    EMPTY = "EMPTY"
    CMD = "CMD"
    SEMICOL = ";"
    COMMA = ","
    WORD = "WORD"
    TYPENAME = "TYPENAME"
    CONST = "CONST"
    NAMESPACE = "NAMESPACE"
    LBRACE = "("
    RBRACE = ")"
    LCBRACE = "{"
    RCBRACE = "}"
    ADD = "+"
    SUB = "-"
    DIV = "/"
    MUL = "*"
    MOD = "%"
    ASSIGN = "="
    ASSIGN_ADD = "+="
    ASSIGN_SUB = "-="
    ASSIGN_DIV = "/="
    ASSIGN_MUL = "*="
    ASSIGN_MOD = "%="
    INC = "++"
    DEC = "--"
    LT = "<"
    LTE = "<="
    GT = ">"
    GTE = ">="
    EQ = "=="
    NEQ = "!="
    NOT = "!"
    AND = "&&"
    OR = "||"
    NUM = "NUM"
    STR = "STR"
    TRUE = "TRUE"
    FALSE = "FALSE"
    EXEC_STMT = "EXEC"
    IF = "IF"
    ELSEIF = "ELSEIF"
    ELSE = "ELSE"
    WHILE = "WHILE"
    FOR = "FOR"
    RETURN = "RETURN"


@dataclass(frozen=True)
class Token:
    """A lexer token with its content and location."""

    type: TokenType = TokenType.ERRTYPE
    content: str = ""
    loc: Loc = UNKNOWN


_PUNCT_TABLE = {
    "(": TokenType.LBRACE,
    ")": TokenType.RBRACE,
    "{": TokenType.LCBRACE,
    "}": TokenType.RCBRACE,
    ";": TokenType.SEMICOL,
    ",": TokenType.COMMA,
    "+": TokenType.ADD, "+=": TokenType.ASSIGN_ADD, "++": TokenType.INC,
    "-": TokenType.SUB, "-=": TokenType.ASSIGN_SUB, "--": TokenType.DEC,
    "*": TokenType.MUL, "*=": TokenType.ASSIGN_MUL,
    "/": TokenType.DIV, "/=": TokenType.ASSIGN_DIV,
    "%": TokenType.MOD, "%=": TokenType.ASSIGN_MOD,
    "=": TokenType.ASSIGN, "==": TokenType.EQ,
    "<": TokenType.LT, "<=": TokenType.LTE,
    ">": TokenType.GT, ">=": TokenType.GTE,
    "&&": TokenType.AND,
    "||": TokenType.OR,
    "!": TokenType.NOT, "!=": TokenType.NEQ,
}

# Execute subcommands written like if-statements; "store" is not supported.
EXEC_NAMES = frozenset({
    "align", "anchored", "as", "at", "facing", "in", "positioned", "rotated",
    "unless",
})

_KEYWORDS = {
    "int": TokenType.TYPENAME,
    "void": TokenType.TYPENAME,
    "bool": TokenType.TYPENAME,
    "str": TokenType.TYPENAME,
    "const": TokenType.CONST,
    "namespace": TokenType.NAMESPACE,
    "if": TokenType.IF,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "return": TokenType.RETURN,
    "else": TokenType.ELSE,
    "while": TokenType.WHILE,
    "for": TokenType.FOR,
}


def classify_word(ident: str) -> Token:
    """Turn an identifier into a keyword, execute-statement or word token."""
    if ident in EXEC_NAMES:
        kind = TokenType.EXEC_STMT
    else:
        kind = _KEYWORDS.get(ident, TokenType.WORD)
    return Token(kind, ident)


def classify_punct(punct: str, loc: Loc = UNKNOWN) -> Token:
    """Turn a symbol into its token; unsupported symbols raise CompileError."""
    try:
        kind = _PUNCT_TABLE[punct]
    except KeyError:
        raise CompileError(
            f'Use of the symbol "{punct}" is unsupported.', loc
        ) from None
    return Token(kind, "", loc)


def _table_row(tok: Token) -> str:
    label = tok.type.value.ljust(_TABLE_WIDTH)
    where = f"{tok.loc.line}[{tok.loc.col}]".ljust(_TABLE_WIDTH)
    return f"Type: {label} Line: {where} Content: {tok.content}"


def token_table(tokens: Iterable[Token]) -> str:
    """Return one line of type, location and content per token."""
    return "\n".join(_table_row(tok) for tok in tokens)