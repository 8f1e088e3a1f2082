"""Value types, variables, parameters and return descriptions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

_CONST_PREFIX = "const "


class BaseType(Enum):
    """The basic types of the language."""

    VOID = "void"
    INT = "int"
    BOOL = "bool"
    STR = "str"


@dataclass(frozen=True)
class Type:
    """A base type together with a const flag."""

    base: BaseType
    is_const: bool = False

    def same_base(self, other: Type) -> bool:
        """Return True if both types share the same base type."""
        return self.base == other.base

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Type):
            return NotImplemented
        return self.base == other.base and self.is_const <= other.is_const

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Type):
            return NotImplemented
        return self.base == other.base and self.is_const >= other.is_const

    def __str__(self) -> str:
        prefix = _CONST_PREFIX if self.is_const else ""
        return prefix + self.base.value


def parse_type(text: str) -> Type:
    """Parse a type name such as ``"int"`` or ``"const str"``."""
    is_const = text.startswith(_CONST_PREFIX)
    name = text[len(_CONST_PREFIX):] if is_const else text
    try:
        base = BaseType(name)
    except ValueError:
        raise ValueError(f"unknown type name: {text!r}") from None
    return Type(base, is_const)


@dataclass(frozen=True)
class Var:
    """A named variable of a given type."""

    type: Type
    name: str


@dataclass(frozen=True)
class Param:
    """A function parameter with its type and name."""

    type: Type
    name: str


@dataclass
class Return:
    """A returned value: a variable name or a constant, with its type."""

    type: Type = Type(BaseType.VOID)
    value: str = ""