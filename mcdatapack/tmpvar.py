"""Allocation of numbered temporary variables."""

from __future__ import annotations

from itertools import count

PREFIX = "0tmp"


class TmpVarManager:
    """Hands out and takes back temporary variables named ``0tmp<n>``."""

    def __init__(self) -> None:
        self._reserved: set[int] = set()

    @staticmethod
    def _name(index: int) -> str:
        return f"{PREFIX}{index}"

    @staticmethod
    def _index(name: str) -> int:
        if not name.startswith(PREFIX):
            raise ValueError(f"not a temporary variable: {name!r}")
        try:
            return int(name[len(PREFIX):])
        except ValueError:
            raise ValueError(f"not a temporary variable: {name!r}") from None

    def _first_free(self) -> int:
        return next(i for i in count() if i not in self._reserved)

    def get_free(self) -> str:
        """Name of the lowest temporary variable not reserved."""
        return self._name(self._first_free())

    def reserve(self, name: str | None = None) -> str:
        """Reserve ``name``, or the first free variable; return its name."""
        index = self._first_free() if name is None else self._index(name)
        self._reserved.add(index)
        return self._name(index)

    def free(self, name: str) -> None:
        """Release ``name``; does nothing if it is not reserved."""
        self._reserved.discard(self._index(name))

    def reserved(self) -> set[str]:
        """Names of all reserved variables."""
        return {self._name(i) for i in self._reserved}

    def clear(self) -> None:
        """Release every variable."""
        self._reserved.clear()