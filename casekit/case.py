"""Test case records and a fluent builder for them."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Optional


@dataclass(frozen=True)
class Case:
    """A single table-driven test case."""

    name: str
    input: Any = None
    want: Any = None
    want_err: bool = False
    err: Optional[BaseException] = None


def new_case(
    name: str,
    input: Any,
    want: Any,
    want_err: bool,
    err: Optional[BaseException],
) -> Case:
    """Create a case with every field given."""
    return Case(name=name, input=input, want=want, want_err=want_err, err=err)


class CaseBuilder:
    """Build a :class:`Case` step by step; every setter returns the builder."""

    def __init__(self, name: str) -> None:
        self._case = Case(name=name)

    def name(self, name: str) -> CaseBuilder:
        self._case = replace(self._case, name=name)
        return self

    def input(self, input: Any) -> CaseBuilder:
        self._case = replace(self._case, input=input)
        return self

    def want(self, want: Any) -> CaseBuilder:
        self._case = replace(self._case, want=want)
        return self

    def want_err(self, want_err: bool) -> CaseBuilder:
        self._case = replace(self._case, want_err=want_err)
        return self

    def err(self, err: Optional[BaseException]) -> CaseBuilder:
        self._case = replace(self._case, err=err)
        return self

    def build(self) -> Case:
        """Return the case built so far."""
        return self._case