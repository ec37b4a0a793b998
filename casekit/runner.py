"""A small runner that narrates test cases and records their outcome."""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterable, Optional, TextIO

from casekit.case import Case

CHECK_MARK = "\033[32m\u2713\033[0m"
BALLOT_X = "\033[31m\u2717\033[0m"


class TestAborted(Exception):
    """Raised to stop the current test or subtest immediately."""

    __test__ = False


def _render(format: str, args: tuple) -> str:
    return format % args if args else format


class Runner:
    """Logs numbered cases and pass/fail marks, tracking whether anything failed."""

    __test__ = False

    def __init__(self, title: str, stream: Optional[TextIO] = None) -> None:
        self.title = title
        self.stream = stream if stream is not None else sys.stdout
        self.case_num = 0
        self.prefix = ""
        self.failed = False
        self.log("Test Case => " + title)

    def log(self, message: str) -> None:
        """Write one line to the runner's stream."""
        self.stream.write(message + "\n")
        self.stream.flush()

    def case(self, format: str, *args: Any) -> Runner:
        """Start the next numbered case and describe it."""
        self.case_num += 1
        self.prefix = f"Case {self.case_num} -> "
        self.log(self.prefix + _render(format, args))
        return self

    def caser(self, name: str, func: Callable[[Runner], Any]) -> Runner:
        """Start a case called ``name`` and run ``func`` as its subtest."""
        self.case(name)
        self.run(name, func)
        return self

    def run(self, name: str, func: Callable[[Runner], Any]) -> Runner:
        """Run ``func`` as a subtest; an abort stops only that subtest."""
        try:
            func(self)
        except TestAborted:
            self.failed = True
        return self

    def cases(
        self, cases: Iterable[Case], func: Callable[[Case, Runner], Any]
    ) -> None:
        """Run ``func`` once per case, each as its own numbered subtest."""
        for c in cases:
            self.case(c.name)
            self.run(c.name, lambda runner, c=c: func(c, runner))

    def pass_(self, format: str, *args: Any) -> None:
        """Log that the current condition met the expectation."""
        self.log(f"\t{CHECK_MARK} " + _render(format, args))

    def fail(self, format: str, *args: Any) -> None:
        """Log that the current condition missed the expectation and mark failure."""
        self.log(f"\t{BALLOT_X} " + _render(format, args))
        self.failed = True

    def fatal(self, format: str, *args: Any) -> None:
        """Log a failure and stop the test at once."""
        self.fail(format, *args)
        raise TestAborted(_render(format, args))

    def require(self, cond: bool, desc: str, *args: Any) -> None:
        """Pass if ``cond`` holds, otherwise fail and carry on."""
        if cond:
            self.pass_(desc, *args)
        else:
            self.fail(desc, *args)

    def fail_now(self, cond: bool, desc: str, *args: Any) -> None:
        """Pass if ``cond`` holds, otherwise fail and stop the test."""
        if cond:
            self.pass_(desc, *args)
        else:
            self.fail(desc, *args)
            raise TestAborted(_render(desc, args))

    def no_err(self, err: Optional[BaseException]) -> None:
        """Require that ``err`` is None."""
        self.no_errf(err, "error unexpected")

    def no_errf(self, err: Optional[BaseException], desc: str, *args: Any) -> None:
        """Require that ``err`` is None, stopping the test if it is not."""
        if err is None:
            self.pass_(desc, *args)
        else:
            self.fail(desc, *args)
            self.log(f"requires no error, but found: {err}")
            raise TestAborted(_render(desc, args))

    def err(self, err: Optional[BaseException]) -> None:
        """Require that ``err`` is an error."""
        self.errf(err, "error expected")

    def errf(self, err: Optional[BaseException], desc: str, *args: Any) -> None:
        """Require that ``err`` is an error, stopping the test if it is None."""
        if err is None:
            self.fail(desc, *args)
            self.log("requires error, but found nil")
            raise TestAborted(_render(desc, args))
        self.pass_(desc, *args)