# casekit

casekit makes test output easy to follow. It provides two things:

* **Cases.** `casekit.case.Case` is a frozen dataclass. It holds a test case's
  `name`, its `input`, the expected result `want`, whether an error is expected
  (`want_err`) and which error (`err`). `CaseBuilder` builds one step by step.
  `new_case` builds one in a single call.
* **A narrating runner.** `casekit.runner.Runner` numbers each case as it
  starts (`Case 1 -> ...`). It marks each check with a green ✓ or a red ✗. It
  records whether any check failed, and it can stop a step as soon as a check
  that step needs fails.

## Installation

```
pip install casekit
```

## Building cases

```python
from casekit.case import CaseBuilder, new_case

c = CaseBuilder("division").input((6, 3)).want(2).build()
c.name       # "division"
c.input      # (6, 3)
c.want       # 2
c.want_err   # False
c.err        # None

d = new_case("div by zero", (1, 0), 0, True, ZeroDivisionError("division by zero"))
```

Every `CaseBuilder` setter (`name`, `input`, `want`, `want_err`, `err`)
returns the builder, so calls can be chained. A setter can be called again to
replace an earlier value. Fields that are never set keep their defaults:
`None`, `None`, `False`, `None`.

## Narrating a test

```python
from casekit.case import new_case
from casekit.runner import Runner


def test_division():
    r = Runner("division")
    cases = [
        new_case("exact", (6, 3), 2, False, None),
        new_case("by zero", (1, 0), 0, True, None),
    ]

    def check(c, runner):
        a, b = c.input
        try:
            result, err = a // b, None
        except ZeroDivisionError as exc:
            result, err = None, exc
        if c.want_err:
            runner.err(err)
        else:
            runner.require(result == c.want, "result is %d", c.want)

    r.cases(cases, check)
    assert not r.failed
```

This prints:

```
Test Case => division
Case 1 -> exact
	✓ result is 2
Case 2 -> by zero
	✓ error expected
```

## Runner

`Runner(title, stream=None)` logs `Test Case => <title>` as soon as it is
created. Output goes to standard output unless you pass another text stream.
The runner exposes these attributes: `title`, `stream`, `case_num` (the number
of the last case started), `prefix` and `failed`.

| Method | What it does |
| --- | --- |
| `log(message)` | Writes one line to the stream. |
| `case(format, *args)` | Starts the next numbered case and logs its description. Returns the runner so calls can be chained. |
| `run(name, func)` | Calls `func(runner)`. If `func` raises `TestAborted`, the runner records a failure and continues. Returns the runner. |
| `caser(name, func)` | Calls `case(name)` and then `run(name, func)`. |
| `cases(cases, func)` | For each case, starts a numbered case with its name and runs `func(case, runner)` as a step. |
| `pass_(format, *args)` | Logs a ✓ line. |
| `fail(format, *args)` | Logs a ✗ line and sets `failed`. |
| `fatal(format, *args)` | Logs a ✗ line, sets `failed` and raises `TestAborted`. |
| `require(cond, desc, *args)` | Calls `pass_` if `cond` is true and `fail` if it is not. |
| `fail_now(cond, desc, *args)` | Like `require`, but raises `TestAborted` when `cond` is false. |
| `no_err(err)` / `no_errf(err, desc, *args)` | Passes when `err` is `None`. Otherwise it fails, logs the error and raises `TestAborted`. |
| `err(err)` / `errf(err, desc, *args)` | Passes when `err` is not `None`. Otherwise it fails, logs `requires error, but found nil` and raises `TestAborted`. |

Descriptions use `%`-style formatting. When you give no arguments, the format
string is logged as it is.

## What it does not do

casekit does not discover or collect tests, and it does not report results to
your test framework. A failed check only sets `runner.failed`. To make the
framework fail the test, assert on `failed` at the end of the test. A
`TestAborted` raised outside `run`, `caser` or `cases` propagates like any
other exception.