"""Table-driven test cases and a runner that narrates each case with pass/fail marks."""

__version__ = "0.1.0"
__all__ = ["case", "runner"]