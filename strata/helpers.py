from typing import Iterable
import functools
import operator
import os


class Option:
    """An integer option read from the environment, e.g. ``STRATA_DEBUG=1``."""

    value: int
    key: str

    def __init__(self, key: str, default_value: int = 0):
        self.key = key.upper()
        self.value = os.getenv(self.key, default_value)
        try:
            self.value = int(self.value)
        except ValueError:
            raise ValueError(f"Invalid value for {self.key}: {self.value}. Expected an integer.")

    def __bool__(self): return bool(self.value)
    def __ge__(self, x): return self.value >= x
    def __gt__(self, x): return self.value > x


DEBUG = Option("STRATA_DEBUG")


def prod(x: Iterable[int]) -> int:
    return functools.reduce(operator.mul, x, 1)
