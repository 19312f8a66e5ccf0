import sys
from itertools import starmap
from typing import Callable, Iterable, Tuple, TypeVar

VERBOSE = False

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")


# Functional

Predicate = Callable[[T], bool]
BinaryPredicate = Callable[[T, T], bool]


def compose(f: Callable[[T], U], g: Callable[[U], V]) -> Callable[[T], V]:
    """Compose 2 functions, chaining output to input from left to right"""
    return lambda *x: g(f(*x))


def either_way(f: BinaryPredicate[T]) -> BinaryPredicate[T]:
    """Make a binary predicate symmetric: true if it holds with arguments in either order"""
    return lambda a, b: f(a, b) or f(b, a)


def apply(f: Callable[..., U], args: Iterable) -> U:
    return f(*args)


def count_where(f: BinaryPredicate[T], pairs: Iterable[Tuple[T, T]]) -> int:
    return sum(starmap(f, pairs))


# I/O


def set_verbose(value: bool):
    global VERBOSE
    VERBOSE = value


def print_(*args, **kwargs):
    if VERBOSE:
        print(*args, **kwargs, file=sys.stderr)


def strip_newline(line: str) -> str:
    r"""Remove a single trailing `\n` or `\r\n`, and nothing else"""
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line
