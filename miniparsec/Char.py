from typing import Callable

from .Parsec import Err, Ok, Parsec, Reply, State
from .Prim import and_then, any_char, fail, pure
from .Text import from_char, to_chars


# Helper function: Parses a single character
def char(expected: str) -> Parsec[None]:
    """
    Parses the character `expected` and succeeds with None.

    The character is read before it is compared, so a mismatch counts as
    consumption unless the parser is wrapped in `try_parse`.
    """
    def check(c: str) -> Parsec[None]:
        if c == expected:
            return pure(None)
        return fail(f"the char `{from_char(expected)}`")
    return and_then(any_char, check)


# Core function: Succeeds if the character satisfies a predicate
def satisfy(predicate: Callable[[str], bool]) -> Parsec[str]:
    """Succeeds for any character where predicate returns True. Returns the parsed character."""
    def check(c: str) -> Parsec[str]:
        if predicate(c):
            return pure(c)
        return fail("satisfy")
    return and_then(any_char, check)


def string(expected: str) -> Parsec[str]:
    """
    Parses the exact string `expected` and returns it.

    On a mismatch the position stays just past the prefix that did match.
    """
    matchers = [char(c) for c in to_chars(expected)]

    def parse(state: State) -> Reply[str]:
        current = state
        for matcher in matchers:
            new_state, result = matcher.parse_fn(current)
            if isinstance(result, Err):
                return current, result
            current = new_state
        return current, Ok(expected)
    return Parsec(parse)
