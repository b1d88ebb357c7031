import logging
import sys
import threading
from contextlib import contextmanager
from functools import reduce
from typing import Any, Callable, List, Optional, Tuple

from .Parsec import Err, Expecting, Ok, Parsec, ParsingError, Reply, Result, State, T, U
from .Text import char_at

log = logging.getLogger("miniparsec")


def pure(value: T) -> Parsec[T]:
    """Return a parser that succeeds with a value without consuming input."""
    def parse(state: State) -> Reply[T]:
        return state, Ok(value)
    return Parsec(parse)


of = pure


def fail(reason: str) -> Parsec[Any]:
    """A parser that always fails with `Expecting(reason)`, consuming nothing."""
    def parse(state: State) -> Reply[Any]:
        return state, Err(Expecting(reason))
    return Parsec(parse)


def _any_char(state: State) -> Reply[str]:
    c = char_at(state.source, state.position)
    if c is None:
        return state, Err(Expecting("a char"))
    return state.advance(), Ok(c)


def _end(state: State) -> Reply[None]:
    if state.at_end():
        # Steps one past the end; nothing can follow a successful `end` anyway.
        return state.advance(), Ok(None)
    return state, Err(Expecting("end of input"))


any_char: Parsec[str] = Parsec(_any_char)
end: Parsec[None] = Parsec(_end)


def and_then(parser: Parsec[T], f: Callable[[T], Parsec[U]]) -> Parsec[U]:
    """
    Run `parser`, then the parser `f` builds from its value.

    If `parser` fails, the failure is reported with the incoming state, so a
    failed first step never counts as consumption.
    """
    return parser.bind(f)


def try_parse(parser: Parsec[T]) -> Parsec[T]:
    """Try a parser, rewinding to the starting state if it fails."""
    def parse(state: State) -> Reply[T]:
        new_state, result = parser.parse_fn(state)
        if isinstance(result, Err):
            return state, result
        return new_state, result
    return Parsec(parse)


def one_of(parsers: List[Parsec[T]]) -> Parsec[T]:
    """
    Try `parsers` left to right.

    An alternative that fails after consuming input ends the search with its
    failure; wrap it in `try_parse` to let the next alternative run instead.
    An empty list always fails.
    """
    return reduce(lambda rest, p: p | rest, reversed(list(parsers)), fail("no match"))


def lazy(thunk: Callable[[], Parsec[T]]) -> Parsec[T]:
    """Defer building a parser until it runs. Needed for recursive grammars."""
    def parse(state: State) -> Reply[T]:
        return thunk().parse_fn(state)
    return Parsec(parse)


# Recursive grammars (built with `lazy`) nest a few frames per level of input.
RECURSION_LIMIT = 100_000

_limit_lock = threading.Lock()
_active_runs = 0
_saved_limit = 0


@contextmanager
def _deep_recursion():
    """Raise the interpreter recursion limit while any run is in progress."""
    global _active_runs, _saved_limit
    with _limit_lock:
        if _active_runs == 0:
            _saved_limit = sys.getrecursionlimit()
            sys.setrecursionlimit(max(_saved_limit, RECURSION_LIMIT))
        _active_runs += 1
    try:
        yield
    finally:
        with _limit_lock:
            _active_runs -= 1
            if _active_runs == 0:
                sys.setrecursionlimit(_saved_limit)


def run(parser: Parsec[T], text: str) -> Result[T]:
    """
    Run `parser` over `text` from the start and return its outcome.

    Never raises for parse failures. Input nested deeper than the raised
    recursion limit allows fails with `Expecting("shallower nesting")`.
    """
    with _deep_recursion():
        try:
            final_state, result = parser.parse_fn(State(0, text))
        except RecursionError:
            log.debug("run over %d chars exceeded the recursion limit", len(text))
            return Err(Expecting("shallower nesting"))
    if log.isEnabledFor(logging.DEBUG):
        log.debug("run over %d chars stopped at %s: %s", len(text), final_state.position, result)
    return result


def run_parser(parser: Parsec[T], text: str) -> Tuple[Optional[T], Optional[ParsingError]]:
    """Run `parser` and split the outcome into a (value, error) pair."""
    result = run(parser, text)
    if isinstance(result, Err):
        return None, result.error
    return result.value, None


def parse(parser: Parsec[T], text: str) -> T:
    """Run `parser` and return its value, raising ParseError on failure."""
    return run(parser, text).unwrap()
