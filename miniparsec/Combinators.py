import logging
from typing import Any, Callable, List, Tuple, TypeVar

from .Parsec import Err, Expecting, Ok, Parsec, Reply, State, T, U
from .Prim import and_then, one_of, pure

log = logging.getLogger("miniparsec")

ItemType = TypeVar('ItemType')


def _empty_list() -> Parsec[List[Any]]:
    # A fresh list per run; a shared `pure([])` would hand every caller the same object.
    return Parsec(lambda state: (state, Ok([])))


# 1. fmap: Transforms the value of a successful parse
def fmap(p: Parsec[T], f: Callable[[T], U]) -> Parsec[U]:
    """
    Runs p and applies f to its value. Failures pass through; like every
    bind, a failure is reported at the state p started from.
    """
    return and_then(p, lambda value: pure(f(value)))


# 2. map_to: Replaces the value of a successful parse
def map_to(p: Parsec[Any], value: T) -> Parsec[T]:
    return fmap(p, lambda _: value)


# 3. discard: Keeps success/failure, drops the value
def discard(p: Parsec[Any]) -> Parsec[None]:
    return fmap(p, lambda _: None)


# 4. many: Applies a parser zero or more times
def many(p: Parsec[ItemType]) -> Parsec[List[ItemType]]:
    """
    Parse zero or more occurrences of `p`, returning the values in order.

    Stops at the first failure of `p`; since that failure goes through a bind
    it never counts as consumption, so `many` itself always succeeds. A `p`
    that succeeds without moving forward would repeat forever, so that case
    fails instead.
    """
    def parse(state: State) -> Reply[List[ItemType]]:
        values: List[ItemType] = []
        current = state
        while True:
            new_state, result = p.parse_fn(current)
            if isinstance(result, Err):
                return current, Ok(values)
            if new_state.position == current.position or current.position > len(current.source):
                return current, Err(Expecting("many: parser succeeded without consuming input"))
            values.append(result.value)
            current = new_state
    return Parsec(parse)


# 5. many1: Applies a parser one or more times
def many1(p: Parsec[ItemType]) -> Parsec[List[ItemType]]:
    """
    Applies parser p one or more times, returning a list of results.
    Fails exactly when the first application of p fails.
    """
    return and_then(p, lambda x: fmap(many(p), lambda xs: [x] + xs))


# 6. sepBy1: Parses one or more occurrences separated by a separator
def sep_by1(p: Parsec[ItemType], sep: Parsec[Any]) -> Parsec[List[ItemType]]:
    """
    Parses one or more occurrences of p separated by sep, returning a list of p's results.

    A separator that fails, even after reading input, ends the list. A
    separator that matches must be followed by another p, so a trailing
    separator is an error.

    When an element after a separator fails, the failure unwinds through the
    separators read so far, innermost first. The first one that read nothing
    ends the list there; otherwise the failure is reported just after the
    first separator.
    """
    def parse(state: State) -> Reply[List[ItemType]]:
        first_state, first = p.parse_fn(state)
        if isinstance(first, Err):
            return state, first

        values: List[ItemType] = [first.value]
        # (state before separator, state after separator), one per element after the first
        seps: List[Tuple[State, State]] = []
        current = first_state
        while True:
            sep_state, sep_result = sep.parse_fn(current)
            if isinstance(sep_result, Err):
                return current, Ok(values)
            seps.append((current, sep_state))

            item_state, item = p.parse_fn(sep_state)
            if isinstance(item, Err):
                for depth in range(len(seps) - 1, -1, -1):
                    before, after = seps[depth]
                    if after.position == before.position:
                        return before, Ok(values[:depth + 1])
                return seps[0][1], item
            if item_state.position == current.position:
                return current, Err(Expecting("sep_by1: separator and parser consumed no input"))

            values.append(item.value)
            current = item_state
    return Parsec(parse)


# 7. sepBy: Parses zero or more occurrences separated by a separator
def sep_by(p: Parsec[ItemType], sep: Parsec[Any]) -> Parsec[List[ItemType]]:
    """
    Parses zero or more occurrences of p separated by sep, returning a list of p's results.
    """
    return one_of([sep_by1(p, sep), _empty_list()])


# 8. label: Names what a parser expects
def label(p: Parsec[T], reason: str) -> Parsec[T]:
    """Replace the error of p with `Expecting(reason)` when p fails without consuming input."""
    return p.label(reason)


# 9. trace: Debugging parser that logs entry and outcome
def trace(name: str, p: Parsec[T]) -> Parsec[T]:
    def parse(state: State) -> Reply[T]:
        log.debug("%s: trying at %s", name, state)
        new_state, result = p.parse_fn(state)
        if isinstance(result, Err):
            log.debug("%s: failed at %s, %s", name, new_state, result.error)
        else:
            log.debug("%s: matched %r, now at %s", name, result.value, new_state)
        return new_state, result
    return Parsec(parse)
