from dataclasses import dataclass
from typing import Any, Callable, Generic, Tuple, TypeVar, Union

T = TypeVar('T')  # Generic type for parser results
U = TypeVar('U')


@dataclass(frozen=True)
class State:
    """Position in the input plus the input itself. Never mutated."""
    position: int
    source: str

    def advance(self, n: int = 1) -> 'State':
        return State(self.position + n, self.source)

    def at_end(self) -> bool:
        return self.position >= len(self.source)

    def __str__(self) -> str:
        return f"offset {self.position} of {len(self.source)}"


class ParsingError:
    """Base class for parse failure values."""
    __slots__ = ()


@dataclass(frozen=True)
class Expecting(ParsingError):
    """The only failure kind: a description of what was expected."""
    reason: str

    def __str__(self) -> str:
        return f"expecting {self.reason}"


class ParseError(Exception):
    """Raised at the API boundary when a caller asks for the value of a failed parse."""

    def __init__(self, error: ParsingError):
        super().__init__(str(error))
        self.error = error


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    error: ParsingError

    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> Any:
        raise ParseError(self.error)


Result = Union[Ok[T], Err]
Reply = Tuple[State, Result[T]]
# (new_state, outcome): every parser returns the state it finished in, success or not


class Parsec(Generic[T]):
    """A parser: a wrapped function from a State to a (State, Result) pair."""

    __slots__ = ('parse_fn',)

    def __init__(self, parse_fn: Callable[[State], Reply[T]]):
        self.parse_fn = parse_fn

    # Combinators call parse_fn directly; __call__ costs an extra frame per step.
    def __call__(self, state: State) -> Reply[T]:
        return self.parse_fn(state)

    # Monadic bind (>>=)
    def bind(self, f: Callable[[T], 'Parsec[U]']) -> 'Parsec[U]':
        def parse(state: State) -> Reply[U]:
            new_state, result = self.parse_fn(state)
            if isinstance(result, Err):
                # Whatever the failing parser read is dropped: report the caller's state.
                return state, result
            return f(result.value).parse_fn(new_state)
        return Parsec(parse)

    # Alternative (<|>)
    def __or__(self, other: 'Parsec[T]') -> 'Parsec[T]':
        def parse(state: State) -> Reply[T]:
            new_state, result = self.parse_fn(state)
            # Only try other if the left side failed without consuming input
            if isinstance(result, Err) and new_state.position == state.position:
                return other.parse_fn(state)
            return new_state, result
        return Parsec(parse)

    # Sequence (&): keeps both values as a pair
    def __and__(self, other: 'Parsec[U]') -> 'Parsec[Tuple[T, U]]':
        return self.bind(lambda a: other.bind(lambda b: _succeed((a, b))))

    # Sequence (*>): keeps the right value
    # Comparison operators chain (a > b < c), so parenthesize mixed sequences.
    def __gt__(self, other: 'Parsec[U]') -> 'Parsec[U]':
        return self.bind(lambda _: other)

    # Sequence (<*): keeps the left value
    def __lt__(self, other: 'Parsec[U]') -> 'Parsec[T]':
        return self.bind(lambda a: other.bind(lambda _: _succeed(a)))

    # Bind also available as >>; a parser on the right is sequenced, its value kept
    def __rshift__(self, f: Union[Callable[[T], 'Parsec[U]'], 'Parsec[U]']) -> 'Parsec[U]':
        if isinstance(f, Parsec):
            return self > f
        return self.bind(f)

    def map(self, f: Callable[[T], U]) -> 'Parsec[U]':
        return self.bind(lambda value: _succeed(f(value)))

    # Label (<?>)
    def label(self, reason: str) -> 'Parsec[T]':
        def parse(state: State) -> Reply[T]:
            new_state, result = self.parse_fn(state)
            if isinstance(result, Err) and new_state.position == state.position:  # Empty failure
                return new_state, Err(Expecting(reason))
            return new_state, result
        return Parsec(parse)


def _succeed(value: T) -> Parsec[T]:
    return Parsec(lambda state: (state, Ok(value)))
