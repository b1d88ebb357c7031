# Core
from .Parsec import Parsec, State, ParsingError, Expecting, ParseError, Ok, Err, Result
from .Prim import (
    run, run_parser, parse, pure, of, fail, any_char, end,
    and_then, try_parse, one_of, lazy
)

# Characters
from .Char import char, satisfy, string

# Combinators
from .Combinators import (
    fmap, map_to, discard, many, many1, sep_by, sep_by1,
    label, trace
)

# String primitives
from .Text import char_at, to_chars, from_char
