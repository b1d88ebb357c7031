"""
Parses nested integer lists such as ``[1, [2, 3], []]`` into Python lists.

    python examples/nested_lists.py "[1, [2, 3], []]" -v
"""
import logging
import sys

from miniparsec import (
    ParseError, char, end, lazy, many, many1, one_of, parse, satisfy, sep_by, trace,
)

spaces = many(char(" "))


def lexeme(p):
    return p < spaces


number = lexeme(many1(satisfy(str.isdigit))).map(lambda ds: int("".join(ds)))
comma = lexeme(char(","))


def value():
    return one_of([number, list_value()])


def list_value():
    items = sep_by(lazy(value), comma)
    return trace("list", (lexeme(char("[")) > items) < lexeme(char("]")))


document = (spaces > lazy(value)) < end


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG if "-v" in sys.argv else logging.WARNING)
    args = [a for a in sys.argv[1:] if a != "-v"]
    text = args[0] if args else "[1, [2, 3], []]"
    try:
        print(parse(document, text))
    except ParseError as e:
        print("Parsing Failed:", e)
        sys.exit(1)
