# tests/test_consumption.py
from miniparsec.Char import char
from miniparsec.Parsec import Err, Expecting, Ok, State
from miniparsec.Prim import one_of, run, try_parse


def test_choice_commits_on_consumption():
    """
    (char('a') >> char('b')) | char('a')
    Input: 'ac'

    1. First parser matches 'a' (consumes).
    2. Then fails on 'c' (expected 'b').
    3. Because it consumed, | should NOT try the second option.
    """
    parser = (char("a") >> char("b")) | char("a")

    new_state, result = parser(State(0, "ac"))

    assert new_state.position == 2
    assert isinstance(result, Err)
    # The error should be about expecting 'b', not about the second branch
    assert result.error == Expecting("the char `b`")


def test_try_reverts_consumption():
    """
    try(char('a') >> char('b')) | char('a')
    Input: 'ac'

    1. First parser matches 'a', fails on 'c'.
    2. try rewinds to the start.
    3. | sees a failure that consumed nothing, tries second branch.
    4. Second branch matches 'a'; rest is "c".
    """
    parser = try_parse(char("a") >> char("b")) | char("a").map(lambda _: "second")

    new_state, result = parser(State(0, "ac"))

    assert result == Ok("second")
    assert new_state.position == 1


def test_try_falls_through_long_prefix():
    first = try_parse(char("a") >> char("b") >> char("z")).map(lambda _: "first")
    second = char("a").map(lambda _: "second")
    assert run(one_of([first, second]), "abcd") == Ok("second")


def test_without_try_long_prefix_poisons():
    first = char("a") >> char("b") >> char("z")
    assert run(one_of([first, char("a")]), "abcd") == Err(Expecting("the char `z`"))


def test_try_failure_leaves_no_residue():
    p = try_parse(char("a") >> char("b") >> char("z"))
    new_state, result = p(State(0, "abcd"))
    assert isinstance(result, Err)
    assert new_state.position == 0
