from miniparsec.Char import char, satisfy
from miniparsec.Combinators import many, sep_by
from miniparsec.Prim import run


class TimeMany:
    def setup(self):
        self.parser = many(char("a"))
        self.small = "a" * 1000
        self.medium = "a" * 10000
        self.large = "a" * 100000

    def time_many_small(self):
        run(self.parser, self.small)

    def time_many_medium(self):
        run(self.parser, self.medium)

    def time_many_large(self):
        run(self.parser, self.large)


class TimeSepBy:
    def setup(self):
        self.parser = sep_by(satisfy(str.isdigit), char(","))
        self.medium = ",".join("1" * 10000)

    def time_sep_by_medium(self):
        run(self.parser, self.medium)
