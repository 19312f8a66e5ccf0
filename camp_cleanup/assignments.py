"""Each line of input is a pair of elves' section assignments, e.g. `2-4,6-8`, where each
assignment is an inclusive range of section IDs.

Part 1 counts the pairs where one assignment fully contains the other; part 2 counts the
pairs that overlap at all. Both predicates are made symmetric with `either_way`, so the order
in which a pair is written doesn't matter.

The whole input is parsed before anything is counted, so a single malformed line aborts the
run with a `ParseError` and no counts are reported.
"""
from functools import partial
from typing import IO, Callable, Iterable, List, NamedTuple

from .util import apply, compose, count_where, either_way, print_, set_verbose, strip_newline


class ParseError(ValueError):
    pass


class SectionAssignment(NamedTuple):
    from_: int
    to: int


class AssignmentPair(NamedTuple):
    first: SectionAssignment
    second: SectionAssignment


class Report(NamedTuple):
    needing_reconsideration: int
    with_any_overlap: int

    def __str__(self):
        return (
            f"Assignments needing reconsideration: {self.needing_reconsideration}\n"
            f"Assignments with any overlap: {self.with_any_overlap}"
        )


# Parsing


def parse_section_id(s: str) -> int:
    # int() alone would also accept signs, whitespace, underscores and non-ASCII digits
    if not (s.isascii() and s.isdigit()):
        raise ParseError(f"section ID {s!r} is not a non-negative integer")
    return int(s)


def parse_range(s: str) -> SectionAssignment:
    if "-" not in s:
        raise ParseError(f"range {s!r} has no '-' separator")
    from_, to = s.split("-", 1)
    try:
        return SectionAssignment(parse_section_id(from_), parse_section_id(to))
    except ParseError as e:
        raise ParseError(f"{e} in range {s!r}") from e


def parse_line(line: str) -> AssignmentPair:
    line = strip_newline(line)
    if "," not in line:
        raise ParseError(f"assignment pair {line!r} has no ',' separator")
    first, second = map(parse_range, line.split(",", 1))
    return AssignmentPair(first, second)


def parse_lines(lines: Iterable[str]) -> List[AssignmentPair]:
    pairs = []
    for lineno, line in enumerate(lines, 1):
        try:
            pairs.append(parse_line(line))
        except ParseError as e:
            raise ParseError(f"line {lineno}: {e}") from e
    return pairs


# Predicates


def fully_contains(range1: SectionAssignment, range2: SectionAssignment) -> bool:
    return range1.from_ <= range2.from_ and range1.to >= range2.to


def overlaps_with(range1: SectionAssignment, range2: SectionAssignment) -> bool:
    """True if `range1` covers the start or the end of `range2`"""
    return (range1.from_ <= range2.from_ and range1.to >= range2.from_) or (
        range1.from_ <= range2.to and range1.to >= range2.to
    )


needs_reconsideration = either_way(fully_contains)
has_any_overlap = either_way(overlaps_with)


# Aggregation


def report(pairs: List[AssignmentPair]) -> Report:
    return Report(
        count_where(needs_reconsideration, pairs),
        count_where(has_any_overlap, pairs),
    )


def format_range(range_: SectionAssignment) -> str:
    return f"{range_.from_}-{range_.to}"


format_pair: Callable[[AssignmentPair], str] = compose(partial(map, format_range), ",".join)


def run(input_: IO[str], verbose: bool = False) -> Report:
    set_verbose(verbose)
    pairs = parse_lines(input_)
    print_(len(pairs), "assignment pairs")
    if verbose:
        for label, predicate in [
            ("needing reconsideration", needs_reconsideration),
            ("with any overlap", has_any_overlap),
        ]:
            for pair in filter(partial(apply, predicate), pairs):
                print_(f"{label}: {format_pair(pair)}")
    return report(pairs)


test_input = """2-4,6-8
2-3,4-5
5-7,7-9
2-8,3-7
6-6,4-6
2-6,4-8
"""


def test():
    import io

    wide = SectionAssignment(1, 9)
    narrow = SectionAssignment(3, 5)
    touching = SectionAssignment(5, 6)
    apart = SectionAssignment(7, 8)
    # reversed: contained by `narrow` under the formulas, yet overlapping nothing
    reversed_ = SectionAssignment(6, 2)
    for range1, range2, contains, overlaps in [
        (wide, narrow, True, True),
        (narrow, wide, True, True),
        (narrow, touching, False, True),
        (touching, narrow, False, True),
        (narrow, apart, False, False),
        (narrow, reversed_, True, False),
        (reversed_, narrow, True, False),
    ]:
        assert needs_reconsideration(range1, range2) is contains, (range1, range2)
        assert has_any_overlap(range1, range2) is overlaps, (range1, range2)

    expected_pair = AssignmentPair(SectionAssignment(2, 4), SectionAssignment(6, 8))
    assert parse_line("2-4,6-8\n") == expected_pair
    actual = run(io.StringIO(test_input))
    assert actual == Report(2, 4), actual
