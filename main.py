#! /usr/bin/env python
import sys
from inspect import signature
from time import perf_counter_ns

from bourbaki.application.cli import CommandLineInterface, cli_spec  # type: ignore

from camp_cleanup import assignments
from camp_cleanup.assignments import Report


def print_report(report: Report):
    print(report)


cli = CommandLineInterface(
    prog="camp-cleanup",
    require_options=False,
    require_subcommand=True,
    implicit_flags=True,
)


@cli.definition
class CampCleanup:
    """Count elf section assignment pairs that fully contain or overlap each other"""

    @cli_spec.output_handler(print_report)
    def run(self, *, verbose: bool = False):
        """Read assignment pairs like `2-4,6-8` from stdin, one per line, and print how many
        pairs need reconsideration (one range fully contains the other) and how many overlap
        at all. A malformed line aborts the run without printing any counts.

        :param verbose: print the number of parsed pairs and every matching pair to stderr
        """
        print("Counting assignment pairs...", file=sys.stderr)
        tic = perf_counter_ns()
        report = assignments.run(sys.stdin, verbose=verbose)
        toc = perf_counter_ns()
        print(f"Ran in {(toc - tic) / 1000000} ms", file=sys.stderr)
        return report

    def test(self):
        """Run the self-test embedded in the solution module"""
        assignments.test()
        print("Tests pass!")

    def info(self):
        """Print the doc string for the solution, providing some details about methodology"""
        print("Problem info:")
        if assignments.__doc__:
            print(assignments.__doc__, end="\n\n")
        print("Signature:")
        print(signature(assignments.run))


if __name__ == "__main__":
    cli.run()
