"""Runs the lambda calculus interpreter on a file or in command-line mode. Also uses the error handling context
manager. Called from the lcinterp console script.
"""

import argparse
import sys

from lcinterp.lang.error import ErrorHandler
from lcinterp.lang.session import Session
from lcinterp.lang.shell import Shell


def main():
    """Runs the interpreter. Called from the lcinterp console script."""
    assert sys.version_info >= (3, 8), "lcinterp cannot be run with python < 3.8"

    with ErrorHandler() as error_handler:
        parser = argparse.ArgumentParser(prog="lcinterp", description="Untyped lambda calculus interpreter.")
        parser.add_argument("file", help="file to interpret and run (if empty, goes to command-line mode)", nargs="?")
        parser.add_argument("--max-steps", type=int, default=Session.MAX_STEPS,
                            help="beta contractions allowed per expression, 0 for no limit (default: %(default)s)")
        parser.add_argument("--trace", action="store_true", help="print every beta contraction")
        args = parser.parse_args()

        error_handler.verbose = args.trace
        max_steps = args.max_steps if args.max_steps > 0 else None

        if args.file is not None:
            Session(error_handler, args.file, cmd_line=False, max_steps=max_steps).run()
        else:
            Shell(Session(error_handler, max_steps=max_steps)).cmdloop()


if __name__ == "__main__":
    main()
