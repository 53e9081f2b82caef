import sys
import logging
import argparse
from functools import partial
from argparse import RawTextHelpFormatter
from wordchain.chain import ChainBuilder, NaiveChainBuilder
from wordchain.data import read_tokens, format_result, write_result
from wordchain.benchmarks import benchmarks


# Cleaner help display
MyFormatter = partial(RawTextHelpFormatter, max_help_position=70, width=100)

# Available solvers
SOLVERS = {
    "ChainBuilder": ChainBuilder,
    "NaiveChainBuilder": NaiveChainBuilder
}

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

# Defines the CLI
def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="cli.py",
        description=(
            "Word Chain CLI\n\n"
            "Find the longest chain of words where each word starts with the letter the previous one ends with.\n"
        ),
        formatter_class=MyFormatter,
        epilog=(
            "Usage examples:\n\n"
            "Solving:\n"
            "  Solve a literal string:\n"
            "    python cli.py --input \"apple egg giraffe\"\n"
            "  Solve a text file and write the result:\n"
            "    python cli.py --input data/text3.in --output data/text3.out\n"
            "  Solve a .json list of sentences and save as .json:\n"
            "    python cli.py --input data/words.json --output data/chain.json\n\n"
            "Benchmarking:\n"
            "  Benchmark the one-pass builder:\n"
            "    python cli.py --input data/text3.in --benchmark\n"
            "  Compare it with the naive reference:\n"
            "    python cli.py --model ChainBuilder NaiveChainBuilder --input data/text3.in --benchmark --compare\n"
        )
    )

    # Selecting a solver
    parser.add_argument(
        "-m", "--model",
        choices=SOLVERS,
        nargs="+",
        metavar=("MODEL1", "MODEL2"),
        default=["ChainBuilder"],
        help=(
            "select primary solver and optional other solvers for comparison: "
            f"{', '.join(SOLVERS.keys())} (default: ChainBuilder)"
        )
    )

    # Input tokens
    parser.add_argument(
        "-i", "--input",
        type=str,
        metavar="INPUT",
        required=True,
        help="string of words, or path to a text file or a .json list of strings"
    )

    # Where to write the result
    parser.add_argument(
        "-o", "--output",
        type=str,
        metavar="PATH",
        help="write the result to PATH (.json for JSON output); printed to stdout otherwise"
    )

    # Benchmark solvers
    parser.add_argument(
        "-b", "--benchmark",
        action="store_true",
        help="benchmark the selected solver(s) on INPUT instead of printing the chain"
    )

    parser.add_argument(
        "-c", "--compare",
        action="store_true",
        help="with --benchmark, only compare the chains found by the selected solvers"
    )

    # Progress bar
    parser.add_argument(
        "--progress",
        action="store_true",
        help="show a progress bar while scanning tokens"
    )

    parser.add_argument(
        "--log_level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="logging level for diagnostics such as invalid tokens (default: WARNING)"
    )

    # Store the arguments so that we can use them
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr
    )

    if args.compare and not args.benchmark:
        parser.error("--compare may only be used with --benchmark")
    if args.compare and len(args.model) < 2:
        parser.error("--compare requires at least two solvers")


    # INSTANTIATE SOLVERS
    solver_instances = {name: SOLVERS[name](verbose=args.progress) for name in args.model}
    primary = next(iter(solver_instances.values()))


    # LOAD INPUT
    try:
        tokens = read_tokens(args.input, primary)
    except (FileNotFoundError, TypeError) as e:
        parser.error(str(e))


    # BENCHMARKING
    if args.benchmark:
        others = list(solver_instances.values())[1:]
        print(f"Benchmarking {' vs '.join(solver_instances.keys())} on {len(tokens)} tokens...")
        benchmarks(
            solver=primary,
            tokens=tokens,
            reference_solvers=others,
            compare_only=args.compare
        )
        return


    # SOLVING
    result = primary.build(tokens)

    if args.output:
        write_result(result, args.output)
        print(f"Chain of {len(result.chain)} word(s) written to {args.output}")
    else:
        print(format_result(result), end="")

# Runs the CLI
if __name__ == "__main__":
    main()
