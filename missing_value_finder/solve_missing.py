import argparse
import signal
import sys

from missing_value_finder.finder import STRATEGIES, ScanStats, choose_strategy, find_missing
from missing_value_finder.reader import read_puzzle

DEFAULT_STRATEGY = "auto"

verbose = False


def handler(_, __):
    sys.exit(1)


def trace(msg):
    if verbose:
        print(msg, file=sys.stderr)


def run(filename: str = None, strategy: str = DEFAULT_STRATEGY) -> int:
    puzzle = read_puzzle(filename)
    buffer = puzzle.buffer

    strategy = choose_strategy(buffer, strategy)
    trace(f"n={puzzle.n} m={len(buffer)} strategy={strategy}")

    stats = ScanStats()
    answer = find_missing(buffer, strategy, stats)
    trace(str(stats))

    return answer


def main(argv: list = None):
    # command line format:
    # solve_missing.py < numbers.txt
    # OR
    # solve_missing.py -f numbers.txt -s iterative -v
    parser = argparse.ArgumentParser()
    parser.add_argument('-f', help='read numbers from this file instead of stdin')
    parser.add_argument('-s', help='scan strategy', choices=STRATEGIES, default=DEFAULT_STRATEGY)
    parser.add_argument('-v', help='print scan statistics to stderr', action='store_true')
    args = parser.parse_args(argv)

    global verbose
    verbose = args.v

    signal.signal(signal.SIGINT, handler)

    try:
        answer = run(args.f, args.s)
    except RuntimeError as e:
        print("ERROR", str(e), file=sys.stderr)
        sys.exit(1)

    print(answer)


if __name__ == "__main__":
    main()
