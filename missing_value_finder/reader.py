import re
import sys
from collections import namedtuple

from missing_value_finder.errors import InputFormatError

Puzzle = namedtuple('Puzzle', 'n buffer')


def warn(msg):
    # stdout is only for the answer
    print("WARNING", msg, file=sys.stderr)


def to_int(token: str, position: int) -> int:
    # plain ascii digits only, int() would also take 1_0 or other scripts' digits
    if not re.fullmatch(r"[+-]?[0-9]+", token):
        raise InputFormatError(f"token {position} '{token}' is not an integer")

    return int(token)


def parse_puzzle(text: str) -> Puzzle:
    tokens = text.split()
    if not tokens:
        raise InputFormatError("no count given")

    n = to_int(tokens[0], 1)
    if n < 2:
        raise InputFormatError(f"count must be at least 2, got {n}")

    # only n - 2 of the values are ever read
    m = n - 2
    values = tokens[1:]
    if len(values) < m:
        raise InputFormatError(f"expected {m} values after the count, found {len(values)}")

    buffer = []
    for pos, token in enumerate(values[:m]):
        buffer.append(to_int(token, pos + 2))

    if len(values) > m:
        warn(f"Ignoring {len(values) - m} values past the first {m}")

    return Puzzle(n, tuple(buffer))


def load_file(filename: str) -> str:
    try:
        with open(filename, encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError:
        raise RuntimeError(f"{filename} does not exist")
    except UnicodeDecodeError:
        raise InputFormatError(f"{filename} is not a text file")
    except OSError as e:
        raise RuntimeError(f"Could not read {filename}: {e.strerror}")


def read_puzzle(filename: str = None) -> Puzzle:
    if filename:
        return parse_puzzle(load_file(filename))

    try:
        text = sys.stdin.read()
    except UnicodeDecodeError:
        raise InputFormatError("stdin is not text")

    return parse_puzzle(text)
