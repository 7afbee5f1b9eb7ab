'''
Brute force search for a missing positive value.

Starting at index 0 with candidate 1, walk the buffer. Whenever the candidate
is found at the current position, restart a scan from the beginning with the
next candidate (a probe), but throw away whatever that probe returns.
When the walk reaches the end of the buffer, the current candidate is the answer.

Example: [1, 2]
Output: 1
'''
import sys

from missing_value_finder.errors import ScanError

STRATEGIES = ("auto", "recursive", "iterative")

# frames to leave free for the caller when deciding to recurse
RECURSION_HEADROOM = 100


class ScanStats:

    def __init__(self):
        self.calls = 0
        self.probes = 0
        self.max_depth = 0
        self._depth = 0

    def enter_probe(self):
        self.probes += 1
        self._depth += 1
        if self._depth > self.max_depth:
            self.max_depth = self._depth

    def leave_probe(self):
        self._depth -= 1

    @property
    def depth(self):
        return self._depth

    def __eq__(self, other):
        if not isinstance(other, ScanStats):
            return NotImplemented
        return (self.calls, self.probes, self.max_depth) == (other.calls, other.probes, other.max_depth)

    def __str__(self):
        return f"calls={self.calls} probes={self.probes} max_depth={self.max_depth}"


def check_index(buffer: tuple, index: int):
    # negative indexes would wrap around, past m the walk never ends
    if index < 0 or index > len(buffer):
        raise ScanError(f"Index {index} is outside 0..{len(buffer)}")


def scan(buffer: tuple, index: int, candidate: int, stats: ScanStats = None) -> int:
    check_index(buffer, index)

    if stats:
        stats.calls += 1

    m = len(buffer)

    # never look at buffer[m], there is nothing there
    if index < m and buffer[index] == candidate:
        if stats:
            stats.enter_probe()
        try:
            _ = scan(buffer, 0, candidate + 1, stats)
        finally:
            # no method call here, the stack may already be full
            if stats:
                stats._depth -= 1

    if index == m:
        return candidate

    return scan(buffer, index + 1, candidate, stats)


def scan_iterative(buffer: tuple, index: int = 0, candidate: int = 1, stats: ScanStats = None) -> int:
    check_index(buffer, index)
    m = len(buffer)

    # each frame is (index, candidate, probed)
    # moving to the next index is a tail call so it just replaces the frame,
    # only probes stack up
    stack = [(index, candidate, False)]

    while True:
        i, k, probed = stack.pop()

        if not probed:
            if stats:
                stats.calls += 1

            if i < m and buffer[i] == k:
                if stats:
                    stats.enter_probe()
                stack.append((i, k, True))
                stack.append((0, k + 1, False))
                continue

        if i == m:
            if not stack:
                return k

            # a probe finished, nobody wants its answer
            if stats:
                stats.leave_probe()
            continue

        stack.append((i + 1, k, False))


def probe_depth(buffer: tuple, candidate: int = 1) -> int:
    present = set(buffer)

    depth = 0
    while candidate + depth in present:
        depth += 1

    return depth


def stack_needed(buffer: tuple) -> int:
    # every probe level can walk the whole buffer before it returns
    return (len(buffer) + 1) * (probe_depth(buffer) + 1)


def choose_strategy(buffer: tuple, strategy: str = "auto") -> str:
    if strategy not in STRATEGIES:
        raise ValueError(f"Unknown strategy {strategy}, must be one of {', '.join(STRATEGIES)}")

    if strategy != "auto":
        return strategy

    if stack_needed(buffer) < sys.getrecursionlimit() - RECURSION_HEADROOM:
        return "recursive"

    return "iterative"


def find_missing(buffer: tuple, strategy: str = "auto", stats: ScanStats = None) -> int:
    strategy = choose_strategy(buffer, strategy)

    if strategy == "iterative":
        return scan_iterative(buffer, 0, 1, stats)

    try:
        return scan(buffer, 0, 1, stats)
    except RecursionError:
        raise ScanError(f"Ran out of stack scanning {len(buffer)} values, try the iterative strategy")

