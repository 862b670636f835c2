"""
Complexity of a code: its fewest presses times its numeric value.

The answer for a list of codes is the sum of their complexities. Codes are
independent of each other, so they are scored on a thread pool once the
shared cost ladder has been built.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Iterable, List, Optional

from . import config
from .costs import cost_ladder
from .errors import MalformedCodeError
from .sequencer import code_cost, validate_code

logger = logging.getLogger(__name__)


def parse_codes(text: str) -> List[str]:
    return [validate_code(line) for line in text.splitlines() if line.strip()]


def numeric_value(code: str) -> int:
    digits = validate_code(code)[:-1]
    if not digits:
        return 0
    if not digits.isdigit():
        raise MalformedCodeError("Code %r has a non-numeric part %r" % (code, digits))
    return int(digits)


def complexity(code: str, depth: int) -> int:
    return code_cost(code, depth) * numeric_value(code)


def sum_of_complexities(codes: Iterable[str], depth: int, workers: Optional[int] = None) -> int:
    codes = list(codes)
    if workers is None:
        workers = config.MAX_WORKERS

    # Workers only read the ladder
    cost_ladder(depth)

    total = 0
    if workers > 1 and len(codes) > 1:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [executor.submit(complexity, code, depth) for code in codes]
            for future in as_completed(futures):
                total += future.result()
    else:
        for code in codes:
            total += complexity(code, depth)

    logger.info("Sum of complexities for %d codes at depth %d: %d", len(codes), depth, total)
    return total
