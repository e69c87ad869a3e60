import itertools
import math
import timeit
from typing import Callable, Dict, Tuple

from combipack import multichoose

_ONE_THIRD_Q16 = 0x5556
_DOMAIN = list(itertools.product(range(33), range(1, 5)))
_TABLE: Dict[Tuple[int, int], int] = {(n, r): multichoose(n, r) for n, r in _DOMAIN}
# Note: The table has 132 entries.


def _div3_fixed_point(i: int) -> int:
    return (i * _ONE_THIRD_Q16) >> 16


def compare_div3() -> None:
    """Confirm that the fixed-point reciprocal agrees with exact division over every dividend multichoose produces."""
    dividends = [((n * (n + 1)) >> 1) * (n + 2) for n in range(4, 33)]
    for dividend in dividends:
        assert dividend % 3 == 0
        assert _div3_fixed_point(dividend) == dividend // 3, dividend
    print(f'div3: fixed-point reciprocal agrees with // 3 on all {len(dividends)} dividends.')

    for name, func in (('floordiv', lambda: [d // 3 for d in dividends]),
                       ('fixed_point', lambda: [_div3_fixed_point(d) for d in dividends])):
        seconds = min(timeit.repeat(func, number=10_000, repeat=5))
        print(f'div3: {name}: best_time={seconds:.4f}s')


def compare_choice_counts(strategies: Dict[str, Callable[[int, int], int]]) -> Dict[str, float]:
    stats = {}
    for name, func in strategies.items():
        assert all(func(n, r) == _TABLE[(n, r)] for n, r in _DOMAIN), name
        seconds = min(timeit.repeat(lambda: [func(n, r) for n, r in _DOMAIN], number=1_000, repeat=5))
        stats[name] = seconds
        print(f'multichoose: {name}: best_time={seconds:.4f}s')
    return stats


if __name__ == '__main__':
    compare_div3()
    compare_choice_counts({
        'arithmetic': multichoose,
        'table': lambda n, r: _TABLE[(n, r)],
        'math_comb': lambda n, r: math.comb(n + r - 1, r),
    })
