"""Pack four 5-bit values into a single 16-bit code, and back.

The values are treated as a multiset: their order is not preserved. Each multiset of size 4 over ``[0, 32)`` is ranked
with the combinatorial number system, so the ``C(35, 4) = 52360`` possible multisets map one-to-one onto the codes
``[0, 52359]``.
"""

import logging
from typing import Sequence, Tuple

import combipack.config as config
import combipack.exc as exc
from combipack.util import multichoose

log = logging.getLogger(__name__)

Quadruple = Tuple[int, int, int, int]

NUM_CODES: int = multichoose(config.NUM_VALUES, config.NUM_ELEMENTS)  # One past the largest valid code.
assert NUM_CODES <= 1 << config.CODE_BITS


def _check_values(values: Sequence[int]) -> None:
    if len(values) != config.NUM_ELEMENTS:
        raise exc.QuadrupleSizeInvalid(f'Exactly {config.NUM_ELEMENTS} values must be provided, but '
                                       f'{len(values)} were provided.')
    for value in values:
        if not 0 <= value < config.NUM_VALUES:
            raise exc.ValueOutOfRange(f'Value {value} must be in [0, {config.NUM_VALUES}). '
                                      f'The provided values are {tuple(values)}.')


def _unchoose(remainder: int, r: int) -> Tuple[int, int]:
    # Largest digit whose choice count does not exceed the remainder, and the remainder less that choice count.
    digit = 0
    floor = 0
    step = config.NUM_VALUES >> 1
    while step:
        level = multichoose(digit + step, r)
        if remainder >= level:
            digit += step
            floor = level
        step >>= 1
    return digit, remainder - floor


def encode(values: Sequence[int]) -> int:
    """Return the code of the multiset of the four given values.

    The caller's sequence is not modified. Any permutation of the values returns the same code.
    """
    if __debug__:
        _check_values(values)
    v0, v1, v2, v3 = sorted(values, reverse=True)
    code = multichoose(v0, 4) + multichoose(v1, 3) + multichoose(v2, 2) + v3
    log.debug('Encoded %s to code %s.', values, code)
    return code


def decode(code: int) -> Quadruple:
    """Return the four values of the multiset having the given code, in descending order."""
    if __debug__:
        if not 0 <= code < NUM_CODES:
            raise exc.CodeOutOfRange(f'Code {code} must be in [0, {NUM_CODES}).')
    v0, remainder = _unchoose(code, 4)
    v1, remainder = _unchoose(remainder, 3)
    v2, v3 = _unchoose(remainder, 2)  # The last choice count is the identity.
    values: Quadruple = (v0, v1, v2, v3)
    log.debug('Decoded code %s to %s.', code, values)
    return values
