import itertools
import logging
from typing import Iterator, Set

import combipack.config as config
import combipack.exc as exc
from combipack.packer import NUM_CODES, Quadruple, decode, encode

log = logging.getLogger(__name__)


def iter_quadruples() -> Iterator[Quadruple]:
    """Yield every multiset of four values exactly once, each in descending order."""
    values = range(config.NUM_VALUES - 1, -1, -1)
    yield from itertools.combinations_with_replacement(values, config.NUM_ELEMENTS)  # type: ignore


def verify() -> int:
    """Exhaustively check that encoding is a bijection onto the valid codes, and that decoding inverts it.

    Returns the number of codes checked. Raises ``VerificationError`` on the first discrepancy.
    """
    log.info('Verifying all multisets of %s values in [0, %s) against %s codes.',
             config.NUM_ELEMENTS, config.NUM_VALUES, NUM_CODES)
    seen: Set[int] = set()
    for count, quadruple in enumerate(iter_quadruples(), 1):
        code = encode(quadruple)
        if not 0 <= code < NUM_CODES:
            raise exc.VerificationError(f'Quadruple {quadruple} was encoded to code {code} which is not in '
                                        f'[0, {NUM_CODES}).')
        if code in seen:
            raise exc.VerificationError(f'Quadruple {quadruple} was encoded to code {code} which was already used.')
        seen.add(code)
        decoded = decode(code)
        if decoded != quadruple:
            raise exc.VerificationError(f'Quadruple {quadruple} was encoded to code {code} which was then decoded to '
                                        f'a different quadruple {decoded}.')
        if count % config.VERIFY_LOG_INTERVAL == 0:
            log.info('Verified %s codes.', count)
    if len(seen) != NUM_CODES:
        raise exc.VerificationError(f'Only {len(seen)} of {NUM_CODES} codes were produced.')
    log.info('Verified %s codes.', len(seen))
    return len(seen)
