import combipack.config as config
import combipack.exc as exc


def multichoose(n: int, r: int) -> int:
    """Return the number of size-``r`` multisets drawable from ``n`` values, i.e. ``C(n + r - 1, r)``.

    ``n`` must be in ``[0, 32]`` and ``r`` in ``[1, 4]``. This is checked only when ``__debug__`` is true. Otherwise the
    result for an out-of-domain input is undefined.

    The two factorials cancel to ``n * (n + 1) * ... * (n + r - 1)``, which is then divided by ``r!``. Any ``k``
    consecutive integers include a multiple of ``k``, so each successive division is exact.
    """
    if __debug__:
        if not 1 <= r <= config.MAX_MULTISET_SIZE:
            raise exc.ChoiceCountDomainError(f'Multiset size {r} must be in [1, {config.MAX_MULTISET_SIZE}].')
        if not 0 <= n <= config.NUM_VALUES:
            raise exc.ChoiceCountDomainError(f'Alphabet size {n} must be in [0, {config.NUM_VALUES}].')

    if n == 0:
        return 0
    if n == 1:
        return 1
    if n == 2:
        return r + 1
    if n == 3:
        return ((r + 1) * (r + 2)) >> 1

    if r == 1:
        return n
    pairs = (n * (n + 1)) >> 1
    if r == 2:
        return pairs
    triples = (pairs * (n + 2)) // 3
    if r == 3:
        return triples
    return (triples * (n + 3)) >> 2
