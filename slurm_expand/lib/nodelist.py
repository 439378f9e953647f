"""
Node List Expander - Expand a SLURM node range into individual node names
"""
from typing import List

from .errors import FormatError


def _parse_bound(value: str, range_str: str, expr: str) -> int:
    # str.isdigit() accepts unicode digits that int() may reject
    if not (value.isascii() and value.isdigit()):
        raise FormatError(f'invalid range "{range_str}" (in string "{expr}")', expr)
    return int(value)


def expand_nodelist(expr: str) -> List[str]:
    """
    Expand a node list into a list of node names

    The node list is either a bare node name or a name holding exactly one
    numeric range, e.g. "node[5-7]abc" -> ["node5abc", "node6abc", "node7abc"].
    This is usually called with the value of SLURM_NODELIST.

    Args:
        expr: Node list expression

    Returns:
        List of node names, in ascending range order

    Raises:
        FormatError: If the brackets or the range are malformed
    """
    bk_open = expr.find('[')
    bk_close = expr.find(']')

    if bk_open < 0 and bk_close < 0:
        return [expr]

    if bk_open < 0 or bk_close < bk_open:
        raise FormatError(f'invalid string "{expr}"', expr)

    prefix = expr[:bk_open]
    range_str = expr[bk_open + 1:bk_close]
    suffix = expr[bk_close + 1:]

    # Only one range per expression
    if '[' in range_str or '[' in suffix or ']' in suffix:
        raise FormatError(f'multiple ranges are not supported in string "{expr}"', expr)

    if '-' not in range_str:
        raise FormatError(f'no range found in string "{expr}"', expr)

    lo_str, hi_str = range_str.split('-', 1)
    lo = _parse_bound(lo_str, range_str, expr)
    hi = _parse_bound(hi_str, range_str, expr)

    if lo > hi:
        raise FormatError(f'reversed range "{range_str}" (in string "{expr}")', expr)

    return [f'{prefix}{num}{suffix}' for num in range(lo, hi + 1)]
