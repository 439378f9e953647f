"""
Task Count Expander - Expand SLURM_TASKS_PER_NODE into one count per node
"""
import re
from typing import List

from .errors import FormatError

# e.g. "12(x3)": 12 tasks on each of the next 3 nodes
REPEAT_PATTERN = re.compile(r'(\d+)\(x(\d+)\)', re.ASCII)
COUNT_PATTERN = re.compile(r'\d+', re.ASCII)


def expand_tasks(expr: str) -> List[int]:
    """
    Expand a task-count expression into a list of integers

    Args:
        expr: Comma-separated list of "N" or "N(xR)" tokens

    Returns:
        List with one task count per node

    Raises:
        FormatError: If a token is neither "N" nor "N(xR)"
    """
    result = []
    for token in expr.split(','):
        match = REPEAT_PATTERN.fullmatch(token)
        if match:
            tasks = int(match.group(1))
            repeat = int(match.group(2))
            result.extend([tasks] * repeat)
        elif COUNT_PATTERN.fullmatch(token):
            result.append(int(token))
        else:
            raise FormatError(f'invalid task count "{token}" (in string "{expr}")', token)
    return result
