"""
Machine File - Combine node names and task counts into one line per task
"""
from typing import List, Sequence

from .errors import MismatchError
from .nodelist import expand_nodelist
from .tasks import expand_tasks


def expand(nodelist_str: str, taskspernode_str: str) -> List[str]:
    """
    Produce the machine names matching SLURM_NODELIST and SLURM_TASKS_PER_NODE

    Each node name is repeated as many times as the tasks running on it.

    Args:
        nodelist_str: Value of SLURM_NODELIST
        taskspernode_str: Value of SLURM_TASKS_PER_NODE

    Returns:
        List of machine names, one per task

    Raises:
        FormatError: If either expression is malformed
        MismatchError: If the number of nodes and task counts differ
    """
    nodes = expand_nodelist(nodelist_str)
    tasks = expand_tasks(taskspernode_str)

    if len(nodes) != len(tasks):
        raise MismatchError(len(nodes), len(tasks))

    machines = []
    for node, num_tasks in zip(nodes, tasks):
        machines.extend([node] * num_tasks)
    return machines


def format_machinefile(machines: Sequence[str]) -> str:
    """Render machine names as a machine file, one newline-terminated line each"""
    return ''.join(f'{machine}\n' for machine in machines)
