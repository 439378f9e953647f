"""
Slurm Expand Library - Node list, task count and machine file expansion
"""
from .errors import EnvironmentMissingError, FormatError, MismatchError, SlurmExpandError
from .machinefile import expand, format_machinefile
from .nodelist import expand_nodelist
from .tasks import expand_tasks

__all__ = [
    'expand', 'expand_nodelist', 'expand_tasks', 'format_machinefile',
    'SlurmExpandError', 'FormatError', 'MismatchError', 'EnvironmentMissingError',
]
