"""
Errors raised while expanding SLURM node and task notations
"""
from typing import Sequence


class SlurmExpandError(Exception):
    """Base class for every failure reported by slurm-expand"""


class FormatError(SlurmExpandError, ValueError):
    """A node-list expression or task-count token could not be parsed"""

    def __init__(self, message: str, expression: str):
        super().__init__(message)
        self.expression = expression


class MismatchError(SlurmExpandError, ValueError):
    """Node list and task list expand to sequences of different length"""

    def __init__(self, num_nodes: int, num_tasks: int):
        super().__init__(
            f'mismatch between the number of nodes ({num_nodes}) and tasks ({num_tasks})')
        self.num_nodes = num_nodes
        self.num_tasks = num_tasks


class EnvironmentMissingError(SlurmExpandError, RuntimeError):
    """Required SLURM environment variables are not set"""

    def __init__(self, missing: Sequence[str]):
        self.missing = list(missing)
        super().__init__(f'missing environment variable(s): {", ".join(self.missing)}')
