"""
Slurm Expand - Print a machine file for the current SLURM job
"""
from .lib import (
    EnvironmentMissingError,
    FormatError,
    MismatchError,
    SlurmExpandError,
    expand,
    expand_nodelist,
    expand_tasks,
    format_machinefile,
)

__version__ = '0.1.0'
