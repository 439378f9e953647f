#!/usr/bin/env python3
"""
Command line interface for slurm-expand

Reads SLURM_NODELIST and SLURM_TASKS_PER_NODE and prints a machine file:
one machine name per line, repeated once per task running on that machine.
"""
import os
import sys
import argparse
from typing import List, Mapping, Optional, Tuple

from slurm_expand.lib import EnvironmentMissingError, SlurmExpandError
from slurm_expand.lib import expand, expand_nodelist, expand_tasks, format_machinefile

NODELIST_ENV = 'SLURM_NODELIST'
TASKS_PER_NODE_ENV = 'SLURM_TASKS_PER_NODE'

# (function, arguments, expected result)
SELF_CHECK_CASES = [
    (expand_nodelist, ('node10',), ['node10']),
    (expand_nodelist, ('node[5-6]',), ['node5', 'node6']),
    (expand_nodelist, ('node[5-6]abc',), ['node5abc', 'node6abc']),
    (expand_tasks, ('2',), [2]),
    (expand_tasks, ('12(x3)',), [12, 12, 12]),
    (expand_tasks, ('12(x2),7(x3),4',), [12, 12, 7, 7, 7, 4]),
    (expand, ('node5', '2'), ['node5', 'node5']),
    (expand, ('node[5-6]', '2,1'), ['node5', 'node5', 'node6']),
    (expand, ('node[5-7]', '2(x2),1'), ['node5', 'node5', 'node6', 'node6', 'node7']),
]


def parse_args(argv: Optional[List[str]] = None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        prog='slurm-expand',
        description=f'Print a machine file built from {NODELIST_ENV} and {TASKS_PER_NODE_ENV}')
    parser.add_argument('--self-test', action='store_true',
                        help='Check the expansion rules against known examples and exit')
    return parser.parse_args(argv)


def read_slurm_environment(environ: Optional[Mapping[str, str]] = None) -> Tuple[str, str]:
    """
    Read the node list and tasks per node of the current SLURM job

    Args:
        environ: Mapping to read from (default: os.environ)

    Returns:
        Tuple of (SLURM_NODELIST, SLURM_TASKS_PER_NODE)

    Raises:
        EnvironmentMissingError: If any of the two variables is not set
    """
    if environ is None:
        environ = os.environ

    missing = [name for name in (NODELIST_ENV, TASKS_PER_NODE_ENV) if name not in environ]
    if missing:
        raise EnvironmentMissingError(missing)

    return environ[NODELIST_ENV], environ[TASKS_PER_NODE_ENV]


def self_check() -> List[str]:
    """
    Run the expansion rules against known examples

    Returns:
        List of failure descriptions (empty if every check passed)
    """
    failures = []
    for func, args, expected in SELF_CHECK_CASES:
        try:
            result = func(*args)
        except SlurmExpandError as e:
            failures.append(f'{func.__name__}{args!r} raised {e}')
            continue
        if result != expected:
            failures.append(f'{func.__name__}{args!r} returned {result!r}, expected {expected!r}')
    return failures


def main(argv: Optional[List[str]] = None):
    """Main entry point"""
    args = parse_args(argv)

    if args.self_test:
        failures = self_check()
        for failure in failures:
            print(f'Error: {failure}', file=sys.stderr)
        if failures:
            sys.exit(1)
        print('Self-test passed')
        sys.exit(0)

    try:
        nodelist_str, taskspernode_str = read_slurm_environment()
    except EnvironmentMissingError as e:
        print("Error: it does not seem I'm running within a SLURM job", file=sys.stderr)
        print(f'Missing: {", ".join(e.missing)}', file=sys.stderr)
        sys.exit(1)

    try:
        machines = expand(nodelist_str, taskspernode_str)
    except SlurmExpandError as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)

    # Single write so a failure never leaves a partial machine file
    sys.stdout.write(format_machinefile(machines))
    sys.stdout.flush()
    sys.exit(0)


if __name__ == '__main__':
    main()
