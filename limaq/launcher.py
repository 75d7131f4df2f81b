# coding: UTF-8

import argparse
import asyncio
import getpass
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from coloredlogs import ColoredFormatter

from .actions import print_status, prune, run
from .configs.containers import LimaqConfig, ResourceProfile
from .configs.parsers import LimaqParser
from .exceptions import CGroupUnavailableError, InvalidProfileError, TargetFailedError
from .registry import CGroupRegistry
from .utils import host
from .utils.asyncio_subprocess import Executor

MIN_PYTHON = (3, 7)

CONFIG_ENV = 'LIMAQ_CONFIG'


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='limaq',
                                     description='Run a program with limited CPU, memory and block I/O using cgroups.')
    parser.add_argument('--cpu', type=float, default=None,
                        help='#cores of CPU you want to use (default: all physical cores)')
    parser.add_argument('--mem', type=float, default=None,
                        help='Memory size in MB you want to use (default: all physical memory)')
    parser.add_argument('--io', type=int, default=None,
                        help='Relative weight of block I/O access from 100 to 1000 (default: 1000)')
    parser.add_argument('-v', '--verbose', action='store_true', help='Verbose mode')
    parser.add_argument('--stat', action='store_true', help='Show status')
    parser.add_argument('--prune', action='store_true', help='Remove inactive cgroups')
    parser.add_argument('--config', type=Path, default=None,
                        help=f'JSON file overriding the default configuration (env: {CONFIG_ENV})')
    parser.add_argument('command', nargs=argparse.REMAINDER, help='Program to run and its arguments')
    return parser


def _setup_logger(verbose: bool) -> logging.Logger:
    logger = logging.getLogger('limaq')

    for handler in tuple(logger.handlers):
        logger.removeHandler(handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(ColoredFormatter('%(asctime)s.%(msecs)03d [%(levelname)-8s] $ %(message)s'))
    logger.addHandler(stream_handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    return logger


def _print_guidance(config: LimaqConfig) -> None:
    user = getpass.getuser()
    print(f'cgroups is not available. Maybe you should run:\n\n'
          f'\t# cgcreate -a {user} -t {user} -g {config.controller_list}:{config.namespace}\n\n'
          f'to create the parent cgroup.', file=sys.stderr)


def _target_command(command: Sequence[str]) -> List[str]:
    command = list(command)
    if command and command[0] == '--':
        command = command[1:]
    return command


async def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logger = _setup_logger(args.verbose)

    config_path: Optional[Path] = args.config
    if config_path is None and os.environ.get(CONFIG_ENV):
        config_path = Path(os.environ[CONFIG_ENV])

    try:
        config = LimaqParser(config_path).parse()
    except (FileNotFoundError, ValueError) as e:
        print(f'Invalid configuration: {e}', file=sys.stderr)
        return 1

    registry = CGroupRegistry(config, Executor(logger.getChild('exec')))

    try:
        await registry.ensure_available()
    except CGroupUnavailableError as e:
        logger.debug(str(e))
        _print_guidance(config)
        return 1

    if args.stat:
        await print_status(registry)
        return 0

    if args.prune:
        await prune(registry)
        return 0

    command = _target_command(args.command)
    if not command:
        print('Give me a program', file=sys.stderr)
        return 1

    io_weight: int = config.default_io_weight if args.io is None else args.io

    try:
        profile = ResourceProfile(
                host.total_cores() if args.cpu is None else args.cpu,
                host.total_memory_mb() if args.mem is None else args.mem,
                io_weight
        )
    except InvalidProfileError as e:
        print(e, file=sys.stderr)
        return 1

    logger.debug(f'CPU:\t{profile.cpu:f} cores')
    logger.debug(f'Memory:\t{profile.memory_mb:f} MB')
    if config.has_controller('blkio'):
        logger.debug(f'I/O Weight:\t{profile.io_weight}')

    try:
        await run(registry, profile, command)
    except TargetFailedError as e:
        logger.error(str(e))
        # negative return code means the program was killed by a signal
        return e.returncode if e.returncode > 0 else 128 - e.returncode

    return 0


def run_main() -> None:
    if sys.version_info < MIN_PYTHON:
        sys.exit('Python {}.{} or later is required.\n'.format(*MIN_PYTHON))

    sys.exit(asyncio.run(main()))


if __name__ == '__main__':
    run_main()
