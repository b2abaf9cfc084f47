#!/usr/bin/env python3
"""
targetprops command line interface

Resolves a target given as separate triple pieces and prints it as YAML
"""

import argparse
import logging
import sys
from typing import List, Optional

import yaml

from . import __version__
from .common.config import UNKNOWN_FEATURE_POLICIES, get_config, init_config
from .exceptions import TargetPropsError
from .resolver.assemble import resolve
from .triple import ARCH_IDS, EnvId, ObjectFormat, OsId, Triple

logger = logging.getLogger(__name__)


def parse_triple(arch: str, os: str, env: Optional[str] = None, objfmt: Optional[str] = None) -> Triple:
    '''Build a Triple from piece names, raising KeyError for unknown names'''
    arch_id = ARCH_IDS.get(arch.strip().lower())
    if arch_id is None:
        raise KeyError(f'unknown architecture {arch!r}')

    return Triple(
        arch = arch_id,
        os = OsId.from_name(os),
        env = None if env is None else EnvId.from_name(env),
        objfmt = None if objfmt is None else ObjectFormat.from_name(objfmt),
    )


def resolve_command(args) -> int:
    '''Resolve one triple and dump it'''
    triple = parse_triple(args.arch, args.os, args.env, args.objfmt)
    logger.debug('Resolving %s', triple)
    target = resolve(triple)

    machine = args.machine
    document = {
        'target': target.summary(),
        'machine': machine or target.arch.default_machine.name,
        'features': sorted(target.enabled_features(machine)),
        'properties': target.resolved_properties(machine),
    }

    sys.stdout.write(yaml.safe_dump(document, sort_keys = False, default_flow_style = False))
    return 0


def list_command(args) -> int:
    '''List the names accepted by `resolve`'''
    document = {
        'arch': sorted(ARCH_IDS),
        'os': [m.value for m in OsId],
        'env': [m.value for m in EnvId],
        'objfmt': [m.value for m in ObjectFormat],
    }

    sys.stdout.write(yaml.safe_dump(document, sort_keys = False, default_flow_style = False))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog = 'targetprops',
        description = 'Resolve compilation target properties'
    )

    parser.add_argument('--version', action = 'version', version = f'%(prog)s {__version__}')
    parser.add_argument('--config', help = 'Path to JSON5 config file')
    parser.add_argument('--unknown-features', choices = UNKNOWN_FEATURE_POLICIES,
                        help = 'What to do with feature names missing from the vocabulary')
    parser.add_argument('--log-level', help = 'Logging level name')

    subparsers = parser.add_subparsers(dest = 'command')

    resolve_parser = subparsers.add_parser('resolve', help = 'Resolve a target')
    resolve_parser.add_argument('--arch', required = True, help = 'Architecture name, e.g. x86_64')
    resolve_parser.add_argument('--os', required = True, help = 'Operating system name, e.g. linux')
    resolve_parser.add_argument('--env', help = 'Environment name, e.g. gnu')
    resolve_parser.add_argument('--objfmt', help = 'Object format name, e.g. elf')
    resolve_parser.add_argument('--machine', help = 'Machine (-march) to compute features for')
    resolve_parser.set_defaults(func = resolve_command)

    list_parser = subparsers.add_parser('list', help = 'List known triple piece names')
    list_parser.set_defaults(func = list_command)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    '''Main entry point'''
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)

    init_config(argv)
    logging.basicConfig(
        level = get_config().log_level,
        format = '%(levelname)s %(name)s: %(message)s',
    )

    if args.command is None:
        parser.print_help()
        return 0

    try:
        return args.func(args)

    except (TargetPropsError, KeyError, ValueError) as e:
        message = e.args[0] if isinstance(e, KeyError) and e.args else e
        print(f'error: {message}', file = sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
