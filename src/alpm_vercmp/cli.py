"""
alpm-vercmp command line

Usage:
    alpm-vercmp compare 1.0-1 1.0-2
    alpm-vercmp parse 1:2.3-4
    alpm-vercmp updates state.yaml [--json]
"""

import argparse
import json
import logging
import sys
from pathlib import Path

import yaml

from .evr import parse_evr
from .updates import UpdateCalculator
from .vercmp import vercmp

logger = logging.getLogger(__name__)

NONE_MARKER = "(none)"


def load_state(state_path: Path) -> dict:
    """
    Load and validate an updates state file.

    The file is YAML with two mappings: ``installed`` (package name to
    version) and ``repos`` (repository name to a mapping of package name to
    version, in search order).
    """
    if not state_path.exists():
        raise FileNotFoundError(f"State file not found: {state_path}")

    with open(state_path, 'r') as f:
        # BaseLoader keeps scalars as text, so 1.10 and 1:20 stay versions
        state = yaml.load(f, Loader=yaml.BaseLoader) or {}

    if not isinstance(state, dict):
        raise ValueError(f"State file must contain a mapping: {state_path}")

    installed = state.get('installed') or {}
    repos = state.get('repos') or {}
    if not isinstance(installed, dict):
        raise ValueError("'installed' must map package names to versions")
    if not isinstance(repos, dict) or not all(not p or isinstance(p, dict) for p in repos.values()):
        raise ValueError("'repos' must map repository names to package mappings")

    return {
        'installed': installed,
        'repos': {repo: packages or {} for repo, packages in repos.items()},
    }


def cmd_compare(args) -> int:
    print(vercmp(args.a, args.b))
    return 0


def cmd_parse(args) -> int:
    evr = parse_evr(args.version)
    print(f"epoch: {evr.epoch if evr.epoch is not None else NONE_MARKER}")
    print(f"version: {evr.version}")
    print(f"release: {evr.release if evr.release is not None else NONE_MARKER}")
    return 0


def cmd_updates(args) -> int:
    state = load_state(Path(args.state))
    logger.debug(f"Loaded {len(state['installed'])} installed packages, repos: {list(state['repos'])}")

    calculator = UpdateCalculator(state['repos'])
    result = calculator.compute_updates(state['installed'])

    if args.json:
        output = result.to_dict()
        output["summary"] = calculator.generate_summary(result)
        print(json.dumps(output, indent=2))
    else:
        for update in result.updates:
            print(update)
        for error in result.errors:
            print(f"Warning: {error}", file=sys.stderr)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='alpm-vercmp',
        description='Compare pacman package versions',
    )
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command', required=True)

    compare = subparsers.add_parser('compare', help='Compare two versions (prints -1, 0 or 1)')
    compare.add_argument('a', help='First version')
    compare.add_argument('b', help='Second version')
    compare.set_defaults(func=cmd_compare)

    parse = subparsers.add_parser('parse', help='Split a version into epoch, version and release')
    parse.add_argument('version', help='Version string')
    parse.set_defaults(func=cmd_parse)

    updates = subparsers.add_parser('updates', help='List updates from a YAML state file')
    updates.add_argument('state', help='Path to state YAML')
    updates.add_argument('--json', action='store_true',
                         help='Print the full result and a summary as JSON')
    updates.set_defaults(func=cmd_updates)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    try:
        return args.func(args)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except yaml.YAMLError as e:
        print(f"YAML Error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
