#!/usr/bin/env python3
"""
PDA Launcher
Derive addresses from the command line, run the web wrapper or the tests
"""

import sys
import json
import argparse
import logging
import subprocess
import os

from pda.config import DEFAULT_HOST, DEFAULT_PORT
from pda.derive import DerivationInput, derive_direct, derive_with_search
from pda.exceptions import PdaError


def parse_seeds(values, as_hex=False):
    """Turn command-line seed arguments into bytes"""
    seeds = []
    for value in values:
        if as_hex:
            try:
                seeds.append(bytes.fromhex(value))
            except ValueError:
                raise argparse.ArgumentTypeError(f"invalid hex seed: {value}")
        else:
            seeds.append(value.encode('utf-8'))
    return seeds


def cmd_derive(args):
    """Search mode: print address and bump"""
    seeds = parse_seeds(args.seeds, args.hex)
    result = derive_with_search(DerivationInput(args.program_id, seeds))
    print(json.dumps({'address': str(result.address), 'bump': result.bump}))


def cmd_create(args):
    """Direct mode: print address for seeds used as-is"""
    seeds = parse_seeds(args.seeds, args.hex)
    if args.bump is not None:
        seeds.append(bytes([args.bump]))
    address = derive_direct(DerivationInput(args.program_id, seeds))
    print(json.dumps({'address': str(address)}))


def cmd_web(args):
    """Run the HTTP wrapper"""
    from web_ui import run_server

    logging.basicConfig(level=logging.INFO)
    print("🌐 Starting PDA web server...")
    print(f"📮 POST JSON to http://{args.host}:{args.port}/")
    print("\nPress Ctrl+C to stop")
    run_server(host=args.host, port=args.port, debug=args.debug)


def cmd_test(args):
    """Run the test runner script"""
    runner = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'run_tests.py')
    if not os.path.exists(runner):
        print(f"❌ Missing test runner: {runner}")
        return 1
    return subprocess.run([sys.executable, runner]).returncode


def bump_value(value):
    bump = int(value)
    if not 0 <= bump <= 255:
        raise argparse.ArgumentTypeError("bump must be 0-255")
    return bump


def build_parser():
    parser = argparse.ArgumentParser(description='🔑 Program Derived Address Launcher')
    sub = parser.add_subparsers(dest='mode', required=True)

    derive = sub.add_parser('derive', help='Find address and bump seed (search mode)')
    derive.add_argument('program_id', help='Base58 program id')
    derive.add_argument('seeds', nargs='*', help='Seeds (UTF-8 text, or hex with --hex)')
    derive.add_argument('--hex', action='store_true', help='Treat seeds as hex bytes')
    derive.set_defaults(func=cmd_derive)

    create = sub.add_parser('create', help='Create address from seeds as-is (direct mode)')
    create.add_argument('program_id', help='Base58 program id')
    create.add_argument('seeds', nargs='*', help='Seeds (UTF-8 text, or hex with --hex)')
    create.add_argument('--hex', action='store_true', help='Treat seeds as hex bytes')
    create.add_argument('--bump', type=bump_value, help='Append this bump seed (0-255)')
    create.set_defaults(func=cmd_create)

    web = sub.add_parser('web', help='Run the HTTP wrapper')
    web.add_argument('--host', default=DEFAULT_HOST, help=f'Bind address (default: {DEFAULT_HOST})')
    web.add_argument('--port', type=int, default=DEFAULT_PORT, help=f'Port (default: {DEFAULT_PORT})')
    web.add_argument('--debug', action='store_true', help='Enable Flask debug mode')
    web.set_defaults(func=cmd_web)

    test = sub.add_parser('test', help='Run the test suite')
    test.set_defaults(func=cmd_test)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        status = args.func(args)
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))
    except PdaError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return status or 0


if __name__ == '__main__':
    sys.exit(main())
