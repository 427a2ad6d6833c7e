#!/usr/bin/env python3
"""
hostprep - bootstrap a fresh Linux workstation.

Detects the distro's package manager, then installs packages and tools,
switches to zsh with Oh My Zsh, and seeds dotfiles, in a fixed order.

Usage:
    ./hostprep.py               # Provision this machine
    ./hostprep.py --dry-run     # Print every command without running it
    ./hostprep.py -v            # Also show resolved settings
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

# Add provision to path
sys.path.insert(0, str(Path(__file__).parent))

from provision.context import ProvisionContext
from provision.distro import OS_RELEASE, UnsupportedDistribution, detect_pm
from provision.orchestrator import Provisioner
from provision.paths import UserPaths, get_config_path
from provision.runner import CommandRunner, Executor
from provision.settings import load_settings

BANNER = "HOSTPREP ENVIRONMENT SETUP"
DRY_RUN_FLAG = "--dry-run"


def build_parser() -> argparse.ArgumentParser:
    # No --help, no abbreviations, and no exit on malformed options: anything
    # that is not an exact flag is ignored
    parser = argparse.ArgumentParser(
        prog="hostprep",
        add_help=False,
        allow_abbrev=False,
        exit_on_error=False,
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse the command line.

    Dry-run is selected only by an exact --dry-run as the first argument.
    Unrecognized or malformed arguments are ignored.
    """
    argv = sys.argv[1:] if argv is None else list(argv)
    dry_run = bool(argv) and argv[0] == DRY_RUN_FLAG
    rest = argv[1:] if dry_run else argv

    try:
        args, _ = build_parser().parse_known_args(rest)
    except argparse.ArgumentError:
        args = argparse.Namespace(verbose=False)
    args.dry_run = dry_run
    return args


def main(
    argv: Optional[List[str]] = None,
    executor: Optional[Executor] = None,
    os_release: Path = OS_RELEASE,
    home: Optional[Path] = None,
) -> int:
    args = parse_args(argv)

    print(BANNER)
    print("Initializing the environment setup...")
    if args.dry_run:
        print("Running in dry run mode. No actual changes will be made.")

    try:
        config_path = get_config_path()
        settings = load_settings(config_path)
        pm = detect_pm(os_release)
    except (UnsupportedDistribution, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    runner = CommandRunner(
        dry_run=args.dry_run,
        verbose=args.verbose,
        executor=executor,
        settle_seconds=settings.settle_seconds,
    )
    runner.log_verbose(f"Config: {config_path}")

    ctx = ProvisionContext(pm=pm, runner=runner, settings=settings, paths=UserPaths(home))
    return Provisioner(ctx).run()


if __name__ == "__main__":
    sys.exit(main())
