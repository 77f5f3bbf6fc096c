#!/usr/bin/env python3
"""
makefile.py - Task runner for the warehouse index project.

Usage:
    python makefile.py <target>

Requires: pip install -e ".[dev]"   (pytest, colorama)
"""

import shutil
import subprocess
import sys
from pathlib import Path

from colorama import Fore, Style
from colorama import init as _colorama_init

_colorama_init(autoreset=True)

PROJECT_ROOT = Path(__file__).parent.absolute()


def print_header(title):
    bar = Fore.CYAN + Style.BRIGHT + "=" * 52 + Style.RESET_ALL
    label = Fore.CYAN + Style.BRIGHT + f"  {title}" + Style.RESET_ALL
    print(f"\n{bar}\n{label}\n{bar}")


def print_step(msg):
    print(f"{Fore.YELLOW}-->{Style.RESET_ALL} {msg}")


def print_success(msg):
    print(f"{Fore.GREEN}[OK]{Style.RESET_ALL} {msg}")


def print_warn(msg):
    print(f"{Fore.YELLOW}[WARN]{Style.RESET_ALL} {msg}")


def run_cmd(args, allow_failure=False):
    """
    Run a command as a subprocess, streaming output directly to the terminal.
    Exits with the subprocess exit code on failure unless allow_failure=True.
    """
    try:
        result = subprocess.run(args, cwd=PROJECT_ROOT)
    except FileNotFoundError:
        print(f"{Fore.RED}[ERROR]{Style.RESET_ALL} Command not found: '{args[0]}'")
        print(f"        Ensure '{args[0]}' is installed and on your PATH.")
        if not allow_failure:
            sys.exit(127)
        return 127
    if result.returncode != 0 and not allow_failure:
        sys.exit(result.returncode)
    return result.returncode


def target_test():
    print_header("Running All Tests")
    run_cmd([sys.executable, "-m", "pytest", "tests", "-v"])


def target_test_sector():
    print_header("Running Sector Tests")
    run_cmd([sys.executable, "-m", "pytest", "tests/test_sector", "-v"])


def target_test_warehouse():
    print_header("Running Warehouse Tests")
    run_cmd([sys.executable, "-m", "pytest", "tests/test_warehouse", "-v"])


def target_example():
    print_header("Running Warehouse Example")
    run_cmd([sys.executable, "examples/warehouse_example.py"])


def target_install():
    print_header("Installing Project (editable, with dev extras)")
    run_cmd([sys.executable, "-m", "pip", "install", "-e", ".[dev]"])
    print_success("Installation complete!")


def target_clean():
    print_header("Cleaning Caches")
    patterns = ["**/__pycache__", ".pytest_cache", "*.egg-info"]
    for pattern in patterns:
        for path in PROJECT_ROOT.glob(pattern):
            try:
                shutil.rmtree(path)
                print_step(f"Removed {path.relative_to(PROJECT_ROOT)}")
            except OSError as exc:
                print_warn(f"Could not remove {path}: {exc}")
    print_success("Clean complete")


def target_check():
    print_header("Full Check: tests + example")
    target_test()
    target_example()


TARGETS = {
    "test": (target_test, "Run all tests", "Testing"),
    "test-sector": (target_test_sector, "Run sector heap tests only", "Testing"),
    "test-warehouse": (target_test_warehouse, "Run warehouse policy tests only", "Testing"),
    "example": (target_example, "Run the warehouse walkthrough", "Run"),
    "check": (target_check, "tests + example", "Run"),
    "install": (target_install, "pip install -e .[dev]", "Tools"),
    "clean": (target_clean, "Remove caches and build metadata", "Tools"),
    "help": (None, "Show this help message", "Meta"),
}


def target_help():
    from collections import defaultdict

    title = (
        Fore.CYAN
        + Style.BRIGHT
        + "Warehouse Index - Available Commands"
        + Style.RESET_ALL
    )
    print(f"\n{title}\n")
    groups = defaultdict(list)
    for name, (_, desc, group) in TARGETS.items():
        groups[group].append((name, desc))
    group_order = ["Testing", "Run", "Tools", "Meta"]
    for group in group_order:
        if group not in groups:
            continue
        header = Fore.YELLOW + Style.BRIGHT + f"{group}:" + Style.RESET_ALL
        print(header)
        for name, desc in groups[group]:
            padded = name.ljust(24)
            print(f"  {Fore.GREEN}{padded}{Style.RESET_ALL}  {desc}")
        print()


TARGETS["help"] = (target_help, "Show this help message", "Meta")


def main():
    if len(sys.argv) < 2:
        target_help()
        sys.exit(0)

    name = sys.argv[1]

    if name not in TARGETS:
        print(f"{Fore.RED}[ERROR]{Style.RESET_ALL} Unknown target: '{name}'")
        print("  Run:  python makefile.py help  to list all available targets.")
        sys.exit(1)

    func, _, _ = TARGETS[name]
    func()


if __name__ == "__main__":
    main()
