#!/usr/bin/env python3
"""Run ruff (format + lint) and mypy over the doclinks sources."""

import argparse
import subprocess
import sys
from pathlib import Path

from rich.console import Console

console = Console()


def run_command(command: list[str], description: str) -> bool:
    console.print(f"[bold blue]Running {description}...[/bold blue]")

    # Prefer tools installed next to the running interpreter
    tool_path = Path(sys.executable).parent / command[0]
    if tool_path.exists():
        command = [str(tool_path), *command[1:]]

    try:
        result = subprocess.run(command, check=False, capture_output=True, text=True)
    except OSError as e:
        console.print(f"[bold red]Error running {description}: {e}[/bold red]")
        return False

    if result.returncode != 0:
        console.print(f"[bold red]FAILED: {description}[/bold red]")
        console.print(result.stdout)
        console.print(result.stderr)
        return False
    console.print(f"[bold green]PASSED: {description}[/bold green]")
    return True


def main() -> int:
    parser = argparse.ArgumentParser(description="Run formatting, linting and type checks")
    parser.add_argument("--fix", action="store_true", help="Auto-fix issues where possible")
    parser.add_argument("files", nargs="*", help="Files to check (default: doclinks tests scripts)")
    args = parser.parse_args()

    targets = args.files or ["doclinks", "tests", "scripts"]

    if args.fix:
        checks = [
            (["ruff", "format", *targets], "Ruff Formatting (Fix)"),
            (["ruff", "check", "--fix", *targets], "Ruff Linting (Fix)"),
        ]
    else:
        checks = [
            (["ruff", "format", "--check", *targets], "Ruff Formatting (Check)"),
            (["ruff", "check", *targets], "Ruff Linting (Check)"),
        ]
    checks.append((["mypy", "doclinks"], "Mypy Type Check"))

    results = [run_command(command, description) for command, description in checks]
    return 0 if all(results) else 1


if __name__ == "__main__":
    sys.exit(main())
