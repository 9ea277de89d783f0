"""Utility functions for integration tests."""

import os
import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent.parent


def get_cli_with_starting_args() -> list[str]:
    """Get the command that starts the changelog-manager CLI with the current interpreter."""
    return [sys.executable, "-m", "changelog_manager.configuration.cli"]


def run_cli(args: list[str], input_text: str | None = None, env: dict[str, str] | None = None) -> subprocess.CompletedProcess[str]:
    """Helper to run the CLI as a subprocess and capture output.

    Args:
        args: List of command line arguments to pass to the CLI.
        input_text: Text fed to the CLI on standard input, for interactive prompts.
        env: Extra environment variables for the CLI process.

    Returns:
        subprocess.CompletedProcess: The result of running the CLI command.
    """
    complete_command = get_cli_with_starting_args() + args
    process_env = {**os.environ, **(env or {})}
    process_env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(PROJECT_ROOT), process_env.get("PYTHONPATH")]))
    process_env["PYTHONIOENCODING"] = "utf-8"
    print(f"Running command: {' '.join(complete_command)}")
    result = subprocess.run(
        complete_command,
        capture_output=True,
        text=True,
        encoding="utf-8",
        input=input_text,
        env=process_env,
    )
    print(f"Command result: {result.returncode}")
    print(f"Command stdout: {result.stdout}")
    print(f"Command stderr: {result.stderr}")
    return result
