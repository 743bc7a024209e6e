"""Development script to run checks (formatting, linting, tests) and the generator."""

import argparse
import subprocess
import sys


def run_command(command: list[str], step_name: str) -> None:
    """Run a shell command as a step in the development process."""
    print(f"\n--- Running Step: {step_name} ---")
    print(f"$ {' '.join(command)}")
    try:
        subprocess.run(command, check=True)
    except subprocess.CalledProcessError:
        print(f"\n❌ Failed: {step_name}")
        sys.exit(1)


def main() -> None:
    """Run the development checks and then regenerate the docs."""
    parser = argparse.ArgumentParser(
        description="Run development checks and the docs generator."
    )
    parser.add_argument(
        "--ci",
        action="store_true",
        help="Verify only: no auto-fixes, and check the docs instead of writing them",
    )
    args = parser.parse_args()

    if args.ci:
        run_command(["uv", "run", "ruff", "format", "--check"], "Ruff Format Check")
        run_command(["uv", "run", "ruff", "check"], "Ruff Linting")
    else:
        run_command(["uv", "run", "ruff", "format"], "Ruff Formatting")
        run_command(
            ["uv", "run", "ruff", "check", "--fix", "--unsafe-fixes"],
            "Ruff Linting & Fixes",
        )

    run_command(["uv", "run", "pytest"], "Tests")

    docs_cmd = ["uv", "run", "python", "main.py"]
    if args.ci:
        docs_cmd.append("--check")
    run_command(docs_cmd, "Docs Generation")

    print("\n✅ All development checks passed successfully.")


if __name__ == "__main__":
    main()
