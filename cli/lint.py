from cli._runner import run


def main() -> None:
    """Run linting and the format check."""
    import sys

    code = run(["uv", "run", "ruff", "check", "student_ledger", "cli", "scripts", "tests"])
    if code == 0:
        code = run(["uv", "run", "ruff", "format", "--check", "."])
    sys.exit(code)


def format() -> None:
    """Run code formatting."""
    import sys

    sys.exit(run(["uv", "run", "ruff", "format", "."]))
