import subprocess
import sys


def test():
    """Run tests using pytest."""
    cmd = ["pytest", "tests"]
    sys.exit(subprocess.call(cmd))

def lint():
    """Run ruff check, then a formatting check."""
    rc = subprocess.call(["ruff", "check", "src", "tests"])
    if rc != 0:
        sys.exit(rc)
    sys.exit(subprocess.call(["ruff", "format", "--check", "src", "tests"]))

def format():
    """Run formatter."""
    sys.exit(subprocess.call(["ruff", "format", "src", "tests"]))
