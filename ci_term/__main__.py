"""
Entrypoint for running the dashboard as a module.

Usage:
    python -m ci_term [OPTIONS] [COMMAND]
"""

from .cli import main

if __name__ == "__main__":
    main()
