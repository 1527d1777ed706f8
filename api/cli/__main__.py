"""CLI entry point for running as `python -m api.cli`.

Usage:
    python -m api.cli                      # REPL
    python -m api.cli structure answer.md  # Structure a saved answer
    python -m api.cli recover out.txt      # Recover a RAG record
    python -m api.cli ask "question"       # Generate + structure
"""

import sys

from .repl import main

if __name__ == "__main__":
    sys.exit(main())
