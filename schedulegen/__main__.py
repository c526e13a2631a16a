"""
Package entry point.

Allows running the application via:

    python -m schedulegen

This simply forwards execution to schedulegen.cli.main().
"""

from schedulegen.cli import main

if __name__ == "__main__":
    main()
