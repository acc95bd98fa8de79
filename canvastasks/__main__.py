"""
Package entry point.

Allows running the application via:

    python -m canvastasks

This simply forwards execution to canvastasks.cli.main().
"""

from canvastasks.cli import main

if __name__ == "__main__":
    main()
