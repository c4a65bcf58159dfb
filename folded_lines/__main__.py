"""Package entry point for ``python -m folded_lines``.

HOW: Delegates to the CLI's main() function.
"""

from folded_lines.cli import main

if __name__ == "__main__":
    main()
