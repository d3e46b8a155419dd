"""
Module entry point for: python -m rome

Allows running the parser directly as a module:
    python -m rome                   (interactive prompt)
    python -m rome parse <numeral>... [options]
    python -m rome batch <file> [options]
    python -m rome serve [options]
"""

from .cli import cli


def main():
    cli()


if __name__ == "__main__":
    main()
