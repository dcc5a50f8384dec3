"""Module entry point: python -m khulnasoft_migrate."""

from khulnasoft_migrate.cli import main

if __name__ == "__main__":
    main()
