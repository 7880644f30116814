"""Entry point for 'python -m cwfilter' command."""

from cwfilter.cli import main

if __name__ == "__main__":
    main()
