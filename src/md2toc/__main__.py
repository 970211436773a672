"""Module entry point for running with python -m md2toc."""

from md2toc.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
