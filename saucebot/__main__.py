"""Entry point for running saucebot as a module: python -m saucebot"""

from saucebot.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
