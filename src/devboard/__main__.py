"""Entry point for `python -m devboard` and `devboard` CLI."""

from devboard.cli.app import app


def main() -> None:
    app()


if __name__ == "__main__":
    main()
