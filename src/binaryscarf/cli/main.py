"""Main CLI entry point."""

from binaryscarf.cli.app import create_app


def main() -> None:
    """Main CLI entry point."""
    app = create_app()
    app(prog_name="binaryscarf")


if __name__ == "__main__":
    main()
