"""Allow running the command line as ``python -m file_size``."""

from file_size.app.cli import cli


def main() -> None:
    """Run the file-size command line."""
    cli(prog_name="file-size")


if __name__ == "__main__":
    main()
