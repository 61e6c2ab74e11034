"""Module entry point for `python -m yjump.cli`."""

if __name__ == "__main__":  # pragma: no cover (invocation driven)
    from yjump.cli import cli

    cli()
