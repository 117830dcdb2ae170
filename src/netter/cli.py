from __future__ import annotations

from typing import List

import typer

from netter.core.ipv4 import ScanMode
from netter.validation.validators import IPv4Validator

app = typer.Typer(help="Validate dotted-decimal IPv4 address strings.")


@app.callback()
def callback() -> None:
    """netter command line tools."""


@app.command()
def check(
    addresses: List[str] = typer.Argument(  # noqa: B008
        ...,
        help="One or more address strings to validate.",
    ),
    legacy: bool = typer.Option(  # noqa: B008
        False,
        "--legacy",
        help="Skip the end-of-string checks (accepts incomplete addresses).",
    ),
    quiet: bool = typer.Option(  # noqa: B008
        False,
        "--quiet",
        "-q",
        help="Print nothing; report through the exit code only.",
    ),
) -> None:
    """Check each ADDRESS and exit 1 if any of them is invalid."""
    validator = IPv4Validator(mode=ScanMode.LEGACY if legacy else ScanMode.STRICT)

    results = validator.check_batch(addresses)
    if not quiet:
        for result in results:
            typer.echo(f"{result.raw_input}: {'valid' if result.is_valid else 'invalid'}")

    if validator.stats["invalid_count"]:
        raise typer.Exit(code=1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
