"""Main CLI entry point for OpenIBAN."""

import json
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from openiban import __version__
from openiban.checksum import calculate_check_digit
from openiban.domain.country import country_by_code
from openiban.domain.structure import BbanStructure
from openiban.exceptions import (
    IbanFormatException,
    InvalidCheckDigitException,
    OpenIbanError,
    UnsupportedCountryException,
)
from openiban.iban import Iban
from openiban.iban_util import get_iban_length, normalize, to_formatted_string
from openiban.utils.config import get_settings
from openiban.utils.logging import configure_logging, get_logger

app = typer.Typer(
    name="openiban",
    help="🏦 Validate and decompose International Bank Account Numbers",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)
console = Console()
logger = get_logger(__name__)

FORMAT_OPTION_HELP = "Output format: rich, json"


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"[bold blue]OpenIBAN[/bold blue] version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """
    OpenIBAN - IBAN validation made simple.

    Checks IBAN structure and check digits for every country in the IBAN
    registry and splits an IBAN into its bank, branch and account fields.
    """
    settings = get_settings()
    configure_logging(
        log_level=settings.log_level,
        json_logs=settings.json_logs,
        dev_mode=not settings.json_logs,
        mask_ibans=settings.mask_ibans_in_logs,
    )


def _output_format(format_type: str | None) -> str:
    output_format = (format_type or get_settings().output_format).lower()
    if output_format not in ("rich", "json"):
        console.print(f"[red]Invalid format: {escape(output_format)}[/red]")
        console.print("Available: rich, json")
        raise typer.Exit(2)
    return output_format


def _print_json(data: Any) -> None:
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False))


def _describe_error(error: OpenIbanError) -> dict[str, Any]:
    """Flatten an error into a JSON-friendly dict."""
    result: dict[str, Any] = {"error": type(error).__name__, "message": error.message}
    if isinstance(error, IbanFormatException):
        result["violation"] = error.format_violation.value
    elif isinstance(error, InvalidCheckDigitException):
        result["actual"] = error.actual
        result["expected"] = error.expected
    elif isinstance(error, UnsupportedCountryException):
        result["country_code"] = error.country_code
    return result


@app.command("validate")
def validate_command(
    ibans: list[str] = typer.Argument(..., help="IBANs to validate"),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Validate input as given, without removing spaces or upper-casing",
    ),
    format_type: str | None = typer.Option(None, "--format", "-f", help=FORMAT_OPTION_HELP),
) -> None:
    """
    Validate one or more IBANs.

    Exits with status 1 if any IBAN is invalid.

    Example:
        openiban validate "DE89 3704 0044 0532 0130 00" GB29NWBK60161331926819
    """
    output_format = _output_format(format_type)
    results: list[dict[str, Any]] = []

    for raw in ibans:
        candidate = raw if strict else normalize(raw)
        try:
            Iban(candidate)
        except OpenIbanError as e:
            logger.info("iban_rejected", iban=candidate, error=type(e).__name__)
            results.append({"iban": candidate, "valid": False, **_describe_error(e)})
        else:
            logger.info("iban_validated", iban=candidate)
            results.append({"iban": candidate, "valid": True})

    if output_format == "json":
        _print_json(results)
    else:
        for result in results:
            iban = escape(result["iban"])
            if result["valid"]:
                console.print(f"[green]✓ {iban}[/green]")
            else:
                console.print(f"[red]✗ {iban}[/red] {escape(result['message'])}")

    if not all(result["valid"] for result in results):
        raise typer.Exit(1)


@app.command("check-digit")
def check_digit_command(
    iban: str = typer.Argument(..., help="IBAN; its current check digit is ignored"),
) -> None:
    """
    Calculate the check digit of an IBAN.

    Example:
        openiban check-digit DE00370400440532013000
    """
    candidate = normalize(iban)
    try:
        check_digit = calculate_check_digit(candidate)
    except OpenIbanError as e:
        console.print(f"[red]✗ {escape(e.message)}[/red]")
        raise typer.Exit(1)

    typer.echo(check_digit)


@app.command("info")
def info_command(
    iban: str = typer.Argument(..., help="IBAN to decompose"),
    format_type: str | None = typer.Option(None, "--format", "-f", help=FORMAT_OPTION_HELP),
) -> None:
    """
    Show the fields of a valid IBAN.

    Example:
        openiban info IT60X0542811101000000123456 --format json
    """
    output_format = _output_format(format_type)
    try:
        parsed = Iban(normalize(iban))
    except OpenIbanError as e:
        if output_format == "json":
            _print_json(_describe_error(e))
        else:
            console.print(f"[red]✗ {escape(e.message)}[/red]")
        raise typer.Exit(1)

    data = parsed.to_dict()
    if output_format == "json":
        _print_json(data)
        return

    table = Table(title=f"IBAN {parsed.to_formatted_string()}", show_header=True)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    for key, value in data.items():
        if value is None:
            continue
        table.add_row(key.replace("_", " ").title(), value)
    console.print(table)


@app.command("format")
def format_command(
    iban: str = typer.Argument(..., help="IBAN in compact or printed form"),
) -> None:
    """
    Print an IBAN in groups of four characters.

    Example:
        openiban format DE89370400440532013000
    """
    typer.echo(to_formatted_string(normalize(iban)))


@app.command("countries")
def countries_command(
    format_type: str | None = typer.Option(None, "--format", "-f", help=FORMAT_OPTION_HELP),
) -> None:
    """List countries with an IBAN structure."""
    output_format = _output_format(format_type)

    rows = []
    for code in BbanStructure.supported_countries():
        country = country_by_code(code)
        structure = BbanStructure.for_country(code)
        assert country is not None and structure is not None
        rows.append(
            {
                "country_code": code,
                "country_name": country.name,
                "iban_length": get_iban_length(code),
                "bban_structure": structure.to_notation(),
            }
        )

    if output_format == "json":
        _print_json(rows)
        return

    table = Table(title="IBAN Countries", show_header=True)
    table.add_column("Code", style="cyan", no_wrap=True)
    table.add_column("Country", style="white")
    table.add_column("Length", justify="right")
    table.add_column("BBAN", style="dim")
    for row in rows:
        table.add_row(
            row["country_code"],
            row["country_name"],
            str(row["iban_length"]),
            row["bban_structure"],
        )
    console.print(table)


if __name__ == "__main__":
    app()
