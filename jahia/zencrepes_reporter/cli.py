"""CLI entry point for the ZenCrepes test run reporter."""

import asyncio
import logging
import sys
from pathlib import Path

import typer

from jahia.zencrepes_reporter.dependency_resolver import resolve_dependencies
from jahia.zencrepes_reporter.dispatcher import (
    DeliveryOutcome,
    post_payload,
    serialize_event,
)
from jahia.zencrepes_reporter.errors import ReporterError
from jahia.zencrepes_reporter.models.dependency import parse_dependencies
from jahia.zencrepes_reporter.payload import build_event
from jahia.zencrepes_reporter.report_loader import ReportType, load_report

# Configure logging - force reconfiguration
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stderr,
    force=True,
)
logger = logging.getLogger(__name__)

app = typer.Typer(context_settings={"help_option_names": ["-h", "--help"]})


async def report(
    report_path: Path,
    payload_url: str,
    secret: str,
    report_type: ReportType = ReportType.XML,
    name: str = "Jahia",
    version: str = "SNAPSHOT",
    dependencies: str = "[]",
    url: str = "",
    version_filepath: Path | None = None,
) -> DeliveryOutcome:
    """Build the event for a test run, print it and post it to the webhook.

    Raises:
        ReporterError: If any step fails; nothing is posted unless the event
            was fully built

    """
    summary = load_report(report_type, report_path)
    resolution = resolve_dependencies(
        parse_dependencies(dependencies), version, version_filepath
    )
    event = build_event(name, version, resolution, summary, url)

    body = serialize_event(event)
    typer.echo(body.decode("utf-8"))

    return await post_payload(body, secret, payload_url)


@app.command()
def main(
    file: Path = typer.Argument(  # noqa: B008
        ...,
        help=(
            "A json/xml report or a folder containing one or multiple "
            "json/xml reports"
        ),
    ),
    payloadurl: str = typer.Argument(
        ..., help="The Webhook payload URL", envvar="ZENCREPES_WEBHOOK_URL"
    ),
    secret: str = typer.Argument(
        ..., help="The webhook secret", envvar="ZENCREPES_WEBHOOK_SECRET"
    ),
    report_type: ReportType = typer.Option(
        ReportType.XML, "--type", "-t", help="report file type"
    ),
    name: str = typer.Option(
        "Jahia",
        "--name",
        "-n",
        help="Name of the element being tested (for example, module ID)",
    ),
    version: str = typer.Option(
        "SNAPSHOT", "--version", "-v", help="Version of the element being tested"
    ),
    dependencies: str = typer.Option(
        "[]",
        "--dependencies",
        "-d",
        help=(
            "Array of runtime dependencies of the element being tested "
            '[{"name": "n", "version": "v"}]'
        ),
    ),
    url: str = typer.Option("", "--url", "-u", help="Url associated with the run"),
    version_filepath: Path | None = typer.Option(  # noqa: B008
        None,
        "--version-filepath",
        "--versionFilepath",
        "-f",
        help="Fetch version details from the JSON generated with utils:modules",
    ),
) -> None:
    """Submit data about a junit/mocha report to ZenCrepes."""
    logger.info(f"Report: {file} ({report_type.value})")
    logger.info(f"Element: {name} {version}")

    try:
        outcome = asyncio.run(
            report(
                report_path=file,
                payload_url=payloadurl,
                secret=secret,
                report_type=report_type,
                name=name,
                version=version,
                dependencies=dependencies,
                url=url,
                version_filepath=version_filepath,
            )
        )
    except ReporterError as e:
        logger.error(f"Failed to report test run: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    logger.info(f"Event delivered (status {outcome.status})")


if __name__ == "__main__":  # pragma: no cover
    app()
