# Simple CLI for the local job queue
import json
import sys

import click
from pydantic import ValidationError

from app.containers import create_container
from core.config.validator import ConfigurationValidator
from core.logging import configure_logging
from core.utils.exceptions import JobConstructionError
from services.job_queue import LiveNodePacket

config_option = click.option(
    "--config", "config_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="JSON config file (defaults to ./config.json)",
)


@click.group()
def cli():
    """Local job queue CLI"""
    pass


@cli.command("next-job")
@config_option
def next_job(config_file):
    """Build the next job and print a summary"""
    try:
        container = create_container(config_file)
        configure_logging(container.settings())
        queue = container.job_queue()
        queue.initialize()
        job, location = queue.next_job()
    except ValidationError as e:
        click.echo(f"Invalid configuration: {e}", err=True)
        sys.exit(1)
    except JobConstructionError as e:
        click.echo(f"Job construction failed: {e.message}", err=True)
        sys.exit(1)

    summary = {
        "type": job.type.value,
        "algorithm_id": job.algorithm_id,
        "location": location,
        "language": job.language.value,
        "parameters": job.parameters,
        "controls": job.controls.model_dump(),
    }
    if isinstance(job, LiveNodePacket):
        summary["brokerage"] = job.brokerage
        summary["brokerage_data_keys"] = sorted(job.brokerage_data)
    click.echo(json.dumps(summary, indent=2))


@cli.command()
@config_option
def validate(config_file):
    """Validate the job configuration"""
    try:
        container = create_container(config_file)
        settings = container.settings()
    except ValidationError as e:
        click.echo(f"Invalid configuration: {e}", err=True)
        sys.exit(1)
    configure_logging(settings)

    validator = ConfigurationValidator(settings, container.brokerage_registry())
    ok = validator.validate_all()
    for result in validator.validation_results:
        click.echo(f"{result.severity.upper():7} [{result.component}] {result.message}")
    if not ok:
        sys.exit(1)
    click.echo("Configuration OK")


@cli.command()
@config_option
def brokerages(config_file):
    """List registered brokerage types"""
    container = create_container(config_file)
    for name in container.brokerage_registry().brokerage_types():
        click.echo(name)


if __name__ == "__main__":
    cli()
