"""
Command Line Entry Point - Main Layer

Runs one export and turns its outcome into a process exit code. An external
scheduler (e.g. a Kubernetes CronJob) is expected to invoke it periodically.
"""

import argparse
import asyncio
import sys
from typing import Optional, Sequence, Tuple, Type

from carbon_exporter.application.use_cases.export_forecast_use_case import (
    ExportForecastUseCase,
    ExportResult,
)
from carbon_exporter.domain.entities.errors import (
    ConfigStoreError,
    DomainError,
    ForecastFetchError,
    ForecastParseError,
    InvalidLocationError,
)
from carbon_exporter.main.config import AppSettings, get_settings
from carbon_exporter.main.container import init_container
from carbon_exporter.shared import (
    EnumExitCode,
    configure_logging,
    get_logger,
    update_logging_from_settings,
)
from carbon_exporter.shared.consts import DOCUMENTATION_URL, LOCATIONS_URL

logger = get_logger(__name__)

_ERROR_EXIT_CODES: Tuple[Tuple[Type[DomainError], EnumExitCode], ...] = (
    (InvalidLocationError, EnumExitCode.INVALID_LOCATION),
    (ForecastFetchError, EnumExitCode.FETCH_FAILURE),
    (ForecastParseError, EnumExitCode.PARSE_FAILURE),
    (ConfigStoreError, EnumExitCode.STORE_FAILURE),
)


def build_parser(settings: AppSettings) -> argparse.ArgumentParser:
    """Build the argument parser; defaults come from the settings."""
    parser = argparse.ArgumentParser(
        prog="carbon-exporter",
        description=(
            "Export the grid carbon intensity forecast of a computing location "
            "into a Kubernetes ConfigMap"
        ),
    )
    parser.add_argument(
        "--computing-location",
        default=settings.forecast.computing_location,
        help="Specifies the grid for which the carbon intensity is requested",
    )
    parser.add_argument(
        "--forecast-data-endpoint-template",
        default=settings.forecast.endpoint_template,
        help=(
            "Specifies url of the forecast data. "
            "{0} will be replaced by the computing location"
        ),
    )
    parser.add_argument(
        "--configmap-namespace",
        default=settings.configmap.namespace,
        help="Specifies the configmap namespace the grid carbon intensity is set",
    )
    parser.add_argument(
        "--configmap-name",
        default=settings.configmap.name,
        help="Specifies the configmap name the grid carbon intensity is set",
    )
    parser.add_argument(
        "--configmap-key",
        default=settings.configmap.key,
        help="Specifies the configmap data key the grid carbon intensity is set",
    )
    return parser


def exit_code_for(error: DomainError) -> EnumExitCode:
    for error_type, exit_code in _ERROR_EXIT_CODES:
        if isinstance(error, error_type):
            return exit_code
    return EnumExitCode.UNEXPECTED_ERROR


def _report_invalid_location(error: InvalidLocationError) -> None:
    print(error.message, file=sys.stderr)
    print(f"See {DOCUMENTATION_URL}", file=sys.stderr)
    print(f"To get the list of locations: {LOCATIONS_URL}", file=sys.stderr)


async def run_export(
    use_case: ExportForecastUseCase, args: argparse.Namespace
) -> ExportResult:
    return await use_case.execute(
        location_code=args.computing_location,
        endpoint_template=args.forecast_data_endpoint_template,
        namespace=args.configmap_namespace,
        name=args.configmap_name,
        payload_key=args.configmap_key,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments, run one export and return the process exit code."""

    configure_logging()
    settings = get_settings()
    update_logging_from_settings(settings)

    args = build_parser(settings).parse_args(
        list(argv) if argv is not None else None
    )
    container = init_container(settings)
    use_case = container.export_forecast_use_case()

    try:
        result = asyncio.run(run_export(use_case, args))
    except InvalidLocationError as e:
        logger.error("export.invalid_location", code=e.code)
        _report_invalid_location(e)
        return int(EnumExitCode.INVALID_LOCATION)
    except DomainError as e:
        exit_code = exit_code_for(e)
        logger.error(
            "export.failed",
            error_type=type(e).__name__,
            error=e.message,
            details=e.details,
            exit_code=int(exit_code),
        )
        print(e.message, file=sys.stderr)
        return int(exit_code)
    except Exception as e:
        logger.exception("export.unexpected_error", error=str(e))
        print(repr(e), file=sys.stderr)
        return int(EnumExitCode.UNEXPECTED_ERROR)

    logger.info(
        "export.succeeded",
        location=result.location.code,
        records=result.batch.count,
        namespace=result.document.namespace,
        name=result.document.name,
    )
    return int(EnumExitCode.SUCCESS)
