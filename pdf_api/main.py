"""Main module entrypoint for local runtime execution.

This module validates startup configuration and either launches the FastAPI
service or exports its OpenAPI document.
"""

import argparse
import json
import sys
from pathlib import Path

import uvicorn

from pdf_api.api import create_api_application
from pdf_api.bootstrap import bootstrap_create_application
from pdf_api.config import config_load_settings


def main(argv: list[str] | None = None) -> None:
    """Run selected runtime command with validated startup configuration.

    Args:
        argv: Optional argument list; defaults to process arguments.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
    """

    argument_parser = argparse.ArgumentParser(description="PDF Processing API runtime entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="api",
        choices=("api", "openapi"),
        help="Runtime command: `api` starts server, `openapi` writes the OpenAPI document as JSON",
        type=str,
    )
    argument_parser.add_argument(
        "--output",
        dest="output",
        type=Path,
        help="Optional file path for `openapi`; stdout when omitted",
    )
    parsed_arguments = argument_parser.parse_args(argv)

    if parsed_arguments.command == "openapi":
        main_export_openapi(output_path=parsed_arguments.output)
        return

    settings = config_load_settings()
    application = bootstrap_create_application(settings=settings)
    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.application_port,
        log_config=None,
    )


def main_export_openapi(output_path: Path | None = None) -> None:
    """Write the generated OpenAPI document as JSON.

    Args:
        output_path: Target file; the document goes to stdout when omitted.

    Returns:
        None: Writes the document as side effect.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
        OSError: Raised when the output file cannot be written.
    """

    application = create_api_application(settings=config_load_settings())
    document = json.dumps(application.openapi(), indent=2, sort_keys=True)
    if output_path is None:
        sys.stdout.write(document + "\n")
        return
    output_path.write_text(document + "\n", encoding="utf-8")


if __name__ == "__main__":
    main()
