import argparse
import logging
import os
import sys
from importlib.metadata import version

from rich.console import Console

from .core import DEFAULT_CLUSTER_NAME, DEFAULT_REGION
from .logger import logger, setup_logger
from .modes import create


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Procyon: Dataproc cluster provisioning client",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Create the default 1 master / 2 worker cluster in us-central1
  procyon --project-id my-project --key-file sa-key.json

  # Custom name and region, give up waiting after 15 minutes
  procyon --project-id my-project --key-file sa-key.json \\
      --cluster-name etl-cluster --region us-west1 --timeout 900

  # Machine-readable result, non-zero exit if the cluster was not created
  procyon --project-id my-project --key-file sa-key.json --json --strict
""",
    )
    try:
        ver = version("procyon")
    except Exception:
        ver = "unknown"
    parser.add_argument("--version", action="version", version=f"Procyon v{ver}")

    parser.add_argument(
        "--project-id",
        default=os.environ.get("GOOGLE_CLOUD_PROJECT"),
        help="GCP Project ID (default: $GOOGLE_CLOUD_PROJECT)",
    )
    parser.add_argument(
        "--region",
        default=DEFAULT_REGION,
        help=f"Dataproc region (default: {DEFAULT_REGION})",
    )
    parser.add_argument(
        "--cluster-name",
        default=DEFAULT_CLUSTER_NAME,
        help=f"Name of the cluster to create (default: {DEFAULT_CLUSTER_NAME})",
    )
    parser.add_argument(
        "--key-file",
        default=os.environ.get("GOOGLE_APPLICATION_CREDENTIALS"),
        help="Service account key (.json) (default: $GOOGLE_APPLICATION_CREDENTIALS)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Seconds to wait for the cluster (default: wait until done)",
    )
    parser.add_argument("--json", action="store_true", help="Output result as JSON")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 when the cluster was not created",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    # Env defaults may be unset, so these can't be required=True
    if not args.project_id:
        parser.error("--project-id is required (or set GOOGLE_CLOUD_PROJECT)")
    if not args.key_file:
        parser.error(
            "--key-file is required (or set GOOGLE_APPLICATION_CREDENTIALS)"
        )

    if args.verbose:
        setup_logger(level=logging.DEBUG)

    # Use stderr for logs/progress if stdout is piped for JSON
    log_console = Console(stderr=True, quiet=args.json)
    out_console = Console(quiet=args.json)

    log_console.print("[bold green]Procyon[/bold green] Dataproc client initialized.")

    try:
        result = create.run_create(args, log_console, out_console)
    except (OSError, ValueError) as e:
        logger.exception(f"Could not load credentials or settings: {e}")
        sys.exit(1)

    if args.strict and not result.ok:
        sys.exit(1)


def run() -> None:
    """Console script entry point."""
    try:
        main()
    except KeyboardInterrupt:
        console = Console(stderr=True)
        console.print("\n[bold red]Operation cancelled by user.[/bold red]")
        sys.exit(130)


if __name__ == "__main__":
    run()
