"""
Command-line entry point.

    harvestdoc [--format=csv] [--token=TOKEN] ( endpoint | file )
    harvestdoc http [--host=HOST] [--port=PORT]
"""
import argparse
import sys
from typing import List, Optional

from harvestdoc.core.config import settings
from harvestdoc.core.errors import HarvestDocError
from harvestdoc.core.logging_config import setup_logger
from harvestdoc.services.export_service import catalog_source_for, export_concepts

EXPORT_EPILOG = """\
The harvestdoc service pulls down Harvest concept data and exports it in
various formats, currently CSV.

examples:
  Export a CSV file.

    harvestdoc http://harvest.example.org/demo/api/ > demo.csv

  Export a saved concepts dump.

    harvestdoc concepts.json > concepts.csv

  Serve exports over HTTP.

    harvestdoc http --port 8080
"""


def build_export_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="harvestdoc",
        usage="%(prog)s [options] ( endpoint | file )",
        description="Export Harvest concepts and fields as CSV",
        epilog=EXPORT_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--format", default="csv", choices=["csv"], help="Export format.")
    parser.add_argument("--token", default="", help="API token if authorization is required.")
    parser.add_argument("target", metavar="endpoint | file", help="Harvest API URL or concepts JSON file")
    return parser


def build_http_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="harvestdoc http",
        description="Serve CSV exports: POST {\"url\": ..., \"token\": ...} to /",
    )
    parser.add_argument("--host", default=settings.HOST, help="Interface to listen on")
    parser.add_argument("--port", type=int, default=settings.PORT, help="Port to listen on")
    return parser


def serve(host: str, port: int) -> None:
    import uvicorn

    from harvestdoc.main import app

    uvicorn.run(app, host=host, port=port, log_level=settings.LOG_LEVEL.lower())


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else list(argv)
    setup_logger()

    if argv and argv[0] == "http":
        args = build_http_parser().parse_args(argv[1:])
        serve(args.host, args.port)
        return 0

    args = build_export_parser().parse_args(argv)

    try:
        with catalog_source_for(args.target, token=args.token) as source:
            export_concepts(source, sys.stdout)
    except HarvestDocError as e:
        print(e, file=sys.stderr)
        return 1

    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
