"""
Command-line interface for model generation.

Usage:
    python -m modelgen.cli.generate_cli from-file --schema <path> [options]
    python -m modelgen.cli.generate_cli from-db --table <table> [options]
"""

import argparse
import sys
from pathlib import Path

from psycopg import OperationalError

from modelgen.core.errors import GenerationError
from modelgen.core.models import GeneratedArtifacts, TableSchema
from modelgen.core.schema import SchemaConfigLoader
from modelgen.generation import ArtifactGenerator, ArtifactWriter
from modelgen.observability.logger import configure_logging, get_logger
from modelgen.observability.metrics import write_metrics_file
from modelgen.utils.validation import ValidationError, validate_class_name, validate_file_path
from modelgen.warehouse.connection import DatabaseConnectionPool
from modelgen.warehouse.introspection import SchemaIntrospector

logger = get_logger(__name__)


def emit_artifacts(artifacts: GeneratedArtifacts, args) -> None:
    """
    Print the artifacts (dry run) or write them under the output directory.

    Args:
        artifacts: Generated model and test sources
        args: Command-line arguments
    """
    writer = ArtifactWriter(args.output_dir, overwrite=not args.no_overwrite)
    model_path, test_path = writer.paths_for(artifacts.class_name)

    if args.dry_run:
        logger.info("DRY RUN MODE: nothing will be written to disk")
        print(f"# {model_path}")
        print(artifacts.model_source)
        print(f"# {test_path}")
        print(artifacts.test_source, end="")
        return

    model_path, test_path = writer.write(artifacts)
    print(f"Model: {model_path}")
    print(f"Test:  {test_path}")


def run_generation(schema: TableSchema, args) -> None:
    """Generate artifacts for one schema and emit them."""
    generator = ArtifactGenerator(dialect=args.dialect, class_name=args.class_name)
    artifacts = generator.generate(schema)
    emit_artifacts(artifacts, args)


def from_file_command(args):
    """
    Generate artifacts from a YAML schema file.

    Args:
        args: Command-line arguments
    """
    logger.info(f"Generating from schema file: {args.schema}")

    try:
        schema_path = Path(validate_file_path(args.schema, "schema"))
        schema = SchemaConfigLoader(schema_path).load_schema()
        run_generation(schema, args)
    except (GenerationError, ValueError, OSError) as e:
        logger.error(f"Generation failed: {e}")
        print(f"\nError: {e}", file=sys.stderr)
        sys.exit(1)
    finally:
        if args.metrics_file:
            write_metrics_file(args.metrics_file)


def from_db_command(args):
    """
    Generate artifacts by introspecting a live PostgreSQL table.

    Args:
        args: Command-line arguments
    """
    logger.info(f"Generating from database table: {args.schema_name}.{args.table}")

    try:
        pool = DatabaseConnectionPool(
            host=args.db_host,
            port=args.db_port,
            database=args.db_name,
            user=args.db_user,
            password=args.db_password,
        )
        try:
            pool.open()
            introspector = SchemaIntrospector(pool, schema_name=args.schema_name)
            schema = introspector.introspect(args.table)
        finally:
            pool.close()

        run_generation(schema, args)
    except (GenerationError, ValueError, OperationalError, OSError) as e:
        logger.error(f"Generation failed: {e}")
        print(f"\nError: {e}", file=sys.stderr)
        sys.exit(1)
    finally:
        if args.metrics_file:
            write_metrics_file(args.metrics_file)


def _class_name_arg(value: str) -> str:
    try:
        return validate_class_name(value)
    except ValidationError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--dialect",
        choices=["legacy", "current"],
        help="Output dialect (default: MODELGEN_DIALECT or current)"
    )
    parser.add_argument(
        "--class-name",
        type=_class_name_arg,
        help="Model class name (default: singularized CamelCase table name)"
    )
    parser.add_argument(
        "--output-dir",
        default=".",
        help="Application root to write app/models and test/unit under (default: .)"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print generated sources to stdout instead of writing files"
    )
    parser.add_argument(
        "--no-overwrite",
        action="store_true",
        help="Fail instead of replacing existing files"
    )
    parser.add_argument(
        "--metrics-file",
        help="Write Prometheus metrics to this file after the run"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate ActiveRecord models and unit tests from table metadata",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate from a schema file
  python -m modelgen.cli.generate_cli from-file --schema config/schemas/customers.yaml

  # Preview legacy-dialect output without writing
  python -m modelgen.cli.generate_cli from-file --schema config/schemas/customers.yaml \\
      --dialect legacy --dry-run

  # Introspect a live table
  DB_PASSWORD=secret python -m modelgen.cli.generate_cli from-db --table customers \\
      --output-dir ../shop
        """
    )
    parser.add_argument(
        "--log-level",
        help="Log level (default: LOG_LEVEL or INFO)"
    )
    parser.add_argument(
        "--log-format",
        choices=["json", "text"],
        help="Log format (default: LOG_FORMAT or json)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    file_parser = subparsers.add_parser("from-file", help="Generate from a YAML schema file")
    file_parser.add_argument(
        "--schema",
        required=True,
        help="Path to the YAML schema file"
    )
    add_common_arguments(file_parser)

    db_parser = subparsers.add_parser("from-db", help="Generate from a live PostgreSQL table")
    db_parser.add_argument(
        "--table",
        required=True,
        help="Table or view name"
    )
    db_parser.add_argument(
        "--schema-name",
        default="public",
        help="Database schema (default: public)"
    )
    db_parser.add_argument("--db-host", help="Database host (default: DB_HOST or localhost)")
    db_parser.add_argument("--db-port", type=int, help="Database port (default: DB_PORT or 5432)")
    db_parser.add_argument("--db-name", help="Database name (default: DB_NAME or postgres)")
    db_parser.add_argument("--db-user", help="Database user (default: DB_USER or postgres)")
    db_parser.add_argument("--db-password", help="Database password (default: DB_PASSWORD)")
    add_common_arguments(db_parser)

    return parser


def main(argv: list[str] | None = None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    configure_logging(level=args.log_level, format_type=args.log_format)

    try:
        if args.command == "from-file":
            from_file_command(args)
        elif args.command == "from-db":
            from_db_command(args)
    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        sys.exit(130)


if __name__ == "__main__":
    main()
