"""
Generation pipeline: table metadata in, model and test sources out.

Flow:
1. Resolve the dialect (fails before any derivation when unknown)
2. Derive validation rules for the dialect
3. Render the model source
4. Derive and render the mirrored test source
5. Return both artifacts together; nothing is handed out if any step fails
"""

from modelgen.core.models import Dialect, GeneratedArtifacts, TableSchema, resolve_dialect
from modelgen.core.rendering import get_renderer
from modelgen.core.rules import get_rule_deriver
from modelgen.core.testgen import TestAssertionDeriver
from modelgen.observability.logger import get_logger, log_operation
from modelgen.observability.metrics import MetricsCollector
from modelgen.utils.naming import class_name_for_table

logger = get_logger(__name__)


class ArtifactGenerator:
    """
    Generates the model source and its test source for table schemas.

    The dialect and, optionally, the class name are fixed at construction.
    Without an explicit class name, the schema's own class_name is used, then
    the singularized CamelCase form of the table name.
    """

    def __init__(
        self,
        dialect: "str | Dialect | None" = None,
        class_name: str | None = None,
        metrics: MetricsCollector | None = None,
    ):
        """
        Initialize the generator.

        Args:
            dialect: "legacy" or "current" (defaults via MODELGEN_DIALECT)
            class_name: Model class name overriding the derived one
            metrics: Metrics collector (a fresh one if None)

        Raises:
            ConfigurationError: If the dialect is unknown
        """
        self.dialect = resolve_dialect(dialect)
        self.class_name = class_name
        self.metrics = metrics or MetricsCollector()
        self.rule_deriver = get_rule_deriver(self.dialect)
        self.renderer = get_renderer(self.dialect)

    def class_name_for(self, schema: TableSchema) -> str:
        return self.class_name or schema.class_name or class_name_for_table(schema.table_name)

    def generate(self, schema: TableSchema) -> GeneratedArtifacts:
        """
        Generate both artifacts for one table.

        Args:
            schema: Table metadata

        Returns:
            GeneratedArtifacts with the model and test sources

        Raises:
            PreconditionViolation: If a column descriptor is structurally invalid
        """
        class_name = self.class_name_for(schema)

        try:
            with log_operation(
                "Generating artifacts",
                logger=logger,
                table=schema.table_name,
                class_name=class_name,
                dialect=self.dialect.value,
            ) as operation:
                rules = self.rule_deriver.derive(schema.columns)

                model_source = self.renderer.render(
                    class_name,
                    schema.table_name,
                    schema.primary_key,
                    schema.relationship_set,
                    rules,
                )

                test_source = TestAssertionDeriver(class_name).derive(schema.columns, schema.primary_key)
        except Exception:
            self.metrics.record_failure(self.dialect.value)
            raise

        self.metrics.record_run(
            dialect=self.dialect.value,
            rule_kinds=[rule.kind for rule in rules],
            skipped_families=[column.family for column in schema.columns if not column.is_supported],
            duration_seconds=operation.duration or 0.0,
        )

        logger.info(
            f"Generated {class_name}: {len(rules)} rules",
            extra={"table": schema.table_name, "rule_count": len(rules)},
        )

        return GeneratedArtifacts(
            class_name=class_name,
            model_source=model_source,
            test_source=test_source,
        )


def generate_artifacts(
    schema: TableSchema,
    dialect: "str | Dialect | None" = None,
    class_name: str | None = None,
) -> GeneratedArtifacts:
    """Convenience wrapper: one-shot generation for a single schema."""
    return ArtifactGenerator(dialect=dialect, class_name=class_name).generate(schema)
