"""
Unit tests for schema files, the schema builder and SQL type classification.
"""

import pytest

from modelgen.core.errors import ConfigurationError, PreconditionViolation
from modelgen.core.schema import (
    SchemaBuilder,
    SchemaConfigLoader,
    classify_sql_type,
    decimal_digits_for_bits,
    parse_schema,
)


class TestSchemaConfigLoader:
    """Tests for SchemaConfigLoader"""

    def test_load_schema_file(self, schema_file):
        schema = SchemaConfigLoader(schema_file).load_schema()

        assert schema.table_name == "customers"
        assert schema.primary_keys == ("id",)
        assert schema.relationships == ("region",)
        assert [c.name for c in schema.columns] == ["id", "name", "credit_limit", "born_on", "avatar"]

    def test_types_are_classified(self, schema_file):
        columns = {c.name: c for c in SchemaConfigLoader(schema_file).load_schema().columns}

        assert columns["id"].family == "numeric"
        assert (columns["id"].precision, columns["id"].scale) == (9, 0)
        assert columns["name"].family == "text"
        assert columns["name"].data_size == 50
        assert columns["name"].nullable is False
        assert (columns["credit_limit"].precision, columns["credit_limit"].scale) == (7, 2)
        assert columns["born_on"].family == "temporal"
        assert columns["avatar"].family == "other"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            SchemaConfigLoader(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("table: [unclosed\n")

        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            SchemaConfigLoader(path).load_schema()

    def test_quoted_nullable_is_rejected(self, tmp_path):
        path = tmp_path / "quoted.yaml"
        path.write_text(
            "table: customers\n"
            "columns:\n"
            "  - name: name\n"
            "    type: varchar(50)\n"
            "    nullable: \"false\"\n"
        )

        with pytest.raises(ConfigurationError, match="nullable"):
            SchemaConfigLoader(path).load_schema()

    def test_invalid_precision_is_a_precondition_violation(self, tmp_path):
        path = tmp_path / "bad_scale.yaml"
        path.write_text(
            "table: prices\n"
            "columns:\n"
            "  - name: amount\n"
            "    type: numeric\n"
            "    precision: 2\n"
            "    scale: 3\n"
        )

        with pytest.raises(PreconditionViolation):
            SchemaConfigLoader(path).load_schema()


class TestParseSchema:
    """Tests for parse_schema"""

    def test_composite_primary_key_list(self):
        schema = parse_schema({
            "table": "order_items",
            "primary_key": ["order_id", "line_no"],
            "columns": [{"name": "order_id", "type": "integer"}, {"name": "line_no", "type": "smallint"}],
        })

        assert schema.primary_key.names == ("order_id", "line_no")

    def test_explicit_values_override_type_parameters(self):
        schema = parse_schema({
            "table": "notes",
            "columns": [{"name": "body", "type": "varchar(10)", "size": 200}],
        })

        assert schema.columns[0].data_size == 200

    def test_explicit_family(self):
        schema = parse_schema({
            "table": "shapes",
            "columns": [{"name": "code", "type": "citext2", "family": "text", "size": 4}],
        })

        assert schema.columns[0].family == "text"

    @pytest.mark.parametrize("config,message", [
        (["not", "a", "mapping"], "must be a mapping"),
        ({"columns": [{"name": "x"}]}, "must contain 'table'"),
        ({"table": "t"}, "'columns' must be a non-empty list"),
        ({"table": "t", "columns": [{"type": "text"}]}, "missing 'name'"),
        ({"table": "t", "columns": [{"name": "x", "family": "spatial"}]}, "unknown family"),
        ({"table": "t", "columns": [{"name": "x", "nullable": "false"}]}, "non-boolean nullable"),
        ({"table": "t", "columns": [{"name": "x", "nullable": 0}]}, "non-boolean nullable"),
        ({"table": "t", "columns": [{"name": "x"}], "relationships": "region"}, "must be a list"),
    ])
    def test_malformed_schema(self, config, message):
        with pytest.raises(ConfigurationError, match=message):
            parse_schema(config)


class TestSchemaBuilder:
    """Tests for SchemaBuilder"""

    def test_build(self):
        schema = (
            SchemaBuilder("invoices")
            .add_text("number", size=12, nullable=False)
            .add_numeric("total", precision=9)
            .add_temporal("issued_on", data_type="date")
            .with_primary_key("number")
            .with_class_name("Bill")
            .build()
        )

        assert [c.family for c in schema.columns] == ["text", "numeric", "temporal"]
        assert schema.columns[1].scale == 0
        assert schema.class_name == "Bill"
        assert schema.primary_key.names == ("number",)

    def test_numeric_without_precision_stays_unbounded(self):
        schema = SchemaBuilder("readings").add_numeric("value", data_type="double precision").build()

        assert schema.columns[0].precision is None
        assert schema.columns[0].scale is None


class TestClassifySqlType:
    """Tests for classify_sql_type"""

    @pytest.mark.parametrize("raw,family,size,precision,scale", [
        ("character varying", "text", None, None, None),
        ("varchar(50)", "text", 50, None, None),
        ("CHARACTER VARYING(30)", "text", 30, None, None),
        ("text", "text", None, None, None),
        ("char(2)", "text", 2, None, None),
        ("integer", "numeric", None, 9, 0),
        ("smallint", "numeric", None, 4, 0),
        ("bigint", "numeric", None, 18, 0),
        ("numeric(7,2)", "numeric", None, 7, 2),
        ("decimal(5)", "numeric", None, 5, 0),
        ("numeric", "numeric", None, None, None),
        ("double precision", "numeric", None, None, None),
        ("real", "numeric", None, None, None),
        ("date", "temporal", None, None, None),
        ("time without time zone", "temporal", None, None, None),
        ("timestamp with time zone", "temporal", None, None, None),
        ("bytea", "other", None, None, None),
        ("jsonb", "other", None, None, None),
        ("", "other", None, None, None),
    ])
    def test_classification(self, raw, family, size, precision, scale):
        info = classify_sql_type(raw)

        assert info.family == family
        assert info.data_size == size
        assert info.precision == precision
        assert info.scale == scale

    @pytest.mark.parametrize("bits,digits", [(16, 4), (32, 9), (64, 18)])
    def test_decimal_digits_for_bits(self, bits, digits):
        assert decimal_digits_for_bits(bits) == digits
