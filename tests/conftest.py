"""
Pytest configuration and fixtures for modelgen tests

This module provides shared fixtures for unit, integration, and E2E tests.
"""
import os
from pathlib import Path
from typing import Generator

import psycopg
import pytest
import yaml
from testcontainers.postgres import PostgresContainer

from modelgen.core.models import ColumnDescriptor, TableSchema
from modelgen.core.schema import SchemaBuilder
from modelgen.warehouse.connection import DatabaseConnectionPool


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that don't require external services"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests that require Docker containers"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests that run the command-line interface"
    )
    config.addinivalue_line(
        "markers", "slow: Tests that take more than 5 seconds to run"
    )


# =======================
# SCHEMA FIXTURES
# =======================

@pytest.fixture
def text_column() -> ColumnDescriptor:
    """Required text column of length 50"""
    return ColumnDescriptor(
        name="email", data_type="character varying", family="text", data_size=50, nullable=False
    )


@pytest.fixture
def numeric_column() -> ColumnDescriptor:
    """Nullable numeric(7,2) column"""
    return ColumnDescriptor(
        name="amount", data_type="numeric", family="numeric", precision=7, scale=2, nullable=True
    )


@pytest.fixture
def temporal_column() -> ColumnDescriptor:
    """Required date column"""
    return ColumnDescriptor(name="born_on", data_type="date", family="temporal", nullable=False)


@pytest.fixture
def customers_schema() -> TableSchema:
    """
    A table exercising every family

    Returns:
        TableSchema for "customers" with a single primary key and two relationships
    """
    return (
        SchemaBuilder("customers")
        .add_numeric("id", precision=9, nullable=False, data_type="integer")
        .add_text("name", size=50, nullable=False)
        .add_text("nickname", size=30)
        .add_numeric("credit_limit", precision=7, scale=2)
        .add_temporal("born_on", data_type="date", nullable=False)
        .add_other("avatar")
        .with_primary_key("id")
        .with_relationships("Regions", "regions", "SalesReps")
        .build()
    )


@pytest.fixture
def schema_file(tmp_path) -> Path:
    """
    Write a YAML schema file for the customers table

    Returns:
        Path to the schema file
    """
    config = {
        "table": "customers",
        "primary_key": "id",
        "relationships": ["region"],
        "columns": [
            {"name": "id", "type": "integer", "nullable": False},
            {"name": "name", "type": "character varying(50)", "nullable": False},
            {"name": "credit_limit", "type": "numeric(7,2)"},
            {"name": "born_on", "type": "date", "nullable": False},
            {"name": "avatar", "type": "bytea"},
        ],
    }
    path = tmp_path / "customers.yaml"
    path.write_text(yaml.safe_dump(config, sort_keys=False))
    return path


# =======================
# DATABASE FIXTURES (Testcontainers)
# =======================

@pytest.fixture(scope="session")
def postgres_container() -> Generator[PostgresContainer, None, None]:
    """
    Start PostgreSQL container for integration tests

    Yields:
        PostgresContainer instance with the fixture tables created
    """
    with PostgresContainer(
        image="postgres:16.2-alpine",
        username="test_modelgen",
        password="test_password",
        dbname="test_catalog"
    ) as postgres:
        init_sql_path = os.path.join(os.path.dirname(__file__), "fixtures", "init-db.sql")

        with open(init_sql_path, 'r') as f:
            init_sql = f.read()

        with psycopg.connect(
            host=postgres.get_container_host_ip(),
            port=int(postgres.get_exposed_port(5432)),
            dbname="test_catalog",
            user="test_modelgen",
            password="test_password",
        ) as conn:
            with conn.cursor() as cur:
                cur.execute(init_sql)
            conn.commit()

        yield postgres


@pytest.fixture
def db_pool(postgres_container) -> Generator[DatabaseConnectionPool, None, None]:
    """
    Provide an open connection pool for a single test

    Args:
        postgres_container: PostgreSQL container fixture

    Yields:
        Open DatabaseConnectionPool
    """
    pool = DatabaseConnectionPool(
        host=postgres_container.get_container_host_ip(),
        port=int(postgres_container.get_exposed_port(5432)),
        database="test_catalog",
        user="test_modelgen",
        password="test_password",
    )
    pool.open()
    yield pool
    pool.close()


# =======================
# CONFIGURATION FIXTURES
# =======================

@pytest.fixture(scope="session")
def test_env_vars():
    """
    Set test environment variables

    This fixture loads config/test.env and sets environment variables
    """
    from dotenv import load_dotenv

    env_path = os.path.join(
        os.path.dirname(os.path.dirname(__file__)),
        "config",
        "test.env"
    )

    if os.path.exists(env_path):
        load_dotenv(env_path, override=True)


@pytest.fixture(autouse=True)
def clear_dialect_env(monkeypatch):
    """Run every test without a dialect preset from the environment"""
    monkeypatch.delenv("MODELGEN_DIALECT", raising=False)
