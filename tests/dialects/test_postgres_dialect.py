from dialectfactory.dialects import PostgresDialect
from dialectfactory.resolution import NO_VERSION, ResolutionInfo


def test_postgres_dialect_quotes_identifiers():
    dialect = PostgresDialect()
    assert dialect.quote_identifier('table"name') == '"table""name"'
    assert dialect.format_table("public.users") == '"public"."users"'


def test_postgres_dialect_limit_clause():
    dialect = PostgresDialect()
    assert dialect.limit_clause(10, None) == "LIMIT 10"
    assert dialect.limit_clause(None, 5) == "OFFSET 5"
    assert dialect.limit_clause(10, 5) == "LIMIT 10 OFFSET 5"


def test_postgres_dialect_placeholder():
    dialect = PostgresDialect()
    assert dialect.parameter_placeholder() == "%s"


def test_postgres_from_resolution_info_keeps_version():
    dialect = PostgresDialect.from_resolution_info(ResolutionInfo("PostgreSQL", 14, 2))
    assert dialect.version == (14, 2)
    assert dialect.capabilities.supports_returning is True
    assert PostgresDialect.from_resolution_info(
        ResolutionInfo("PostgreSQL", 8, 1)
    ).capabilities.supports_returning is False


def test_postgres_unknown_version_is_none():
    info = ResolutionInfo("PostgreSQL", NO_VERSION, NO_VERSION)
    assert PostgresDialect.from_resolution_info(info).version is None
