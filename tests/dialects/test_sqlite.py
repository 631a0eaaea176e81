from dialectfactory.dialects import SQLiteDialect
from dialectfactory.resolution import ResolutionInfo


def test_sqlite_identifier_quoting():
    dialect = SQLiteDialect()
    assert dialect.quote_identifier("table") == '"table"'
    assert dialect.quote_identifier('bad"name') == '"bad""name"'


def test_sqlite_limit_clause():
    dialect = SQLiteDialect()
    assert dialect.limit_clause(10, None) == "LIMIT 10"
    assert dialect.limit_clause(10, 5) == "LIMIT 10 OFFSET 5"
    assert dialect.limit_clause(None, 5) == "LIMIT -1 OFFSET 5"


def test_sqlite_column_definition():
    dialect = SQLiteDialect()
    rendered = dialect.render_column_definition("name", "TEXT", nullable=False)
    assert rendered == '"name" TEXT NOT NULL'


def test_sqlite_returning_depends_on_version():
    old = SQLiteDialect.from_resolution_info(ResolutionInfo("SQLite", 3, 31))
    new = SQLiteDialect.from_resolution_info(ResolutionInfo("SQLite", 3, 45))
    assert old.version == (3, 31)
    assert old.capabilities.supports_returning is False
    assert new.capabilities.supports_returning is True


def test_sqlite_without_version_assumes_current_features():
    dialect = SQLiteDialect()
    assert dialect.version is None
    assert dialect.capabilities.supports_returning is True
