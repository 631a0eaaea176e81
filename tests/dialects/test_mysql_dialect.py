from dialectfactory.dialects import MariaDBDialect, MySQLDialect
from dialectfactory.resolution import ResolutionInfo


def test_mysql_dialect_quotes_identifiers():
    dialect = MySQLDialect()
    assert dialect.quote_identifier("user`name") == "`user``name`"
    assert dialect.format_table("analytics.events") == "`analytics`.`events`"


def test_mysql_limit_clause():
    dialect = MySQLDialect()
    assert dialect.limit_clause(10, None) == "LIMIT 10"
    assert dialect.limit_clause(None, 5) == "LIMIT 18446744073709551615 OFFSET 5"
    assert dialect.limit_clause(10, 5) == "LIMIT 10 OFFSET 5"


def test_mysql_never_supports_returning():
    dialect = MySQLDialect.from_resolution_info(ResolutionInfo("MySQL", 8, 0))
    assert dialect.version == (8, 0)
    assert dialect.capabilities.supports_returning is False


def test_mariadb_returning_from_10_5():
    older = MariaDBDialect.from_resolution_info(ResolutionInfo("MariaDB", 10, 4))
    newer = MariaDBDialect.from_resolution_info(ResolutionInfo("MariaDB", 10, 11))
    assert older.name == "mariadb"
    assert older.capabilities.supports_returning is False
    assert newer.capabilities.supports_returning is True
    assert not isinstance(newer, MySQLDialect)
    assert MySQLDialect.name == "mysql"
    assert newer.parameter_placeholder() == "%s"
