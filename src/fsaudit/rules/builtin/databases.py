"""Database rules — generic databases and dumps, SQLite, SQL scripts, program databases."""

from fsaudit.classification.models import DatabaseKind, database
from fsaudit.rules.models import ClassificationRule

GENERIC_DATABASE = ClassificationRule(
    id="GENERIC_DATABASE",
    name="Database File",
    description="Generic database files and database dumps.",
    classification=database(DatabaseKind.DB),
    extensions=["db", "dump"],
)

SQLITE_DATABASE = ClassificationRule(
    id="SQLITE_DATABASE",
    name="SQLite Database",
    description="SQLite database files.",
    classification=database(DatabaseKind.SQLITE),
    extensions=["sqlite", "sqlite3"],
)

SQL_SCRIPT = ClassificationRule(
    id="SQL_SCRIPT",
    name="SQL Script",
    description="SQL scripts in generic, MySQL and PostgreSQL dialects.",
    classification=database(DatabaseKind.SQL),
    extensions=["sql", "mysql", "pgsql"],
)

PROGRAM_DATABASE = ClassificationRule(
    id="PROGRAM_DATABASE",
    name="Program Database",
    description="Program database (debug symbol) files.",
    classification=database(DatabaseKind.PDB),
    extensions=["pdb"],
)

ALL_DATABASE_RULES = [GENERIC_DATABASE, SQLITE_DATABASE, SQL_SCRIPT, PROGRAM_DATABASE]
