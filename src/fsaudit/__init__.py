"""fsaudit — report secrets, spreadsheets, databases, configuration and archives on every drive."""

__version__ = "0.1.0"
