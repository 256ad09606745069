"""
SQL Builder Exception classes
"""


class SQLBuilderError(Exception):
    """Base class for exceptions in this module"""


class SQLBuilderTemplateError(SQLBuilderError):
    """Exception raised for bulk insert templates without a valid marker"""


class SQLBuilderBindError(SQLBuilderError):
    """Exception raised when bound args do not match the row placeholders"""
