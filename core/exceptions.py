# core/exceptions.py
class SqlExecutionError(Exception):
    """A single SQL statement could not be executed"""

    def __init__(self, message, statement=None):
        super().__init__(message)
        self.statement = statement
