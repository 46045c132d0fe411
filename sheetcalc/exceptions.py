# exceptions.py
"""
Fatal errors. Any of these stops the whole run; a bad cell never raises,
it evaluates to the error marker instead.
"""


class GridError(Exception):
    """Base class for errors that abort an evaluation run."""


class InvalidDimensions(GridError):
    def __init__(self, num_rows, num_cols):
        self.num_rows = num_rows
        self.num_cols = num_cols
        super().__init__("Invalid number of rows or columns")


class InconsistentColumns(GridError):
    def __init__(self, row_number: int, expected: int, found: int):
        # row_number is 1-based
        self.row_number = row_number
        self.expected = expected
        self.found = found
        super().__init__(
            f"Inconsistent number of columns in row {row_number}: "
            f"expected {expected}, found {found}"
        )


class SourceError(GridError):
    def __init__(self, path, message: str):
        self.path = path
        super().__init__(message)


class SourceNotFound(SourceError):
    def __init__(self, path):
        super().__init__(path, f"The CSV file does not exist: {path}")


class SourceEmpty(SourceError):
    def __init__(self, path):
        super().__init__(path, f"The CSV file is empty: {path}")


class SourceDecodeError(SourceError):
    def __init__(self, path, encoding: str):
        self.encoding = encoding
        super().__init__(path, f"The CSV file is not valid {encoding}: {path}")
