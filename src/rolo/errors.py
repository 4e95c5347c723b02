"""
rolo exception hierarchy.

Layout errors signal "cannot format with this configuration"; they are
recoverable and carry the numbers that made the configuration invalid.
"""


class RoloError(Exception):
    """Base for every error rolo raises on purpose."""

    exit_code = 1


class LayoutError(RoloError):
    """A layout cannot be produced with the requested configuration."""


class InvalidColumnCount(LayoutError):
    def __init__(self, columns: int):
        self.columns = columns
        super().__init__(f"Invalid column count: {columns}")


class WidthTooSmall(LayoutError):
    """Configured width cannot hold the gaps between columns."""

    def __init__(self, width: int, required: int):
        self.width = width
        self.required = required
        super().__init__(
            f"Width {width} too small: column gaps alone take {required}"
        )


class ColumnTooNarrow(LayoutError):
    def __init__(self, column_width: int, minimum: int):
        self.column_width = column_width
        self.minimum = minimum
        super().__init__(
            f"Column width {column_width} is below the minimum of {minimum}"
        )


class InvalidWidth(RoloError):
    """A width value given by the user is not usable."""


class StreamError(RoloError):
    """Reading input or writing output failed."""
