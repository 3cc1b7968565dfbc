"""Custom exception hierarchy for simplechalk.

Styling itself never fails: absent signals degrade to plain text. These
exceptions cover programming errors at the edges, such as asking the style table
for a name outside its closed set or passing invalid configuration.
"""


class SimpleChalkError(Exception):
    """Base exception for all simplechalk errors."""

    pass


class UnknownStyleError(SimpleChalkError, KeyError):
    """Exception raised when a style name is not part of the closed set.

    Attributes:
        name: The style name that was requested
        known: Sorted list of valid style names
    """

    def __init__(self, name: str, known: list[str]) -> None:
        """Initialize UnknownStyleError with the requested name.

        Args:
            name: The style name that failed lookup
            known: All style names the table defines
        """
        self.name = name
        self.known = sorted(known)
        super().__init__(
            f"Unknown style '{name}'. Known styles: {', '.join(self.known)}"
        )

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the readable message instead.
        return str(self.args[0])


class ConfigError(SimpleChalkError):
    """Exception raised for invalid configuration.

    Attributes:
        field: The configuration field that caused the error
        message: Human-readable error message describing the issue
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize ConfigError with field and message.

        Args:
            field: Configuration field name where error occurred
            message: Descriptive error message
        """
        self.field = field
        self.message = message
        super().__init__(f"Configuration error in '{field}': {message}")
