"""Exception types for quickopen."""


class QuickOpenError(Exception):
    """Base exception for quickopen errors."""

    pass


class ConfigurationInvalidError(QuickOpenError):
    """The stored location list is malformed (paths/patterns length mismatch).

    Callers treat the location list as empty for the current session and
    show a warning once.
    """

    def __init__(self, paths_count: int, patterns_count: int):
        self.paths_count = paths_count
        self.patterns_count = patterns_count
        super().__init__(
            f"Open File configuration file invalid! "
            f"({paths_count} paths, {patterns_count} patterns)"
        )


class ConfigWriteError(QuickOpenError):
    """The location list could not be persisted."""

    pass


class SessionClosedError(QuickOpenError):
    """Operation attempted on a session that is not accepting it."""

    pass
