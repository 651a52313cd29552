"""Error types raised by the Lumen core.

All of these are local, recoverable conditions. The core raises them;
the CLI and TUI decide how to report them.
"""


class LumenError(RuntimeError):
    pass


class NoActionSelected(LumenError):
    def __init__(self, message: str = "no action selected") -> None:
        super().__init__(message)


class EmptyHistory(LumenError):
    def __init__(self, message: str = "nothing to undo") -> None:
        super().__init__(message)


class UnknownAction(LumenError):
    def __init__(self, word: str) -> None:
        super().__init__(f"unknown action: {word!r}")
        self.word = word


class ConfigError(LumenError):
    pass
