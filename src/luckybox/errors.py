class SelectionError(RuntimeError):
    """A mandatory menu choice could not be read from the player.

    Raised by prompt surfaces; the console entry point reports it and exits
    with status 1. Nothing in the game retries a failed selection.
    """

    def __init__(self, label: str, reason: str):
        super().__init__(f"{label} failed, {reason}")
        self.label = label
        self.reason = reason
