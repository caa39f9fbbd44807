class SetupError(Exception):
    """A socket setup step failed; carries the step label and the OSError behind it."""

    def __init__(self, step, cause=None):
        super().__init__(step)
        self.step = step
        self.cause = cause
