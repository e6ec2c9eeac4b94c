"""
Dialog Kit: exception types shared by the core and the dialog layer.
"""


class MissingCollaboratorError(ValueError):
    """Raised at construction when a dialog is missing something it cannot work without
    (settings store, connection, dialog name)."""


class CronParseError(ValueError):
    """Raised when a cron expression cannot be parsed for description."""

    def __init__(self, expression: str, reason: str):
        super().__init__(f"Invalid cron expression '{expression}': {reason}")
        self.expression = expression
        self.reason = reason
