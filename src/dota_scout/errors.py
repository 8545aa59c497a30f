"""Errors raised by match normalization."""


class MalformedInputError(ValueError):
    """A raw match record cannot be turned into a Match.

    Raised for missing mandatory fields (match id, start time, players) or
    when a side does not hold exactly five participants. Assembly is
    all-or-nothing, so no partial Match accompanies this error.
    """

    def __init__(self, message: str, match_id: int | None = None):
        self.match_id = match_id
        if match_id is not None:
            message = f"match {match_id}: {message}"
        super().__init__(message)
