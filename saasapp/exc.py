class RequestFailed(Exception):  # noqa: N818
    """
    Exception raised when a request to the projects API fails for any reason:
    the backend could not be reached, answered with a non-success status, or
    returned a body that could not be parsed.
    """

    def __init__(self, action: str, reason: str, status_code: int | None = None):
        self.action = action
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"Failed to {action}: {reason}")
