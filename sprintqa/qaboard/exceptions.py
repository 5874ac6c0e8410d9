class QaBoardException(Exception):
    """
    Base exception for qaboard module
    """
    pass


class TrackerError(QaBoardException):
    """
    Raised when a Jira request fails

    Attributes:
        status: HTTP status code, or None when no response was received
        body_excerpt: First characters of the response body, if any
    """

    def __init__(self, message, status=None, body_excerpt=''):
        super().__init__(message)
        self.status = status
        self.body_excerpt = body_excerpt


class TrackerHttpError(TrackerError):
    """
    Raised when Jira answers with a non-2xx status
    """
    pass


class TrackerParseError(TrackerError):
    """
    Raised when a Jira response body is not valid JSON
    """
    pass


class TrackerConnectionError(TrackerError):
    """
    Raised when Jira cannot be reached (DNS, refused, timeout)
    """
    pass


class SprintFetchError(QaBoardException):
    """
    Raised when sprint issues cannot be assembled from Jira
    """
    pass


class StoreError(QaBoardException):
    """
    Raised when checklist state cannot be read or written
    """
    pass


class ConfigMissing(QaBoardException):
    """
    Raised when required Jira settings are absent
    """

    def __init__(self, missing):
        self.missing = list(missing)
        super().__init__(
            f"Missing Jira configuration: {', '.join(self.missing)}"
        )
