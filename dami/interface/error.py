"""Interface layer errors."""


class InterfaceError(Exception):
    """Base interface error."""

    pass


class BadRequestError(InterfaceError):
    """Request lacks something the route needs (e.g. the X-Client-Id header)."""

    pass
