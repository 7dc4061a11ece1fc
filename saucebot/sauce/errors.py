"""Errors raised by the sauce lookup pipeline.

Every error is terminal for the lookup that raised it and carries a message
that can be shown to the user as-is.
"""

TECHNICAL = "[Technical Difficulties]"
NO_SAUCE = "Couldn't find sauce :("


class SauceError(Exception):
    """Base class for lookup failures."""


class ImageReadError(SauceError):
    """The local image file could not be opened or read."""


class RequestBuildError(SauceError):
    """The outbound request could not be constructed."""


class NetworkError(SauceError):
    """The request could not be delivered or no response arrived."""


class ResponseReadError(SauceError):
    """The response body could not be read."""


class UploadError(SauceError):
    """Uploading the image to a backend failed."""


class DecodeError(SauceError):
    """The backend answered with a body that is not the expected JSON."""


class NoResultsError(SauceError):
    """The backend was reached but returned nothing to work with."""


class NoSauceError(SauceError):
    """The results page was fetched but holds no usable sauce."""
