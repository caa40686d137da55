"""Failure kinds raised by the credential service."""


class InvalidToken(Exception):
    """Base class for every reason a bearer token is refused."""


class MalformedToken(InvalidToken):
    """The token is not a decodable JWT."""


class BadTokenSignature(InvalidToken):
    """The signature does not match the current secret."""


class ExpiredToken(InvalidToken):
    """The validity window has passed."""


class MissingIdentity(InvalidToken):
    """The token verified but carries no account identifier."""
