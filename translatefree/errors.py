class TranslatorError(Exception):
    """Base error for a failed translation call."""

    kind = "translator"
    retryable = False


class EncodingError(TranslatorError):
    kind = "encoding"


class TransportError(TranslatorError):
    """Network failure sending the request or reading the body.

    The only kind worth retrying: the input and the endpoint may be fine.
    """

    kind = "transport"
    retryable = True


class BadRequestError(TranslatorError):
    """The endpoint answered with its HTML "400 Bad Request" page."""

    kind = "bad_request"


class DecodeError(TranslatorError):
    """The body is not JSON of the expected shape."""

    kind = "decode"


class NoContentError(TranslatorError):
    """The decoded response has no sentences."""

    kind = "no_content"
