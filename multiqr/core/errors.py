# Errors raised by the multiqr core.


class MultiQrError(Exception):
    """Base class for errors the user can fix by changing input or options."""


class InvalidVersion(MultiQrError, ValueError):
    pass


class EmptyContent(MultiQrError, ValueError):
    pass


class InvalidInput(MultiQrError, ValueError):
    pass


class CapacityExceeded(MultiQrError):
    """The probed data does not fit in any QR code version."""


class EncodeProbeFailed(RuntimeError):
    """The QR encoder failed for a reason other than capacity.

    Never expected in correct operation: the encoder broke or reported a size
    class multiqr does not handle (micro QR). Kept outside MultiQrError so it
    is never reported as a user error.
    """
