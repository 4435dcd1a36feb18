class FasalError(Exception):
    """Base class for collaborator failures the HTTP layer knows how to map."""


class InvalidPincodeError(FasalError, ValueError):
    """Pincode is not a 6-digit Indian postal code. Never retried."""


class PincodeNotFoundError(FasalError):
    pass


class ExternalServiceError(FasalError):
    """Upstream API failed, timed out or is not configured."""
