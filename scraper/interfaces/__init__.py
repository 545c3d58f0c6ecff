from .models import (
    Address,
    Blocked,
    ErrorKind,
    Failure,
    NormalizedListing,
    Outcome,
    PlatformId,
    Success,
)

__all__ = [
    "Address",
    "Blocked",
    "ErrorKind",
    "Failure",
    "NormalizedListing",
    "Outcome",
    "PlatformId",
    "Success",
]
