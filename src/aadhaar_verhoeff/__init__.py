"""
aadhaar_verhoeff - Aadhaar number validation with the Verhoeff checksum

Usage:
    from aadhaar_verhoeff import validate, generate_check_digit

    validate("2341 2341 2346")                # True
    generate_check_digit("23412341234")       # 6

    # Remote API
    from aadhaar_verhoeff import AadhaarClient

    client = AadhaarClient("http://localhost:8080")
    client.validate("234123412346")
"""

from .aadhaar import (
    InvalidFormat,
    checksum,
    complete,
    explain,
    format_number,
    generate_check_digit,
    validate,
)
from .client import AadhaarClient, ApiError
from .verhoeff import FoldStep, check_digit, fold, is_valid, trace

__version__ = "1.0.0"
__all__ = [
    "InvalidFormat",
    "validate",
    "generate_check_digit",
    "complete",
    "checksum",
    "explain",
    "format_number",
    "AadhaarClient",
    "ApiError",
    "FoldStep",
    "fold",
    "trace",
    "check_digit",
    "is_valid",
]
