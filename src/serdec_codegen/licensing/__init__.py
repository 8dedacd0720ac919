"""Licensing exports."""

from .license_notices import (
    DEFAULT_LICENSE_NAME,
    LICENSE_NOTICES,
    LicenseNotice,
    UnknownLicenseError,
    get_license_notice,
)

__all__ = [
    "DEFAULT_LICENSE_NAME",
    "LICENSE_NOTICES",
    "LicenseNotice",
    "UnknownLicenseError",
    "get_license_notice",
]
