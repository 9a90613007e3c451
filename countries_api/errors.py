from __future__ import annotations

from typing import Optional


class CountryDataError(Exception):
    """Base class for everything the country data pipeline raises."""

    user_message = "Something went wrong"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.user_message)


# Per-candidate failures. The fetcher catches these and moves on to the next
# source; they never reach callers of CountryDataClient.


class SourceError(CountryDataError):
    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"{url}: {reason}")


class SourceUnreachable(SourceError):
    pass


class SourceRejected(SourceError):
    def __init__(self, url: str, status_code: int):
        self.status_code = status_code
        super().__init__(url, f"HTTP {status_code}")


class MalformedResponse(SourceError):
    pass


# Fatal to the operation, surfaced to callers.


class DataUnavailable(CountryDataError):
    user_message = (
        "All API endpoints failed and no fallback data available. "
        "Please check your internet connection."
    )


class LookupNotFound(CountryDataError):
    user_message = "Country not found"


class GeolocationError(CountryDataError):
    user_message = "Failed to get your location"


class GeolocationDenied(GeolocationError):
    user_message = "Please allow location access"


class GeolocationUnavailable(GeolocationError):
    user_message = "Location unavailable"


class GeolocationTimeout(GeolocationError):
    user_message = "Location request timed out"
