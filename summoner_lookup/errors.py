# summoner_lookup/errors.py
from typing import Optional


class ServiceError(Exception):
  """Base for failures that map to a JSON error payload and status code."""
  status_code = 500

  def __init__(self, message: str, details: Optional[str] = None):
    super().__init__(message)
    self.message = message
    self.details = details

  def payload(self) -> dict:
    body = {"error": self.message}
    if self.details:
      body["details"] = self.details
    return body


class InvalidRequest(ServiceError):
  status_code = 400


class NotFound(ServiceError):
  status_code = 404


class RateLimited(ServiceError):
  status_code = 429

  def __init__(self, message: str = "Rate limit exceeded. Please wait a moment and try again.",
               details: Optional[str] = None):
    super().__init__(message, details)


class UpstreamUnavailable(ServiceError):
  status_code = 502

  def __init__(self, message: str, details: Optional[str] = None, upstream_status: Optional[int] = None):
    super().__init__(message, details)
    # None when there was no usable HTTP status (network failure, malformed body)
    self.upstream_status = upstream_status


class InternalError(ServiceError):
  status_code = 500
