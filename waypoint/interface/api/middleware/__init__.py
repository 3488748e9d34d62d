"""HTTP middleware."""

from .gate import TermsGateMiddleware
from .request_log import RequestLogMiddleware

__all__ = ["RequestLogMiddleware", "TermsGateMiddleware"]
