"""Rate limiting configuration using slowapi.

Provides a module-level Limiter instance wired into the FastAPI app in
main.py. The default limit comes from ``RATE_LIMIT_DEFAULT``.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from peoplehub.config import settings

limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.RATE_LIMIT_DEFAULT],
)
