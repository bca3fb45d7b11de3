# core/rate_limiter.py

from collections import defaultdict
from threading import Lock
from typing import Dict, List, Optional, Tuple
import time

from fastapi import HTTPException, Request

from core.config import settings


# In-memory sliding window, per process.
# Only login attempts go through here.
_rate_limit_store: Dict[str, List[float]] = defaultdict(list)
_lock = Lock()

# Identifiers idle for a whole window are dropped at most this often
_SWEEP_INTERVAL_SECONDS = 60
_last_sweep = 0.0


def check_rate_limit(
    identifier: str,
    max_requests: int = 10,
    window_seconds: int = 60,
) -> Tuple[bool, int]:
    """
    Check if a request should be rate limited.

    Args:
        identifier: Unique identifier (IP address, username, etc.)
        max_requests: Maximum number of requests allowed
        window_seconds: Time window in seconds

    Returns:
        Tuple of (allowed: bool, remaining: int)
    """
    global _last_sweep

    now = time.time()
    window_start = now - window_seconds

    with _lock:
        if now - _last_sweep >= _SWEEP_INTERVAL_SECONDS:
            _sweep(window_start)
            _last_sweep = now

        # Drop entries that fell out of the window
        requests = [ts for ts in _rate_limit_store[identifier] if ts > window_start]

        if len(requests) >= max_requests:
            _rate_limit_store[identifier] = requests
            return False, 0

        requests.append(now)
        _rate_limit_store[identifier] = requests
        return True, max_requests - len(requests)


def _sweep(window_start: float) -> None:
    """Forget identifiers whose newest attempt is outside the window. Caller holds _lock."""
    stale = [key for key, stamps in _rate_limit_store.items() if not stamps or stamps[-1] <= window_start]
    for key in stale:
        del _rate_limit_store[key]


def get_client_ip(request: Request) -> str:
    client_ip = request.client.host if request.client else "unknown"

    # Behind a proxy the first forwarded hop is the original client
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        client_ip = forwarded_for.split(",")[0].strip()

    return client_ip


def get_rate_limit_identifier(request: Request, username: Optional[str] = None) -> str:
    """
    Key for login throttling: client IP, narrowed to the username when given,
    so one noisy account doesn't lock out everyone behind the same NAT.
    """
    client_ip = get_client_ip(request)
    if username:
        return f"login:{client_ip}:{username.lower()}"
    return f"ip:{client_ip}"


def require_rate_limit(
    request: Request,
    identifier: Optional[str] = None,
    max_requests: Optional[int] = None,
    window_seconds: Optional[int] = None,
) -> int:
    """
    Raise 429 Too Many Requests when the identifier is over its limit.
    Defaults come from LOGIN_RATE_LIMIT_MAX / LOGIN_RATE_LIMIT_WINDOW_SECONDS.
    """
    if identifier is None:
        identifier = get_rate_limit_identifier(request)
    max_requests = max_requests or settings.LOGIN_RATE_LIMIT_MAX
    window_seconds = window_seconds or settings.LOGIN_RATE_LIMIT_WINDOW_SECONDS

    allowed, remaining = check_rate_limit(identifier, max_requests, window_seconds)

    if not allowed:
        raise HTTPException(
            status_code=429,
            detail=f"Too many login attempts. Try again in {window_seconds} seconds.",
            headers={
                "X-RateLimit-Limit": str(max_requests),
                "X-RateLimit-Window": str(window_seconds),
                "Retry-After": str(window_seconds),
            },
        )

    return remaining


def reset_rate_limits(identifier: Optional[str] = None) -> None:
    """Forget recorded attempts (all of them, or one identifier)."""
    global _last_sweep

    with _lock:
        if identifier is None:
            _rate_limit_store.clear()
            _last_sweep = 0.0
        else:
            _rate_limit_store.pop(identifier, None)
