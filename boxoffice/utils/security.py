"""
Admin authentication and per-client rate limiting
"""

import threading
import time
from collections import deque
from typing import Callable, Deque, Dict, Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from boxoffice.core.config import settings

security = HTTPBearer()

def verify_admin_token(credentials: HTTPAuthorizationCredentials = Depends(security)):
    """Verify the bearer token guarding catalog mutations"""
    if credentials.credentials != settings.ADMIN_TOKEN:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid admin token"
        )
    return credentials.credentials


class RateLimiter:
    """Sliding one-minute window of request timestamps per client"""

    def __init__(self, window_seconds: float = 60.0, clock: Callable[[], float] = time.monotonic):
        self.window_seconds = window_seconds
        self._clock = clock
        self._hits: Dict[str, Deque[float]] = {}
        self._last_sweep = clock()
        self._lock = threading.Lock()

    def _prune(self, client_id: str, cutoff: float) -> Optional[Deque[float]]:
        hits = self._hits.get(client_id)
        if hits is None:
            return None
        while hits and hits[0] <= cutoff:
            hits.popleft()
        if not hits:
            # Idle clients hold no entry
            del self._hits[client_id]
            return None
        return hits

    def allow(self, client_id: str, limit: Optional[int] = None) -> bool:
        if limit is None:
            limit = settings.RATE_LIMIT_PER_MINUTE

        now = self._clock()
        cutoff = now - self.window_seconds
        with self._lock:
            if now - self._last_sweep >= self.window_seconds:
                for stale_id in list(self._hits):
                    self._prune(stale_id, cutoff)
                self._last_sweep = now

            hits = self._prune(client_id, cutoff)
            if hits is None:
                hits = self._hits[client_id] = deque()

            if len(hits) >= limit:
                return False

            hits.append(now)
            return True

    def tracked_clients(self) -> int:
        """Number of clients with requests inside the current window"""
        with self._lock:
            return len(self._hits)

    def reset(self) -> None:
        with self._lock:
            self._hits.clear()


rate_limiter = RateLimiter()


def get_client_ip(request: Request) -> str:
    """Extract client IP, honouring reverse proxy headers"""
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()

    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip

    return request.client.host if request.client else "unknown"
