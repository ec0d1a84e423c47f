"""Redis-backed rate limiting."""
import time


class RateLimiter:
    """Sliding-window request limiter with Redis (graceful fallback to in-memory).

    Only request timestamps are stored, never prompt text.
    """

    def __init__(
        self,
        redis_url: str = "redis://localhost:6379/0",
        max_requests: int = 100,
        window_seconds: int = 900,
    ):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self.redis = None
        self._memory_hits: dict[str, list[float]] = {}
        self._last_sweep = 0.0
        try:
            import redis as redis_lib
            self.redis = redis_lib.from_url(redis_url, decode_responses=True)
            self.redis.ping()
        except Exception:
            self.redis = None

    def allow(self, client_id) -> bool:
        """Record a request and return True if the client is within the limit."""
        now = time.time()
        key = str(client_id)
        if self.redis:
            rkey = f"rate:{key}"
            pipe = self.redis.pipeline()
            pipe.zadd(rkey, {str(now): now})
            pipe.zremrangebyscore(rkey, 0, now - self.window_seconds)
            pipe.zcard(rkey)
            pipe.expire(rkey, self.window_seconds * 2)
            results = pipe.execute()
            return results[2] <= self.max_requests

        self._sweep(now)
        hits = [t for t in self._memory_hits.get(key, []) if t > now - self.window_seconds]
        hits.append(now)
        self._memory_hits[key] = hits
        return len(hits) <= self.max_requests

    def _sweep(self, now: float):
        """Forget in-memory clients idle for a whole window, at most once per window."""
        if now - self._last_sweep < self.window_seconds:
            return
        self._last_sweep = now
        cutoff = now - self.window_seconds
        idle = [k for k, hits in self._memory_hits.items() if not hits or hits[-1] <= cutoff]
        for k in idle:
            del self._memory_hits[k]

    def remaining(self, client_id) -> int:
        """Requests left in the current window (does not count as a request)."""
        now = time.time()
        key = str(client_id)
        if self.redis:
            rkey = f"rate:{key}"
            used = self.redis.zcount(rkey, now - self.window_seconds, "+inf")
        else:
            used = sum(1 for t in self._memory_hits.get(key, []) if t > now - self.window_seconds)
        return max(0, self.max_requests - used)

    def reset(self, client_id):
        key = str(client_id)
        if self.redis:
            self.redis.delete(f"rate:{key}")
        else:
            self._memory_hits.pop(key, None)

    @property
    def backend(self) -> str:
        return "redis" if self.redis else "memory"
