# helpers.py
import time
from collections import defaultdict, deque

from flask import request

# ip -> endpoint -> deque[timestamps]
_RATE = defaultdict(lambda: defaultdict(deque))
_LAST_SWEEP = [0.0]


def client_ip():
    # best-effort IP (ProxyFix rewrites remote_addr behind one proxy hop)
    return (
        request.headers.get("CF-Connecting-IP")
        or request.headers.get("X-Forwarded-For", "").split(",")[0].strip()
        or request.remote_addr
        or "unknown"
    )


def _prune(q, cutoff):
    while q and q[0] <= cutoff:
        q.popleft()


def _sweep(now, window_s):
    """Forget clients with no hits inside the window."""
    cutoff = now - window_s
    for ip in list(_RATE):
        buckets = _RATE[ip]
        for key in list(buckets):
            _prune(buckets[key], cutoff)
            if not buckets[key]:
                del buckets[key]
        if not buckets:
            del _RATE[ip]
    _LAST_SWEEP[0] = now


def rate_limit(key: str, limit: int, window_s: int):
    """
    key: e.g. "api_cipher"
    limit: requests allowed
    window_s: sliding window in seconds
    """
    ip = client_ip()
    now = time.time()

    if now - _LAST_SWEEP[0] >= window_s:
        _sweep(now, window_s)

    q = _RATE[ip][key]
    # drop old
    _prune(q, now - window_s)

    if len(q) >= limit:
        return False, ip

    q.append(now)
    return True, ip


def reset_rate_limits():
    _RATE.clear()
    _LAST_SWEEP[0] = 0.0


def get_payload():
    """JSON body as (text, cipher, key, options); missing or null fields come back empty."""
    data = request.get_json(force=True, silent=True)
    if not isinstance(data, dict):
        data = {}
    text = data.get("text")
    text = "" if text is None else str(text)
    cipher = str(data.get("cipher") or "").strip().lower()
    key = data.get("key")
    key = "" if key is None else str(key)

    options = data.get("options") or {}
    if not isinstance(options, dict):
        options = {}
    return text, cipher, key, options
