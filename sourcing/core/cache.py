"""加载结果缓存

按查询键缓存加载器的成功结果，分配等写操作后按前缀失效，
使下一次读取反映最新数据。默认 TTL 为 0，即不缓存、每次都从数据库读取；
其他流程（例如订单系统）直接写库时不会通知本进程，开启缓存的部署需接受
最长 TTL 的延迟。
"""

import time
from threading import Lock
from typing import Callable, Dict, Hashable, Tuple

from ..config.settings import settings

UNASSIGNED_QUOTES = "unassigned-quotes"
VERIFIED_SUPPLIERS = "verified-suppliers"


class QueryCache:
    def __init__(self, ttl_seconds: float):
        self.ttl_seconds = ttl_seconds
        self._entries: Dict[Tuple[Hashable, ...], Tuple[float, object]] = {}
        # 失效计数（按前缀，以及 clear 的全局计数）；加载期间发生失效时丢弃本次结果
        self._generations: Dict[Hashable, int] = {}
        self._cleared = 0
        self._lock = Lock()

    def get_or_load(self, key: Tuple[Hashable, ...], loader: Callable):
        """命中且未过期时返回缓存；否则调用 loader，仅缓存成功的结果"""
        if self.ttl_seconds <= 0:
            return loader()

        with self._lock:
            entry = self._entries.get(key)
            generation = (self._cleared, self._generations.get(key[0], 0))
        if entry is not None and time.monotonic() - entry[0] < self.ttl_seconds:
            return entry[1]

        result = loader()
        if getattr(result, "error", None) is None:
            with self._lock:
                if (self._cleared, self._generations.get(key[0], 0)) == generation:
                    self._entries[key] = (time.monotonic(), result)
        return result

    def invalidate(self, prefix: Hashable) -> None:
        """删除首个键元素等于 prefix 的全部缓存"""
        with self._lock:
            self._generations[prefix] = self._generations.get(prefix, 0) + 1
            for key in [k for k in self._entries if k[0] == prefix]:
                del self._entries[key]

    def clear(self) -> None:
        with self._lock:
            self._cleared += 1
            self._entries.clear()

    def __contains__(self, key) -> bool:
        return key in self._entries


query_cache = QueryCache(settings.CACHE_TTL_SECONDS)
