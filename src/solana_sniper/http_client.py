from typing import Any, Dict, Optional

import requests
from requests.adapters import HTTPAdapter, Retry


class HttpClient:
    """Session wrapper used for the startup price lookup.

    ``max_retries=0`` and ``timeout=None`` mean a single attempt that waits as
    long as the remote end keeps the connection open.
    """

    def __init__(self, timeout: Optional[float] = None, max_retries: int = 0, user_agent: str = "solana-sniper/1.0") -> None:
        self.timeout = timeout
        self.session = requests.Session()
        retry_policy = Retry(total=max_retries, raise_on_status=False)
        adapter = HTTPAdapter(max_retries=retry_policy, pool_connections=1, pool_maxsize=2)
        self.session.mount("https://", adapter)
        self.session.mount("http://", adapter)
        self.session.headers.update({"User-Agent": user_agent})

    def get_json(self, url: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        response = self.session.get(url, params=params, timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def close(self) -> None:
        self.session.close()
