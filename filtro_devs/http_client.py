from __future__ import annotations

import time
from typing import Dict

import requests


class HttpClient:
    def __init__(
        self,
        headers: Dict[str, str],
        *,
        timeout: int = 20,
        retry_delay: float = 1.0,
        max_attempts: int = 4,
    ):
        self.session = requests.Session()
        self.session.headers.update(headers)
        self.timeout = timeout
        self.retry_delay = retry_delay
        self.max_attempts = max(1, max_attempts)

    def fetch(self, url: str, *, timeout: int | None = None) -> requests.Response:
        """GET com novas tentativas em falhas de conexão e respostas 5xx.

        Após ``max_attempts`` tentativas, a última exceção é propagada.
        """
        last_error: requests.RequestException | None = None
        for attempt in range(1, self.max_attempts + 1):
            if attempt > 1:
                time.sleep(self.retry_delay)
            try:
                resp = self.session.get(url, timeout=timeout or self.timeout)
            except requests.RequestException as e:
                last_error = e
                continue
            if resp.status_code < 500:
                return resp
            last_error = requests.HTTPError(f"Status {resp.status_code}", response=resp)
        raise last_error
