import requests

from . import config


class SimilarityClient:
    """Thin HTTP client for the similarity service."""

    def __init__(self, base_url=None, timeout=10, session=None):
        self.base_url = (base_url or config.SIMILARITY_URL).rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _url(self, path):
        return f"{self.base_url}/api/{path}"

    def check(self, text1: str, text2: str) -> dict:
        r = self.session.post(
            self._url("similarity"),
            json={"text1": text1 or "", "text2": text2 or ""},
            timeout=self.timeout,
        )
        # 400 trae el mensaje de validacion
        if r.status_code == 400:
            return r.json()
        r.raise_for_status()
        return r.json()

    def submissions(self) -> list:
        r = self.session.get(self._url("submissions"), timeout=self.timeout)
        r.raise_for_status()
        return r.json().get("submissions", [])

    def health(self) -> dict:
        r = self.session.get(self._url("health"), timeout=self.timeout)
        r.raise_for_status()
        return r.json()
