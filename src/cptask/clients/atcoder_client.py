"""
AtCoder HTTP Client

Downloads task pages
"""

from typing import Optional

import requests

from ..errors import TransportError
from ..utils.logger import log_debug


class AtCoderClient:
    """
    AtCoder Client

    Issues one GET request per task page and returns the decoded body
    """

    def __init__(
        self,
        base_url: str = "https://atcoder.jp",
        user_agent: str = "cptask",
        timeout: int = 30
    ):
        """
        Initialize AtCoder Client

        Args:
            base_url: Site root, without trailing slash
            user_agent: User-Agent header sent with every request
            timeout: HTTP request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({"User-Agent": user_agent})

    def build_task_url(self, contest: str, problem_id: str, lang: Optional[str] = None) -> str:
        """
        Build the task page URL

        Args:
            contest: Contest id (e.g. "abc322")
            problem_id: Problem id (e.g. "abc322_a")
            lang: Optional language query parameter ("ja" / "en")

        Returns:
            str: Task page URL
        """
        url = f"{self.base_url}/contests/{contest}/tasks/{problem_id}"
        if lang:
            url += f"?lang={lang}"
        return url

    def fetch_page(self, url: str) -> str:
        """
        Download a page as text

        Raises:
            TransportError: On connection failure or non-2xx status
        """
        log_debug(f"GET {url}")
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(f"failed to download {url}: {e}", url) from e

        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            raise TransportError(
                f"server returned error for {url}: {e}", url, status_code=response.status_code
            ) from e

        log_debug(f"Received {len(response.content)} bytes from {url}")
        # Pages without a declared charset are UTF-8, not ISO-8859-1
        if "charset" not in response.headers.get("Content-Type", "").lower():
            response.encoding = "utf-8"
        return response.text

    def fetch_task_page(self, contest: str, problem_id: str, lang: Optional[str] = None) -> str:
        return self.fetch_page(self.build_task_url(contest, problem_id, lang))

    def close(self):
        self.session.close()
