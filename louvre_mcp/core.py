import os
import logging
from typing import Any, Dict, Optional
from urllib.parse import urlencode, urlsplit, urlunsplit

import requests
from dotenv import load_dotenv

from .constants import BASE_URL, HEADERS, TIMEOUT
from .errors import FetchError

load_dotenv()

# 配置日志 (stdout 留给 MCP stdio 传输，日志走 stderr)
logging.basicConfig(
    level=os.getenv("LOUVRE_LOG_LEVEL", "INFO").upper(),
    format='%(asctime)s - %(levelname)s - %(message)s',
    datefmt='%H:%M:%S'
)
logger = logging.getLogger(__name__)


class HttpFetcher:
    """Single-attempt GET requests against the collection origin."""

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout if timeout is not None else self._load_timeout()
        self.session = self._create_session()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self) -> None:
        self.session.close()

    def _load_timeout(self) -> float:
        """从环境变量读取超时设置"""
        raw = os.getenv("LOUVRE_TIMEOUT")
        if not raw:
            return TIMEOUT
        try:
            return float(raw)
        except ValueError:
            logger.warning(f"Ignoring invalid LOUVRE_TIMEOUT={raw!r}, using {TIMEOUT}s")
            return TIMEOUT

    def _create_session(self) -> requests.Session:
        """创建 Session (不挂载重试: 失败直接交给调用方决定是否回退)"""
        session = requests.Session()
        session.headers.update(HEADERS)
        user_agent = os.getenv("LOUVRE_USER_AGENT")
        if user_agent:
            session.headers["User-Agent"] = user_agent
        return session

    def build_url(self, path: str, params: Optional[Dict[str, Any]] = None, as_json: bool = False) -> str:
        """Join ``path`` with the origin and append the query string.

        Absolute URLs are used as given. With ``as_json`` a ``.json`` suffix is
        added to the path (before any query string) unless it already ends
        with one. Parameters whose value is ``None`` are left out.
        """
        if path.startswith(("http://", "https://")):
            url = path
        else:
            url = f"{BASE_URL.rstrip('/')}/{path.lstrip('/')}"

        scheme, netloc, url_path, query, fragment = urlsplit(url)
        if as_json and not url_path.endswith(".json"):
            url_path += ".json"

        extra = {key: str(value) for key, value in (params or {}).items() if value is not None}
        if extra:
            query = "&".join(part for part in (query, urlencode(extra)) if part)
        return urlunsplit((scheme, netloc, url_path, query, fragment))

    def _get(self, url: str) -> requests.Response:
        try:
            resp = self.session.get(url, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            logger.warning(f"GET {url} failed: {e}")
            raise FetchError(url, e) from e
        return resp

    def fetch_json(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        url = self.build_url(path, params, as_json=True)
        logger.info(f"Fetching JSON: {url}")
        resp = self._get(url)
        try:
            return resp.json()
        except ValueError as e:
            logger.warning(f"Invalid JSON from {url}: {e}")
            raise FetchError(url, e) from e

    def fetch_html(self, url: str, params: Optional[Dict[str, Any]] = None) -> str:
        url = self.build_url(url, params)
        logger.info(f"Fetching HTML: {url}")
        return self._get(url).text
