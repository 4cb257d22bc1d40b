import logging
from typing import Dict, Optional
import httpx
from ..config import DEFAULT_URL, settings
from ..errors import (
    APIError,
    ConfigurationError,
    TransportError,
    UnexpectedStatusError,
)
from ..schemas.omdb_schemas import QueryData, SearchResponse, TitleResult
from ..utils.utils_omdb_client import (
    build_id_params,
    build_search_params,
    build_title_params,
    decode_search_response,
    decode_title_result,
)

logger = logging.getLogger(__name__)


class OmdbClient:
    """
    Synchronous client for the OMDb API.

    The httpx.Client is owned by the caller, who configures timeouts on it
    and closes it. Each operation is a single GET round trip; nothing is
    retried or cached.
    """

    def __init__(
        self,
        api_key: str,
        http_client: Optional[httpx.Client],
        base_url: str = DEFAULT_URL,
        strict: bool = False
    ):
        self.api_key = api_key
        self.http_client = http_client
        self.base_url = base_url
        self.strict = strict
        self._owns_http_client = False

    @classmethod
    def from_settings(cls, http_client: Optional[httpx.Client] = None) -> 'OmdbClient':
        """
        Build a client from environment settings. When no httpx.Client is
        given, one is created with the configured timeout and closed by
        close().
        """
        owns = http_client is None
        if owns:
            http_client = httpx.Client(timeout=settings.OMDB_TIMEOUT)
        client = cls(
            settings.OMDB_API_KEY,
            http_client,
            base_url=settings.OMDB_BASE_URL,
            strict=settings.OMDB_STRICT_KINDS,
        )
        client._owns_http_client = owns
        return client

    def close(self) -> None:
        if self._owns_http_client and self.http_client is not None:
            self.http_client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def lookup_by_id(self, query: QueryData) -> Optional[TitleResult]:
        """
        Look up a single movie, series or episode by its IMDb id.

        :param query: QueryData with imdb_id set; other fields are ignored.
        :return: MovieResult, SeriesResult or EpisodeResult.
        """
        params = build_id_params(query)
        return self._lookup(params)

    def lookup_by_title(self, query: QueryData) -> Optional[TitleResult]:
        """
        Look up a single movie, series or episode by its exact title,
        optionally narrowed by type and year.

        :param query: QueryData with title set.
        :return: MovieResult, SeriesResult or EpisodeResult.
        """
        params = build_title_params(query)
        return self._lookup(params)

    def search_by_text(self, query: QueryData) -> SearchResponse:
        """
        Free-text search returning one page of lightweight summaries.

        :param query: QueryData whose title is the search text.
        :return: SearchResponse with the matching summaries.
        """
        params = build_search_params(query)
        response = self._request(params)
        try:
            body = response.content
        finally:
            response.close()
        try:
            return decode_search_response(body)
        except APIError as e:
            logger.warning("OMDb search failed: %s", e.message)
            raise

    def _lookup(self, params: Dict[str, str]) -> Optional[TitleResult]:
        response = self._request(params)
        try:
            body = response.content
        finally:
            response.close()
        try:
            return decode_title_result(body, strict=self.strict)
        except APIError as e:
            logger.warning("OMDb lookup failed: %s", e.message)
            raise

    def _request(self, params: Dict[str, str]) -> httpx.Response:
        """
        Send a GET to the OMDb endpoint with the API key added.
        The caller must close the returned response after reading it.

        :param params: Validated query string parameters.
        :return: Response with HTTP status 200.
        """
        if self.http_client is None:
            raise ConfigurationError("httpx.Client is not provided")
        if not self.api_key:
            raise ConfigurationError("Missing OMDb API key")

        logger.debug("GET %s params=%s", self.base_url, sorted(params))
        params = {**params, 'apikey': self.api_key}
        try:
            response = self.http_client.get(self.base_url, params=params)
        except httpx.InvalidURL as e:
            raise ConfigurationError(
                f"Invalid OMDb base URL {self.base_url!r}: {e}") from e
        except httpx.RequestError as e:
            logger.warning("OMDb request could not be sent: %s", e)
            raise TransportError(f"OMDb request failed: {e}") from e

        if response.status_code != 200:
            try:
                snippet = (response.text or '')[:400]
            finally:
                response.close()
            logger.warning("OMDb responded with HTTP %s", response.status_code)
            raise UnexpectedStatusError(
                response.status_code, body_snippet=snippet)
        return response
