import logging
from typing import Iterator, Optional, Union
from fastapi import Depends, FastAPI, HTTPException, Query
from .clients.omdb_client import OmdbClient
from .errors import APIError, OmdbError, ValidationError
from .schemas.omdb_schemas import (
    EpisodeResult,
    ErrorResponse,
    MovieResult,
    QueryData,
    SearchResponse,
    SeriesResult,
)

logger = logging.getLogger(__name__)

app = FastAPI()

ERROR_RESPONSES = {
    400: {'model': ErrorResponse},
    404: {'model': ErrorResponse},
    502: {'model': ErrorResponse},
}


def get_omdb_client() -> Iterator[OmdbClient]:
    with OmdbClient.from_settings() as client:
        yield client


def _to_http_error(e: OmdbError) -> HTTPException:
    if isinstance(e, ValidationError):
        return HTTPException(status_code=400, detail=str(e))
    if isinstance(e, APIError):
        return HTTPException(status_code=404, detail=e.message)
    logger.error("OMDb service error: %s", e)
    return HTTPException(status_code=502, detail=f"OMDb service error: {str(e)}")


def _require_result(result):
    if result is None:
        raise HTTPException(
            status_code=502, detail="OMDb service error: unrecognised result type")
    return result


@app.get('/titles/{imdb_id}',
         response_model=Union[MovieResult, SeriesResult, EpisodeResult],
         responses=ERROR_RESPONSES)
def get_title_by_id(imdb_id: str, client: OmdbClient = Depends(get_omdb_client)):
    try:
        result = client.lookup_by_id(QueryData(imdb_id=imdb_id))
    except OmdbError as e:
        raise _to_http_error(e)
    return _require_result(result)


@app.get('/titles',
         response_model=Union[MovieResult, SeriesResult, EpisodeResult],
         responses=ERROR_RESPONSES)
def get_title(
    title: str,
    type: Optional[str] = Query(None),
    year: Optional[str] = Query(None),
    plot: Optional[str] = Query(None),
    client: OmdbClient = Depends(get_omdb_client),
):
    query = QueryData(title=title, search_type=type, year=year, plot=plot)
    try:
        result = client.lookup_by_title(query)
    except OmdbError as e:
        raise _to_http_error(e)
    return _require_result(result)


@app.get('/search', response_model=SearchResponse, responses=ERROR_RESPONSES)
def search(
    title: str,
    type: Optional[str] = Query(None),
    year: Optional[str] = Query(None),
    page: Optional[str] = Query(None),
    client: OmdbClient = Depends(get_omdb_client),
):
    query = QueryData(title=title, search_type=type, year=year, page=page)
    try:
        return client.search_by_text(query)
    except OmdbError as e:
        raise _to_http_error(e)
