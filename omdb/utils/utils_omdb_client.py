import logging
import re
from typing import Dict, Optional, Type, Union
from pydantic import ValidationError as PydanticValidationError
from ..errors import (
    APIError,
    DecodeError,
    UnknownResultKindError,
    ValidationError,
)
from ..schemas.omdb_schemas import (
    EpisodeResult,
    MovieResult,
    QueryData,
    ResultEnvelope,
    SearchResponse,
    SeriesResult,
    TitleResult,
)

logger = logging.getLogger(__name__)

SEARCH_TYPES = ('movie', 'series', 'episode')
PLOT_LENGTHS = ('short', 'full')
EARLIEST_YEAR = 1888   # Roundhay Garden Scene, earliest surviving film
MIN_PAGE = 1
MAX_PAGE = 100
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

RESULT_MODELS: Dict[str, Type[TitleResult]] = {
    'movie': MovieResult,
    'series': SeriesResult,
    'episode': EpisodeResult,
}


def validate_search_type(search_type: Optional[str]) -> None:
    if search_type and search_type not in SEARCH_TYPES:
        raise ValidationError(
            "search_type should be either blank or one of following: "
            "movie, series, episode"
        )


def validate_year(year: Optional[str]) -> None:
    """
    Year must be blank or a whole number no earlier than 1888.

    :param year: Year as supplied by the caller.
    :raises ValidationError: If the year is not a number or too early.
    """
    if not year:
        return
    value = _parse_int(year)
    if value is None:
        raise ValidationError("year should be either blank or a valid number")
    if value < EARLIEST_YEAR:
        raise ValidationError(
            f"year should be either blank or greater than {EARLIEST_YEAR - 1}")


def validate_plot(plot: Optional[str]) -> None:
    if plot and plot not in PLOT_LENGTHS:
        raise ValidationError(
            "plot should be either blank or one of following: short, full")


def validate_page(page: Optional[str]) -> None:
    """
    Page must be blank or a whole number between 1 and 100, inclusive.

    :param page: Page number as supplied by the caller.
    :raises ValidationError: If the page is not a number or out of range.
    """
    if not page:
        return
    value = _parse_int(page)
    if value is None:
        raise ValidationError("page should be either blank or a valid number")
    if not MIN_PAGE <= value <= MAX_PAGE:
        raise ValidationError(
            f"page should be either blank or between {MIN_PAGE} to "
            f"{MAX_PAGE} (inclusive of both)"
        )


def build_id_params(query: QueryData) -> Dict[str, str]:
    """
    Build request parameters for a lookup by IMDb id.
    Other query fields are ignored as the id is unique.

    :param query: QueryData carrying the IMDb id.
    :return: Query string parameters.
    """
    if not query.imdb_id:
        raise ValidationError("imdb_id is missing from the query")
    return {'i': query.imdb_id}


def build_title_params(query: QueryData) -> Dict[str, str]:
    """
    Validate and build request parameters for a lookup by exact title.
    Only supplied fields are sent.

    :param query: QueryData carrying the title and optional filters.
    :return: Query string parameters.
    """
    if not query.title:
        raise ValidationError("title is missing from the query")
    validate_search_type(query.search_type)
    validate_year(query.year)
    validate_plot(query.plot)

    params = {'t': query.title}
    if query.search_type:
        params['type'] = query.search_type
    if query.year:
        params['y'] = query.year
    if query.plot:
        params['plot'] = query.plot
    return params


def build_search_params(query: QueryData) -> Dict[str, str]:
    """
    Validate and build request parameters for a free-text search.
    The query title is used as the search text.

    :param query: QueryData carrying the search text and optional filters.
    :return: Query string parameters.
    """
    if not query.title:
        raise ValidationError("text to search (title) is missing from the query")
    validate_search_type(query.search_type)
    validate_year(query.year)
    validate_page(query.page)

    params = {'s': query.title}
    if query.search_type:
        params['type'] = query.search_type
    if query.year:
        params['y'] = query.year
    if query.page:
        params['page'] = query.page
    return params


def decode_title_result(
    body: Union[bytes, str],
    strict: bool = False
) -> Optional[TitleResult]:
    """
    Decode a lookup payload in two passes: first into a ResultEnvelope to
    check the reported status and read the `Type` discriminator, then into
    the matching result model.

    :param body: Raw JSON response body.
    :param strict: Raise UnknownResultKindError for an unrecognised `Type`
        instead of returning None.
    :return: MovieResult, SeriesResult or EpisodeResult; None when the
        discriminator is unrecognised and strict is False.
    """
    envelope = _validate_json(ResultEnvelope, body)
    if not envelope.succeeded:
        raise APIError(envelope.error)

    model = RESULT_MODELS.get(envelope.type)
    if model is None:
        if strict:
            raise UnknownResultKindError(envelope.type)
        logger.warning("Ignoring OMDb result with unrecognised type %r",
                       envelope.type)
        return None
    return _validate_json(model, body)


def decode_search_response(body: Union[bytes, str]) -> SearchResponse:
    """
    Decode a free-text search payload. The search endpoint always answers in
    the same shape so no envelope pass is needed.

    :param body: Raw JSON response body.
    :return: SearchResponse with the page of summaries.
    """
    response = _validate_json(SearchResponse, body)
    if not response.succeeded:
        raise APIError(response.error)
    return response


def _validate_json(model, body):
    try:
        return model.model_validate_json(body)
    except PydanticValidationError as e:
        raise DecodeError(
            f"Could not decode OMDb response as {model.__name__}: {e}") from e


def _parse_int(value: str) -> Optional[int]:
    # ASCII digits with an optional sign
    if not INTEGER_PATTERN.fullmatch(value):
        return None
    return int(value)
