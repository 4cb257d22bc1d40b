from typing import Literal, Optional, Tuple, Union
from pydantic import BaseModel, ConfigDict, Field


class QueryData(BaseModel):
    title: Optional[str] = None
    year: Optional[str] = None
    imdb_id: Optional[str] = None
    search_type: Optional[str] = None
    plot: Optional[str] = None
    page: Optional[str] = None


class _WireModel(BaseModel):
    # OMDb keys are PascalCase/camelCase; attributes are snake_case
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class ResultEnvelope(_WireModel):
    """
    Cheap first-pass decode of a lookup payload: only the discriminator and
    the status fields, used to pick the full decode target.
    """
    type: Optional[str] = Field(None, alias='Type')
    response: Optional[str] = Field(None, alias='Response')
    error: Optional[str] = Field(None, alias='Error')

    @property
    def succeeded(self) -> bool:
        return self.response != 'False'


class Rating(_WireModel):
    source: Optional[str] = Field(None, alias='Source')
    value: Optional[str] = Field(None, alias='Value')


class _TitleResult(_WireModel):
    title: Optional[str] = Field(None, alias='Title')
    year: Optional[str] = Field(None, alias='Year')
    rated: Optional[str] = Field(None, alias='Rated')
    released: Optional[str] = Field(None, alias='Released')
    runtime: Optional[str] = Field(None, alias='Runtime')
    genre: Optional[str] = Field(None, alias='Genre')
    director: Optional[str] = Field(None, alias='Director')
    writer: Optional[str] = Field(None, alias='Writer')
    actors: Optional[str] = Field(None, alias='Actors')
    plot: Optional[str] = Field(None, alias='Plot')
    language: Optional[str] = Field(None, alias='Language')
    country: Optional[str] = Field(None, alias='Country')
    awards: Optional[str] = Field(None, alias='Awards')
    poster: Optional[str] = Field(None, alias='Poster')
    ratings: Tuple[Rating, ...] = Field((), alias='Ratings')
    metascore: Optional[str] = Field(None, alias='Metascore')
    imdb_rating: Optional[str] = Field(None, alias='imdbRating')
    imdb_votes: Optional[str] = Field(None, alias='imdbVotes')
    imdb_id: Optional[str] = Field(None, alias='imdbID')


class MovieResult(_TitleResult):
    type: Literal['movie'] = Field('movie', alias='Type')
    dvd: Optional[str] = Field(None, alias='DVD')
    box_office: Optional[str] = Field(None, alias='BoxOffice')
    production: Optional[str] = Field(None, alias='Production')
    website: Optional[str] = Field(None, alias='Website')


class SeriesResult(_TitleResult):
    type: Literal['series'] = Field('series', alias='Type')
    total_seasons: Optional[str] = Field(None, alias='totalSeasons')


class EpisodeResult(_TitleResult):
    type: Literal['episode'] = Field('episode', alias='Type')
    series_id: Optional[str] = Field(None, alias='seriesID')


TitleResult = Union[MovieResult, SeriesResult, EpisodeResult]


class SearchResult(_WireModel):
    title: Optional[str] = Field(None, alias='Title')
    year: Optional[str] = Field(None, alias='Year')
    imdb_id: Optional[str] = Field(None, alias='imdbID')
    type: Optional[str] = Field(None, alias='Type')
    poster: Optional[str] = Field(None, alias='Poster')


class SearchResponse(_WireModel):
    search: Tuple[SearchResult, ...] = Field((), alias='Search')
    total_results: Optional[str] = Field(None, alias='totalResults')
    response: Optional[str] = Field(None, alias='Response')
    error: Optional[str] = Field(None, alias='Error')

    @property
    def succeeded(self) -> bool:
        return self.response != 'False'


class ErrorResponse(BaseModel):
    detail: str
