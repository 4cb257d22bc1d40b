import json
import httpx
import pytest

from omdb.clients.omdb_client import OmdbClient


MOVIE_PAYLOAD = {
    "Title": "Guardians of the Galaxy Vol. 2",
    "Year": "2017",
    "Rated": "PG-13",
    "Released": "05 May 2017",
    "Runtime": "136 min",
    "Genre": "Action, Adventure, Comedy",
    "Director": "James Gunn",
    "Writer": "James Gunn, Dan Abnett, Andy Lanning",
    "Actors": "Chris Pratt, Zoe Saldana, Dave Bautista",
    "Plot": "The Guardians struggle to keep together as a team.",
    "Language": "English",
    "Country": "United States",
    "Awards": "Nominated for 1 Oscar. 15 wins & 60 nominations total",
    "Poster": "https://m.media-amazon.com/images/M/gotg2.jpg",
    "Ratings": [
        {"Source": "Internet Movie Database", "Value": "7.6/10"},
        {"Source": "Rotten Tomatoes", "Value": "85%"},
        {"Source": "Metacritic", "Value": "67/100"},
    ],
    "Metascore": "67",
    "imdbRating": "7.6",
    "imdbVotes": "772,123",
    "imdbID": "tt3896198",
    "Type": "movie",
    "DVD": "10 Jul 2017",
    "BoxOffice": "$389,813,101",
    "Production": "N/A",
    "Website": "N/A",
    "Response": "True",
}

SERIES_PAYLOAD = {
    "Title": "Game of Thrones",
    "Year": "2011–2019",
    "Rated": "TV-MA",
    "Released": "17 Apr 2011",
    "Runtime": "57 min",
    "Genre": "Action, Adventure, Drama",
    "Director": "N/A",
    "Writer": "David Benioff, D.B. Weiss",
    "Actors": "Emilia Clarke, Peter Dinklage, Kit Harington",
    "Plot": "Nine noble families fight for control over the lands of Westeros.",
    "Language": "English",
    "Country": "United States, United Kingdom",
    "Awards": "Won 59 Primetime Emmys. 391 wins & 655 nominations total",
    "Poster": "https://m.media-amazon.com/images/M/got.jpg",
    "Ratings": [{"Source": "Internet Movie Database", "Value": "9.2/10"}],
    "Metascore": "N/A",
    "imdbRating": "9.2",
    "imdbVotes": "2,213,487",
    "imdbID": "tt0944947",
    "Type": "series",
    "totalSeasons": "8",
    "Response": "True",
}

EPISODE_PAYLOAD = {
    "Title": "Winter Is Coming",
    "Year": "2011",
    "Rated": "TV-MA",
    "Released": "17 Apr 2011",
    "Runtime": "62 min",
    "Genre": "Action, Adventure, Drama",
    "Director": "Timothy Van Patten",
    "Writer": "David Benioff, D.B. Weiss, George R.R. Martin",
    "Actors": "Sean Bean, Mark Addy, Nikolaj Coster-Waldau",
    "Plot": "Eddard Stark is torn between his family and an old friend.",
    "Language": "English",
    "Country": "United States, United Kingdom",
    "Awards": "N/A",
    "Poster": "https://m.media-amazon.com/images/M/wic.jpg",
    "Ratings": [{"Source": "Internet Movie Database", "Value": "8.9/10"}],
    "Metascore": "N/A",
    "imdbRating": "8.9",
    "imdbVotes": "54,321",
    "imdbID": "tt1480055",
    "seriesID": "tt0944947",
    "Type": "episode",
    "Response": "True",
}

SEARCH_PAYLOAD = {
    "Search": [
        {
            "Title": "Batman Begins",
            "Year": "2005",
            "imdbID": "tt0372784",
            "Type": "movie",
            "Poster": "https://m.media-amazon.com/images/M/bb.jpg",
        },
        {
            "Title": "The Batman",
            "Year": "2022",
            "imdbID": "tt1877830",
            "Type": "movie",
            "Poster": "https://m.media-amazon.com/images/M/tb.jpg",
        },
    ],
    "totalResults": "588",
    "Response": "True",
}

NOT_FOUND_PAYLOAD = {"Response": "False", "Error": "Movie not found!"}


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it was asked to send."""

    def __init__(self, status_code=200, payload=None, content=None):
        self.requests = []
        self.status_code = status_code
        self.payload = payload
        self.content = content
        super().__init__(self._respond)

    def _respond(self, request):
        self.requests.append(request)
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, content=json.dumps(self.payload))


@pytest.fixture
def make_client():
    """
    Returns a factory building an OmdbClient over a RecordingTransport.
    The transport is attached as `client.transport` for assertions.
    """
    http_clients = []

    def factory(payload=None, status_code=200, content=None,
                api_key="test-key", strict=False):
        transport = RecordingTransport(status_code, payload, content)
        http_client = httpx.Client(transport=transport)
        http_clients.append(http_client)
        client = OmdbClient(api_key, http_client, strict=strict)
        client.transport = transport
        return client

    yield factory
    for http_client in http_clients:
        http_client.close()
