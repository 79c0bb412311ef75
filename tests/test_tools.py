"""
Unit tests for the tool layer: discovery, dispatch and JSON output.
Run: pytest tests/test_tools.py
"""

import json
from datetime import date

import pytest

from src.models import Movie
from src.movie_store import MovieStore
from src.query_engine import MovieQueryEngine
from src.tools import TOOLS, TOOLS_BY_NAME, MovieQueryTools, ToolError


def build_tools() -> MovieQueryTools:
	movies = [
		Movie(1, "en", "An overview, with a comma", date(2020, 1, 15), "Test Movie", 12.5, 7.8, 1000),
		Movie(2, "ja", "Second", date(2001, 7, 20), "Spirited Away", 106.8, 8.5, 16389),
		Movie(3, "en", "Third", date(2020, 3, 1), "Low One", 3.0, 4.0, 12),
	]
	return MovieQueryTools(MovieQueryEngine(MovieStore(movies)))


def test_every_operation_is_described():
	names = [tool.name for tool in TOOLS]
	assert len(names) == len(set(names)) == 10
	for tool in TOOLS:
		assert tool.description
		assert hasattr(MovieQueryTools, tool.name)
	count = TOOLS_BY_NAME["get_top_rated_movies"].parameters[0]
	assert count.name == "count" and not count.required
	assert build_tools().default_for(count) == 10
	assert TOOLS_BY_NAME["get_movie_by_id"].parameters[0].required


def test_movie_json_uses_camel_case():
	payload = json.loads(build_tools().get_movie_by_id(1))
	assert payload == {
		"id": 1,
		"originalLanguage": "en",
		"overview": "An overview, with a comma",
		"releaseDate": "2020-01-15",
		"title": "Test Movie",
		"popularity": 12.5,
		"voteAverage": 7.8,
		"voteCount": 1000,
	}


def test_lookup_miss_returns_message():
	assert build_tools().get_movie_by_id(999999) == "Movie with ID 999999 not found."


def test_empty_result_is_empty_json_list():
	assert json.loads(build_tools().search_movies_by_title("nothing here")) == []


def test_call_applies_default_count():
	result = json.loads(build_tools().call("get_top_rated_movies"))
	assert [m["id"] for m in result] == [2, 1, 3]


def test_call_coerces_arguments():
	tools = build_tools()
	result = json.loads(tools.call("get_movies_by_year", {"year": "2020"}))
	assert [m["id"] for m in result] == [1, 3]
	result = json.loads(tools.call("get_movies_by_rating_range", {"min_rating": 4, "max_rating": "7.8"}))
	assert [m["id"] for m in result] == [1, 3]


def test_call_statistics():
	stats = json.loads(build_tools().call("get_movie_statistics", {}))
	assert stats["totalMovies"] == 3
	assert stats["highestRating"] == 8.5
	assert stats["lowestRating"] == 4.0
	assert stats["languageDistribution"] == [
		{"language": "en", "count": 2},
		{"language": "ja", "count": 1},
	]
	assert stats["yearRange"] == {"earliestYear": 2001, "latestYear": 2020}


def test_call_statistics_empty_store():
	tools = MovieQueryTools(MovieQueryEngine(MovieStore()))
	stats = json.loads(tools.call("get_movie_statistics"))
	assert stats["totalMovies"] == 0
	assert stats["averageRating"] is None
	assert stats["yearRange"] is None
	assert stats["languageDistribution"] == []


def test_call_errors():
	tools = build_tools()
	with pytest.raises(ToolError):
		tools.call("drop_all_movies")
	with pytest.raises(ToolError):
		tools.call("get_movie_by_id", {})
	with pytest.raises(ToolError):
		tools.call("get_movie_by_id", {"id": "abc"})
	with pytest.raises(ToolError):
		tools.call("get_top_rated_movies", {"count": True})
	with pytest.raises(ToolError):
		tools.call("get_movie_by_id", {"id": False})


def test_omitted_count_follows_engine_default():
	movies = [
		Movie(i, "en", "o", date(2000, 1, 1), f"m{i}", float(i), float(i % 10), 1)
		for i in range(15)
	]
	tools = MovieQueryTools(MovieQueryEngine(MovieStore(movies), default_count=5))
	count = TOOLS_BY_NAME["get_top_rated_movies"].parameters[0]
	assert tools.default_for(count) == 5
	for name in ("get_top_rated_movies", "get_lowest_rated_movies", "get_most_popular_movies"):
		assert len(json.loads(tools.call(name))) == 5
		assert len(json.loads(tools.call(name, {"count": 7}))) == 7


def main():
	print("Running tool layer tests...")
	for name, fn in list(globals().items()):
		if name.startswith("test_"):
			fn()
			print(f" - {name} ok")
	print("All tool layer tests passed!")


if __name__ == '__main__':
	main()
