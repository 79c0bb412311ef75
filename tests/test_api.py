"""
HTTP API tests using FastAPI's TestClient with an injected in-memory store.
Run: pytest tests/test_api.py
"""

import json
from datetime import date

import pytest
from fastapi.testclient import TestClient

from api import create_app
from src.models import Movie
from src.movie_store import MovieStore
from src.query_engine import MovieQueryEngine


@pytest.fixture
def client():
	movies = [
		Movie(1, "en", "First", date(1994, 9, 23), "My Test Movie", 96.3, 9.0, 26000),
		Movie(2, "ja", "Second", date(2001, 7, 20), "Spirited Away", 106.8, 5.0, 16389),
		Movie(3, "EN", "Third", date(1994, 3, 1), "Pulp Fiction", 74.8, 7.0, 27089),
	]
	app = create_app(MovieQueryEngine(MovieStore(movies)))
	with TestClient(app) as test_client:
		yield test_client


def ids(response):
	assert response.status_code == 200
	return [m["id"] for m in response.json()]


def test_health(client):
	body = client.get("/health").json()
	assert body["status"] == "ok"
	assert body["engine_ready"] is True
	assert body["movies"] == 3


def test_list_and_filters(client):
	assert ids(client.get("/movies")) == [1, 2, 3]
	assert ids(client.get("/movies/search", params={"title": "TEST"})) == [1]
	assert ids(client.get("/movies/year/1994")) == [1, 3]
	assert ids(client.get("/movies/language/en")) == [1, 3]


def test_rankings(client):
	assert ids(client.get("/movies/top-rated", params={"count": 2})) == [1, 3]
	assert ids(client.get("/movies/lowest-rated", params={"count": 1})) == [2]
	assert ids(client.get("/movies/most-popular")) == [2, 1, 3]
	assert ids(client.get("/movies/top-rated", params={"count": -3})) == []


def test_rating_range(client):
	assert ids(client.get("/movies/rating-range", params={"min_rating": 5.0, "max_rating": 5.0})) == [2]
	assert ids(client.get("/movies/rating-range", params={"min_rating": 8, "max_rating": 1})) == []


def test_lookup(client):
	found = client.get("/movies/3").json()
	assert found["found"] is True
	assert found["movie"]["title"] == "Pulp Fiction"
	assert found["movie"]["releaseDate"] == "1994-03-01"

	missing = client.get("/movies/999999")
	assert missing.status_code == 200
	assert missing.json() == {"found": False, "movie": None, "message": "Movie with ID 999999 not found."}


def test_statistics(client):
	body = client.get("/statistics").json()
	assert body["totalMovies"] == 3
	assert body["averageRating"] == pytest.approx(7.0)
	assert body["highestRating"] == 9.0
	assert body["lowestRating"] == 5.0
	assert body["yearRange"] == {"earliestYear": 1994, "latestYear": 2001}
	assert body["languageDistribution"][0] == {"language": "en", "count": 1}


def test_tools_endpoints(client):
	tools = client.get("/tools").json()
	assert [t["name"] for t in tools][:2] == ["search_movies_by_title", "get_movies_by_year"]

	response = client.post("/tools/get_movie_by_id", json={"id": 42})
	assert response.status_code == 200
	assert response.json() == {"tool": "get_movie_by_id", "result": "Movie with ID 42 not found."}

	assert client.post("/tools/unknown_tool", json={}).status_code == 404
	assert client.post("/tools/get_movies_by_year", json={}).status_code == 422


def test_missing_dataset_aborts_startup(tmp_path, monkeypatch):
	from src import config

	monkeypatch.setattr(config, "MOVIES_CSV_PATH", tmp_path / "absent.csv")
	with pytest.raises(FileNotFoundError):
		with TestClient(create_app()):
			pass


def test_tools_follow_configured_default_count():
	movies = [
		Movie(i, "en", "o", date(2000, 1, 1), f"m{i}", float(i), float(i % 10), 1)
		for i in range(15)
	]
	app = create_app(MovieQueryEngine(MovieStore(movies), default_count=5))
	with TestClient(app) as test_client:
		tools = {t["name"]: t for t in test_client.get("/tools").json()}
		count = tools["get_top_rated_movies"]["parameters"][0]
		assert count["required"] is False
		assert count["default"] == 5

		response = test_client.post("/tools/get_most_popular_movies", json={})
		assert response.status_code == 200
		assert len(json.loads(response.json()["result"])) == 5


def test_tool_rejects_boolean_arguments(client):
	assert client.post("/tools/get_top_rated_movies", json={"count": True}).status_code == 422
	assert client.post("/tools/get_movie_by_id", json={"id": False}).status_code == 422
