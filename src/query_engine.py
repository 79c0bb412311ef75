"""
Query engine module.
Read-only search, filter, ranking, lookup and aggregation over the movie store.
"""

from typing import Dict, List, Optional  # type annotations for clarity

import numpy as np  # vectorized ranking and aggregation

# Import project modules for data structures and the store
from .models import Movie, LanguageCount, YearRange, MovieStatistics  # core data classes
from .movie_store import MovieStore  # immutable movie collection

# Import loguru for console logging
from loguru import logger  # simple structured logger


class MovieQueryEngine:
	"""
	High-level query API over an immutable MovieStore.
	Every method is a pure read: results are fresh lists of frozen Movie objects,
	so concurrent callers need no locking.
	Ranking ties keep source order (stable sort).
	"""

	def __init__(self, store: MovieStore, default_count: int = 10):
		# Keep a reference to the injected store
		self.store = store  # dataset
		self.default_count = default_count  # used when count is omitted

		# Precompute numeric columns once; the store never changes
		self._ratings = np.array([m.vote_average for m in store], dtype=float)  # vote_average column
		self._popularity = np.array([m.popularity for m in store], dtype=float)  # popularity column
		self._years = np.array([m.release_date.year for m in store], dtype=int)  # release years
		logger.info(f"[Engine] Query engine ready over {len(store)} movies")

	def _take(self, order: np.ndarray, count: Optional[int]) -> List[Movie]:
		"""Return the first `count` movies of a precomputed ordering (empty for count <= 0)."""
		if count is None:
			count = self.default_count
		if count <= 0:
			return []
		movies = self.store.movies
		return [movies[i] for i in order[:count]]

	def get_all_movies(self) -> List[Movie]:
		"""All movies in source order."""
		return list(self.store)

	def search_movies_by_title(self, title: str) -> List[Movie]:
		"""Case-insensitive substring match on the title; an empty string matches everything."""
		needle = title.lower()
		results = [m for m in self.store if needle in m.title.lower()]
		logger.debug(f"[Engine] Title search '{title}' matched {len(results)} movies")
		return results

	def get_movies_by_year(self, year: int) -> List[Movie]:
		"""Movies whose release date falls in the given year."""
		return [m for m in self.store if m.release_date.year == year]

	def get_movies_by_language(self, language: str) -> List[Movie]:
		"""Case-insensitive exact match on the original language code."""
		wanted = language.lower()
		return [m for m in self.store if m.original_language.lower() == wanted]

	def get_top_rated_movies(self, count: Optional[int] = None) -> List[Movie]:
		"""Highest vote_average first."""
		order = np.argsort(-self._ratings, kind='stable')
		return self._take(order, count)

	def get_lowest_rated_movies(self, count: Optional[int] = None) -> List[Movie]:
		"""Lowest vote_average first."""
		order = np.argsort(self._ratings, kind='stable')
		return self._take(order, count)

	def get_most_popular_movies(self, count: Optional[int] = None) -> List[Movie]:
		"""Highest popularity first."""
		order = np.argsort(-self._popularity, kind='stable')
		return self._take(order, count)

	def get_movie_by_id(self, movie_id: int) -> Optional[Movie]:
		"""First movie (source order) with the given id, or None."""
		for movie in self.store:
			if movie.id == movie_id:
				return movie
		logger.debug(f"[Engine] No movie with id={movie_id}")
		return None

	def get_movies_by_rating_range(self, min_rating: float, max_rating: float) -> List[Movie]:
		"""Inclusive vote_average range; min_rating > max_rating simply matches nothing."""
		return [m for m in self.store if min_rating <= m.vote_average <= max_rating]

	def get_movie_statistics(self) -> MovieStatistics:
		"""
		Aggregate statistics over the whole store.
		An empty store yields total_movies=0 with None for every computed value.
		"""
		total = len(self.store)
		if total == 0:
			logger.warning("[Engine] Statistics requested on an empty store")
			return MovieStatistics(total_movies=0)

		# Group by exact language code; dict keeps first-appearance order for ties
		counts: Dict[str, int] = {}
		for movie in self.store:
			counts[movie.original_language] = counts.get(movie.original_language, 0) + 1
		distribution = [
			LanguageCount(language=lang, count=n)
			for lang, n in sorted(counts.items(), key=lambda item: item[1], reverse=True)
		]

		return MovieStatistics(
			total_movies=total,
			average_rating=float(np.mean(self._ratings)),
			highest_rating=float(np.max(self._ratings)),
			lowest_rating=float(np.min(self._ratings)),
			average_popularity=float(np.mean(self._popularity)),
			language_distribution=distribution,
			year_range=YearRange(
				earliest_year=int(np.min(self._years)),
				latest_year=int(np.max(self._years)),
			),
		)
