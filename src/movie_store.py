"""
In-memory record store.
Holds the parsed movies for the lifetime of the process; never mutated after construction.
"""

from pathlib import Path  # path handling for the CSV source
from typing import Iterable, Iterator, Tuple, Union  # type hints

from loguru import logger  # console logger

from .models import Movie  # immutable movie record
from .data_loader import DataLoader  # CSV parsing


class MovieStore:
	"""
	Immutable, ordered collection of movies (source file order).
	Build it once with from_csv() at startup, or directly from an iterable of
	movies (tests, scripts), and hand it to the query engine.
	"""

	def __init__(self, movies: Iterable[Movie] = ()):
		self._movies: Tuple[Movie, ...] = tuple(movies)  # frozen snapshot

	@classmethod
	def from_csv(cls, filepath: Union[str, Path]) -> 'MovieStore':
		"""Load the store from a CSV file; raises FileNotFoundError if it is missing."""
		try:
			movies = DataLoader().load_movies_from_csv(filepath)
		except FileNotFoundError:
			logger.error(f"[Store] Cannot start without movie data: {filepath}")
			raise
		store = cls(movies)
		logger.info(f"[Store] Ready with {len(store)} movies")
		return store

	@property
	def movies(self) -> Tuple[Movie, ...]:
		"""Read-only view of all movies in source order."""
		return self._movies

	def __iter__(self) -> Iterator[Movie]:
		return iter(self._movies)

	def __len__(self) -> int:
		return len(self._movies)

	def __getitem__(self, index: int) -> Movie:
		return self._movies[index]

	def __repr__(self) -> str:
		return f"MovieStore({len(self._movies)} movies)"
