"""
Data models for the Movie Query Service.
Defines the core data structures used throughout the system.
"""

# Import dataclass to define simple "record-like" classes without boilerplate
from dataclasses import dataclass, field  # auto-generates __init__, __repr__, etc.
# Date type for the release date column
from datetime import date  # calendar date (year/month/day)
# Import typing helpers for precise and self-documenting types
from typing import List, Optional  # lists and optional values


@dataclass(frozen=True)
class Movie:
	"""
	Represents a single movie row from the dataset.
	Frozen so that records handed out by queries cannot modify the store.
	"""
	id: int  # primary lookup key (not enforced unique)
	original_language: str  # short language code, e.g. "en"
	overview: str  # free-text synopsis
	release_date: date  # parsed from strict YYYY-MM-DD
	title: str  # primary search field
	popularity: float  # non-negative popularity score
	vote_average: float  # average vote, 0-10 by convention
	vote_count: int  # number of votes


@dataclass(frozen=True)
class LanguageCount:
	"""One entry of the language distribution."""
	language: str  # language code as it appears in the data
	count: int  # number of movies in that language


@dataclass(frozen=True)
class YearRange:
	earliest_year: int  # smallest release year
	latest_year: int  # largest release year


@dataclass(frozen=True)
class MovieStatistics:
	"""
	Aggregate statistics over the whole store.
	On an empty store the numeric fields and year_range are None ("no data"),
	and the language distribution is empty.
	"""
	total_movies: int  # number of loaded movies
	average_rating: Optional[float] = None  # mean vote_average
	highest_rating: Optional[float] = None  # max vote_average
	lowest_rating: Optional[float] = None  # min vote_average
	average_popularity: Optional[float] = None  # mean popularity
	language_distribution: List[LanguageCount] = field(default_factory=list)  # descending by count
	year_range: Optional[YearRange] = None  # min/max release year

	@property
	def has_data(self) -> bool:
		"""True when the statistics were computed over at least one movie."""
		return self.total_movies > 0
