"""
Pydantic response schemas shared by the tool layer and the HTTP API.
Field names are serialized in camelCase (id, originalLanguage, releaseDate, ...).
"""

from datetime import date  # release date type
from typing import List, Optional  # precise typing for clarity

from pydantic import BaseModel, ConfigDict  # response schema definitions
from pydantic.alias_generators import to_camel  # snake_case -> camelCase

from .models import Movie, MovieStatistics  # internal records


class CamelModel(BaseModel):
	model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Shape of a single movie in responses
class MovieOut(CamelModel):
	id: int  # primary key
	original_language: str  # language code
	overview: str  # synopsis
	release_date: date  # serialized as YYYY-MM-DD
	title: str  # title
	popularity: float  # popularity score
	vote_average: float  # average vote
	vote_count: int  # number of votes

	@classmethod
	def from_movie(cls, movie: Movie) -> 'MovieOut':
		return cls(
			id=movie.id,
			original_language=movie.original_language,
			overview=movie.overview,
			release_date=movie.release_date,
			title=movie.title,
			popularity=movie.popularity,
			vote_average=movie.vote_average,
			vote_count=movie.vote_count,
		)


class LanguageCountOut(CamelModel):
	language: str
	count: int


class YearRangeOut(CamelModel):
	earliest_year: int
	latest_year: int


# Aggregates; computed values are null when the store is empty
class StatisticsOut(CamelModel):
	total_movies: int
	average_rating: Optional[float] = None
	highest_rating: Optional[float] = None
	lowest_rating: Optional[float] = None
	average_popularity: Optional[float] = None
	language_distribution: List[LanguageCountOut]
	year_range: Optional[YearRangeOut] = None

	@classmethod
	def from_statistics(cls, stats: MovieStatistics) -> 'StatisticsOut':
		year_range = None
		if stats.year_range is not None:
			year_range = YearRangeOut(
				earliest_year=stats.year_range.earliest_year,
				latest_year=stats.year_range.latest_year,
			)
		return cls(
			total_movies=stats.total_movies,
			average_rating=stats.average_rating,
			highest_rating=stats.highest_rating,
			lowest_rating=stats.lowest_rating,
			average_popularity=stats.average_popularity,
			language_distribution=[
				LanguageCountOut(language=lc.language, count=lc.count)
				for lc in stats.language_distribution
			],
			year_range=year_range,
		)


# Lookup by id: explicit found / not-found container
class MovieLookupResponse(CamelModel):
	found: bool
	movie: Optional[MovieOut] = None
	message: Optional[str] = None


class ToolParameterOut(CamelModel):
	name: str
	type: str
	description: str
	required: bool
	default: Optional[int] = None


class ToolOut(CamelModel):
	name: str
	description: str
	parameters: List[ToolParameterOut]


class ToolCallResponse(CamelModel):
	tool: str  # tool name that was invoked
	result: str  # JSON text or the plain not-found message
