"""
Tool layer.
Describes each query operation (name, description, typed parameters) for discovery,
and dispatches named calls to the query engine, returning JSON text.
"""

from dataclasses import dataclass, field  # tool descriptors
from typing import Any, Callable, Dict, List, Optional  # type hints

from pydantic import TypeAdapter, ValidationError  # argument coercion and JSON dumping

from loguru import logger  # console logger

from .query_engine import MovieQueryEngine  # read-only operations
from .schemas import MovieOut, StatisticsOut  # serialization shapes


class ToolError(Exception):
	"""Raised for an unknown tool name or a missing/invalid argument."""


@dataclass(frozen=True)
class ToolParameter:
	name: str  # argument name
	type: str  # "integer", "number" or "string"
	description: str  # human-readable help
	required: bool = True  # must be supplied by the caller
	default: Optional[Any] = None  # value used when an optional argument is omitted


@dataclass(frozen=True)
class ToolDefinition:
	name: str  # tool name used for dispatch
	description: str  # shown to callers for discovery
	parameters: List[ToolParameter] = field(default_factory=list)


# Omitted count resolves to the engine's configured default_count
_COUNT = ToolParameter("count", "integer", "Number of movies to return", required=False)

# Discovery order of the tools
TOOLS: List[ToolDefinition] = [
	ToolDefinition(
		"search_movies_by_title",
		"Search for movies by title. Returns movies that contain the search term in their title.",
		[ToolParameter("title", "string", "Title or partial title to search for")],
	),
	ToolDefinition(
		"get_movies_by_year",
		"Get movies released in a specific year.",
		[ToolParameter("year", "integer", "Year to filter movies by")],
	),
	ToolDefinition(
		"get_movies_by_language",
		"Get movies in a specific language.",
		[ToolParameter("language", "string", "Language code (e.g., 'en', 'ja', 'hi')")],
	),
	ToolDefinition(
		"get_top_rated_movies",
		"Get the top-rated movies ordered by vote average.",
		[_COUNT],
	),
	ToolDefinition(
		"get_lowest_rated_movies",
		"Get the lowest-rated movies ordered by vote average.",
		[_COUNT],
	),
	ToolDefinition(
		"get_most_popular_movies",
		"Get the most popular movies ordered by popularity score.",
		[_COUNT],
	),
	ToolDefinition(
		"get_movie_by_id",
		"Get a specific movie by its ID.",
		[ToolParameter("id", "integer", "Movie ID to retrieve")],
	),
	ToolDefinition(
		"get_movies_by_rating_range",
		"Get movies within a specific rating range.",
		[
			ToolParameter("min_rating", "number", "Minimum rating (inclusive)"),
			ToolParameter("max_rating", "number", "Maximum rating (inclusive)"),
		],
	),
	ToolDefinition(
		"get_all_movies",
		"Get all movies in the database.",
	),
	ToolDefinition(
		"get_movie_statistics",
		"Get statistics about the movie database including total count, average rating, and language distribution.",
	),
]

TOOLS_BY_NAME: Dict[str, ToolDefinition] = {tool.name: tool for tool in TOOLS}

# JSON schema type -> Python type used for lax coercion
_ADAPTERS: Dict[str, TypeAdapter] = {
	"integer": TypeAdapter(int),
	"number": TypeAdapter(float),
	"string": TypeAdapter(str),
}

_MOVIE_LIST = TypeAdapter(List[MovieOut])


def not_found_message(movie_id: int) -> str:
	return f"Movie with ID {movie_id} not found."


class MovieQueryTools:
	"""
	Tool-facing wrapper around MovieQueryEngine.
	Each method returns indented JSON, except get_movie_by_id which returns a
	plain message when nothing matches.
	"""

	def __init__(self, engine: MovieQueryEngine):
		self.engine = engine  # injected query engine
		self._handlers: Dict[str, Callable[..., str]] = {
			tool.name: getattr(self, tool.name) for tool in TOOLS
		}

	def _dump_movies(self, movies) -> str:
		items = [MovieOut.from_movie(m) for m in movies]
		return _MOVIE_LIST.dump_json(items, indent=2, by_alias=True).decode('utf-8')

	def search_movies_by_title(self, title: str) -> str:
		return self._dump_movies(self.engine.search_movies_by_title(title))

	def get_movies_by_year(self, year: int) -> str:
		return self._dump_movies(self.engine.get_movies_by_year(year))

	def get_movies_by_language(self, language: str) -> str:
		return self._dump_movies(self.engine.get_movies_by_language(language))

	def get_top_rated_movies(self, count: Optional[int] = None) -> str:
		return self._dump_movies(self.engine.get_top_rated_movies(count))

	def get_lowest_rated_movies(self, count: Optional[int] = None) -> str:
		return self._dump_movies(self.engine.get_lowest_rated_movies(count))

	def get_most_popular_movies(self, count: Optional[int] = None) -> str:
		return self._dump_movies(self.engine.get_most_popular_movies(count))

	def get_movie_by_id(self, id: int) -> str:
		movie = self.engine.get_movie_by_id(id)
		if movie is None:
			return not_found_message(id)
		return MovieOut.from_movie(movie).model_dump_json(indent=2, by_alias=True)

	def get_movies_by_rating_range(self, min_rating: float, max_rating: float) -> str:
		logger.debug(f"[Tools] Getting movies with ratings between {min_rating} and {max_rating}")
		return self._dump_movies(self.engine.get_movies_by_rating_range(min_rating, max_rating))

	def get_all_movies(self) -> str:
		return self._dump_movies(self.engine.get_all_movies())

	def get_movie_statistics(self) -> str:
		stats = StatisticsOut.from_statistics(self.engine.get_movie_statistics())
		return stats.model_dump_json(indent=2, by_alias=True)

	def default_for(self, param: ToolParameter) -> Optional[Any]:
		"""Effective default of an optional parameter (count follows the engine setting)."""
		if param is _COUNT:
			return self.engine.default_count
		return param.default

	def call(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> str:
		"""
		Invoke a tool by name.
		Missing optional arguments take their default (an omitted count becomes
		the engine's default_count); values are coerced to the declared type,
		booleans are rejected. Unknown arguments are ignored.
		"""
		tool = TOOLS_BY_NAME.get(name)
		if tool is None:
			raise ToolError(f"Unknown tool: {name}")

		arguments = arguments or {}
		kwargs: Dict[str, Any] = {}
		for param in tool.parameters:
			if param.name not in arguments or arguments[param.name] is None:
				if param.required:
					raise ToolError(f"Missing required argument '{param.name}' for tool '{name}'")
				kwargs[param.name] = self.default_for(param)
				continue
			if isinstance(arguments[param.name], bool):
				# JSON true/false is never a number or a string here
				raise ToolError(f"Invalid value for '{param.name}' ({param.type}): {arguments[param.name]!r}")
			try:
				kwargs[param.name] = _ADAPTERS[param.type].validate_python(arguments[param.name])
			except ValidationError as e:
				raise ToolError(f"Invalid value for '{param.name}' ({param.type}): {arguments[param.name]!r}") from e

		logger.info(f"[Tools] {name}({', '.join(f'{k}={v!r}' for k, v in kwargs.items())})")
		return self._handlers[name](**kwargs)
