"""
FastAPI server exposing the movie query API.
Endpoints:
- GET /health: basic health check
- GET /tools, POST /tools/{name}: tool discovery and named invocation
- GET /movies/...: one typed endpoint per query operation
- GET /statistics: aggregate statistics

Startup loads data/tmdb_top_rated_movies.csv (or MOVIES_CSV_PATH) once;
a missing file aborts startup. Run with: uvicorn api:app --reload
"""

# Import standard libraries for timing and the lifespan hook
import time  # measure startup and request latencies
from contextlib import asynccontextmanager  # startup/shutdown lifespan
from typing import Any, Dict, List, Optional  # precise typing for clarity

# Import FastAPI for building the web API
from fastapi import Body, FastAPI, HTTPException, Query, Request  # FastAPI primitives

# Import our internal modules for configuration, data and queries
from src import config  # settings and logging setup
from src.movie_store import MovieStore  # immutable dataset
from src.query_engine import MovieQueryEngine  # core query operations
from src.tools import TOOLS, TOOLS_BY_NAME, MovieQueryTools, ToolError, not_found_message  # tool layer
from src.schemas import (
	MovieOut,
	MovieLookupResponse,
	StatisticsOut,
	ToolCallResponse,
	ToolOut,
	ToolParameterOut,
)

# Import loguru for simple, structured console logging
from loguru import logger  # convenient console logger


def build_engine() -> MovieQueryEngine:
	"""Load the configured CSV and compose the query engine (raises if the file is missing)."""
	store = MovieStore.from_csv(config.MOVIES_CSV_PATH)
	return MovieQueryEngine(store, default_count=config.DEFAULT_RESULT_COUNT)


def create_app(engine: Optional[MovieQueryEngine] = None) -> FastAPI:
	"""
	Build the application. Pass an engine to serve a prebuilt store (tests);
	otherwise the dataset is loaded once during startup.
	"""

	@asynccontextmanager
	async def lifespan(app: FastAPI):
		start = time.time()  # start timer for startup latency
		if engine is not None:
			app.state.engine = engine  # injected
		else:
			logger.info("[API] Startup: loading movies and initializing engine...")  # log intent
			app.state.engine = build_engine()  # FileNotFoundError stops the server here
		app.state.tools = MovieQueryTools(app.state.engine)
		app.state.startup_seconds = time.time() - start
		logger.info(f"[API] Startup complete in {app.state.startup_seconds:.2f}s with {len(app.state.engine.store)} movies")
		yield

	app = FastAPI(title="Movie Query API", version="1.0.0", lifespan=lifespan)  # web app

	def get_engine(request: Request) -> MovieQueryEngine:
		return request.app.state.engine

	def to_out(movies) -> List[MovieOut]:
		return [MovieOut.from_movie(m) for m in movies]

	# Simple health endpoint for readiness checks
	@app.get("/health")
	async def health(request: Request):
		"""Return minimal health info for liveness/readiness probes."""
		engine_ready = getattr(request.app.state, "engine", None) is not None
		return {
			"status": "ok",  # constant indicator
			"engine_ready": engine_ready,  # True if engine initialized
			"movies": len(request.app.state.engine.store) if engine_ready else 0,
			"startup_seconds": round(getattr(request.app.state, "startup_seconds", 0.0), 2),  # startup latency
		}

	@app.get("/tools", response_model=List[ToolOut])
	async def list_tools(request: Request):
		"""Describe every tool with its parameters and defaults."""
		tools: MovieQueryTools = request.app.state.tools
		return [
			ToolOut(
				name=tool.name,
				description=tool.description,
				parameters=[
					ToolParameterOut(
						name=p.name,
						type=p.type,
						description=p.description,
						required=p.required,
						default=None if p.required else tools.default_for(p),
					)
					for p in tool.parameters
				],
			)
			for tool in TOOLS
		]

	@app.post("/tools/{name}", response_model=ToolCallResponse)
	async def call_tool(request: Request, name: str, arguments: Optional[Dict[str, Any]] = Body(default=None)):
		"""Invoke a tool by name with a JSON object of arguments."""
		tools: MovieQueryTools = request.app.state.tools
		try:
			result = tools.call(name, arguments)
		except ToolError as e:
			logger.warning(f"[API] Tool call rejected: {e}")
			status = 404 if name not in TOOLS_BY_NAME else 422
			raise HTTPException(status_code=status, detail=str(e))
		return ToolCallResponse(tool=name, result=result)

	@app.get("/movies", response_model=List[MovieOut])
	async def all_movies(request: Request):
		return to_out(get_engine(request).get_all_movies())

	@app.get("/movies/search", response_model=List[MovieOut])
	async def search_by_title(request: Request, title: str = Query("", description="Title or partial title to search for")):
		logger.debug(f"[API] /movies/search title='{title}'")
		return to_out(get_engine(request).search_movies_by_title(title))

	@app.get("/movies/year/{year}", response_model=List[MovieOut])
	async def by_year(request: Request, year: int):
		return to_out(get_engine(request).get_movies_by_year(year))

	@app.get("/movies/language/{language}", response_model=List[MovieOut])
	async def by_language(request: Request, language: str):
		return to_out(get_engine(request).get_movies_by_language(language))

	@app.get("/movies/top-rated", response_model=List[MovieOut])
	async def top_rated(request: Request, count: int = Query(config.DEFAULT_RESULT_COUNT, description="Number of movies to return")):
		return to_out(get_engine(request).get_top_rated_movies(count))

	@app.get("/movies/lowest-rated", response_model=List[MovieOut])
	async def lowest_rated(request: Request, count: int = Query(config.DEFAULT_RESULT_COUNT, description="Number of movies to return")):
		return to_out(get_engine(request).get_lowest_rated_movies(count))

	@app.get("/movies/most-popular", response_model=List[MovieOut])
	async def most_popular(request: Request, count: int = Query(config.DEFAULT_RESULT_COUNT, description="Number of movies to return")):
		return to_out(get_engine(request).get_most_popular_movies(count))

	@app.get("/movies/rating-range", response_model=List[MovieOut])
	async def rating_range(
		request: Request,
		min_rating: float = Query(..., description="Minimum rating (inclusive)"),
		max_rating: float = Query(..., description="Maximum rating (inclusive)"),
	):
		return to_out(get_engine(request).get_movies_by_rating_range(min_rating, max_rating))

	# Declared after the fixed /movies/... paths so they win the route match
	@app.get("/movies/{movie_id}", response_model=MovieLookupResponse)
	async def movie_by_id(request: Request, movie_id: int):
		movie = get_engine(request).get_movie_by_id(movie_id)
		if movie is None:
			return MovieLookupResponse(found=False, message=not_found_message(movie_id))
		return MovieLookupResponse(found=True, movie=MovieOut.from_movie(movie))

	@app.get("/statistics", response_model=StatisticsOut)
	async def statistics(request: Request):
		start = time.time()  # start timer
		stats = StatisticsOut.from_statistics(get_engine(request).get_movie_statistics())
		logger.info(f"[API] /statistics served in {(time.time() - start) * 1000:.2f} ms")
		return stats

	return app


config.setup_logging()

# Default application for `uvicorn api:app`
app = create_app()
