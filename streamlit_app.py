"""
Streamlit UI for the Movie Query Service.
Calls the local FastAPI server (API_URL, default http://localhost:8000) through its
tool endpoints, or runs locally by loading the CSV dataset like the API does.

Run API (optional):   uvicorn api:app --reload
Run UI:                streamlit run streamlit_app.py
"""

# JSON decoding of tool results
import json  # tool results are JSON text
# HTTP client to call the API when running in API mode
import requests  # make web requests to the FastAPI server
# Streamlit framework to build a simple interactive UI
import streamlit as st  # UI primitives
# Typing to make function signatures clearer
from typing import Any, Dict, Optional  # indicates values can be None

# Local engine imports for fallback/local mode (when API isn't used)
from src import config  # settings
from src.movie_store import MovieStore  # load movies from file
from src.query_engine import MovieQueryEngine  # query operations
from src.tools import TOOLS_BY_NAME, MovieQueryTools, ToolError  # tool layer shared with the API

# Configure Streamlit page (title and layout width)
st.set_page_config(page_title="Movie Explorer", layout="wide")  # wide layout

# Main page title
st.title("🎬 Movie Explorer")  # friendly header

# Operation labels shown in the sidebar -> tool names
OPERATIONS = {
	"Search by title": "search_movies_by_title",
	"Movies by year": "get_movies_by_year",
	"Movies by language": "get_movies_by_language",
	"Top rated": "get_top_rated_movies",
	"Lowest rated": "get_lowest_rated_movies",
	"Most popular": "get_most_popular_movies",
	"Movie by ID": "get_movie_by_id",
	"Rating range": "get_movies_by_rating_range",
	"All movies": "get_all_movies",
	"Statistics": "get_movie_statistics",
}

# Cache the local tools so we only parse the CSV once per session
@st.cache_resource(show_spinner=True)
def init_local_tools() -> Optional[MovieQueryTools]:
	"""Create a local MovieQueryTools over the configured CSV."""
	try:
		store = MovieStore.from_csv(config.MOVIES_CSV_PATH)  # read dataset
		return MovieQueryTools(MovieQueryEngine(store, default_count=config.DEFAULT_RESULT_COUNT))
	except FileNotFoundError as e:
		# Show an error in the UI so users know local mode failed
		st.error(f"Failed to load movie data: {e}")
		return None  # signal failure

# Sidebar contains configuration controls
with st.sidebar:
	st.header("Settings")  # section label
	api_url = st.text_input("API URL", config.API_URL)  # where the API lives
	use_local = st.toggle("Use local engine", value=False, help="If enabled or API is unreachable, the app will run fully locally.")
	st.header("Query")
	label = st.selectbox("Operation", list(OPERATIONS.keys()))  # which tool to run
	tool = TOOLS_BY_NAME[OPERATIONS[label]]

	# One input per tool parameter
	arguments: Dict[str, Any] = {}
	for param in tool.parameters:
		if param.type == "integer":
			arguments[param.name] = st.number_input(param.description, value=config.DEFAULT_RESULT_COUNT if param.name == "count" else 0, step=1)
		elif param.type == "number":
			arguments[param.name] = st.number_input(param.description, min_value=0.0, max_value=10.0, value=5.0 if param.name.startswith("min") else 10.0, step=0.1)
		else:
			arguments[param.name] = st.text_input(param.description, "")

# If not forcing local, check quickly whether the API is reachable
api_available = False  # default assumption
if not use_local:
	try:
		h = requests.get(f"{api_url}/health", timeout=3)  # ping API health endpoint
		api_available = h.ok  # True if server responded 200 OK
	except requests.RequestException:
		api_available = False  # probe failed
		st.sidebar.info("API not reachable; will use local engine.")  # inform user

# Initialize local tools only when needed (user toggle or API not available)
local_tools: Optional[MovieQueryTools] = None  # placeholder
if use_local or not api_available:
	local_tools = init_local_tools()

st.caption(tool.description)

if st.button("Run", type="primary"):
	with st.spinner("Querying..."):
		try:
			if local_tools is not None:
				result = local_tools.call(tool.name, arguments)  # run in-process
			else:
				resp = requests.post(f"{api_url}/tools/{tool.name}", json=arguments, timeout=30)
				resp.raise_for_status()  # raise error if server responded with an error code
				result = resp.json()["result"]

			# Lookup misses come back as a plain message instead of JSON
			try:
				payload = json.loads(result)
			except json.JSONDecodeError:
				st.warning(result)
				payload = None

			if isinstance(payload, list):
				st.success(f"{len(payload)} movies")
				st.dataframe(payload)
			elif isinstance(payload, dict) and "totalMovies" in payload:
				c1, c2, c3, c4 = st.columns(4)
				c1.metric("Movies", payload["totalMovies"])
				c2.metric("Average rating", f"{payload['averageRating']:.2f}" if payload["averageRating"] is not None else "n/a")
				c3.metric("Highest / lowest", f"{payload['highestRating']} / {payload['lowestRating']}")
				if payload["yearRange"]:
					c4.metric("Years", f"{payload['yearRange']['earliestYear']} - {payload['yearRange']['latestYear']}")
				st.bar_chart({"movies": {lc["language"]: lc["count"] for lc in payload["languageDistribution"]}})
			elif isinstance(payload, dict):
				st.subheader(f"{payload['title']} ({payload['releaseDate'][:4]})")
				st.caption(f"Rating: {payload['voteAverage']} ({payload['voteCount']} votes) | Popularity: {payload['popularity']}")
				st.write(payload["overview"])

		except ToolError as e:  # bad arguments in local mode
			st.error(str(e))
		except requests.RequestException as e:  # network/API errors
			st.error(f"API request failed: {e}")  # show human-friendly message

# Show a footer indicator of current mode
st.sidebar.markdown("---")  # separator
if local_tools is not None:
	st.sidebar.caption("Mode: Local engine")  # mode label
else:
	st.sidebar.caption("Mode: API client (ensure uvicorn api:app --reload is running)")  # mode label
