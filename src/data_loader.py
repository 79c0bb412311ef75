"""
Data loading and parsing module.
Handles reading the movies CSV file and converting each row into a Movie.

The CSV dialect is deliberately simple:
- comma separated, first line is a header and is always skipped
- a double quote toggles "inside quotes" unless the character right before it
  is a backslash; toggling quotes are dropped, escaped ones are kept as-is
- no multi-line fields
"""

# Standard libs for regex, calendar checks, typing, and paths
import re  # strict numeric/date formats
import calendar  # days-per-month validation
from datetime import date  # typed release date
from typing import Iterable, List, Optional  # type hints
from pathlib import Path  # filesystem-safe paths

# Import our Movie data class used across the project
from .models import Movie  # structured movie record

# Console logging
from loguru import logger  # console logger


# Number of columns a row must provide to become a Movie
EXPECTED_FIELDS = 8

# Locale-independent formats; re.ASCII keeps \d to 0-9 only
RE_INT = re.compile(r"^\s*[+-]?\d+\s*$", re.ASCII)
RE_FLOAT = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?\s*$", re.ASCII)
RE_DATE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$", re.ASCII)


def split_csv_line(line: str) -> List[str]:
	"""
	Split one line into raw field values.
	Commas inside quotes are literal. A quote preceded by a backslash does not
	toggle quoting and is kept in the value together with the backslash.
	"""
	values: List[str] = []  # completed fields
	current: List[str] = []  # characters of the field being built
	in_quotes = False  # quoting state, reset for every line

	for i, c in enumerate(line):
		if c == '"' and (i == 0 or line[i - 1] != '\\'):
			in_quotes = not in_quotes  # toggle, quote itself is dropped
		elif c == ',' and not in_quotes:
			values.append(''.join(current))  # field boundary
			current = []
		else:
			current.append(c)

	values.append(''.join(current))  # last field (possibly empty)
	return values


def parse_int(value: str) -> Optional[int]:
	"""Parse an integer in the fixed format, or None."""
	if not RE_INT.match(value):
		return None
	return int(value)


def parse_float(value: str) -> Optional[float]:
	"""Parse a decimal/exponent float in the fixed format, or None (no nan/inf)."""
	if not RE_FLOAT.match(value):
		return None
	return float(value)


def parse_date(value: str) -> Optional[date]:
	"""Parse a strict YYYY-MM-DD date naming a real calendar day, or None."""
	match = RE_DATE.match(value)
	if not match:
		return None
	year, month, day = (int(part) for part in match.groups())
	if year < 1 or not 1 <= month <= 12:
		return None
	if not 1 <= day <= calendar.monthrange(year, month)[1]:
		return None
	return date(year, month, day)


def parse_movie_line(line: str) -> Optional[Movie]:
	"""
	Convert one data line into a Movie.
	Returns None when the line has too few fields or any typed field is invalid;
	a partially valid row never produces a record.
	"""
	values = split_csv_line(line)
	if len(values) < EXPECTED_FIELDS:
		return None

	movie_id = parse_int(values[0])  # id
	release_date = parse_date(values[3])  # release date
	popularity = parse_float(values[5])  # popularity
	vote_average = parse_float(values[6])  # vote average
	vote_count = parse_int(values[7])  # vote count

	if None in (movie_id, release_date, popularity, vote_average, vote_count):
		return None

	return Movie(
		id=movie_id,
		original_language=values[1],
		overview=values[2],
		release_date=release_date,
		title=values[4],
		popularity=popularity,
		vote_average=vote_average,
		vote_count=vote_count,
	)


class DataLoader:
	"""
	Handles loading and parsing of the movies CSV file.
	"""

	def parse_lines(self, lines: Iterable[str]) -> List[Movie]:
		"""
		Parse an iterable of raw lines (header first) into movies, in source order.
		Bad rows are dropped silently.
		"""
		movies: List[Movie] = []  # accumulator for parsed Movie objects
		for line_num, line in enumerate(lines):
			if line_num == 0:
				continue  # header is never validated
			movie = parse_movie_line(line.rstrip('\n'))
			if movie is None:
				logger.debug(f"[DataLoader] Dropped line {line_num + 1}")
				continue
			movies.append(movie)
		return movies

	def load_movies_from_csv(self, filepath) -> List[Movie]:
		"""
		Load movies from a CSV file.
		Raises FileNotFoundError when the file does not exist.
		"""
		filepath = Path(filepath)  # normalize path

		# Validate the file presence early to give clear error messages
		if not filepath.exists():
			raise FileNotFoundError(f"Movie data file not found: {filepath}")

		logger.info(f"[DataLoader] Loading movies from {filepath}...")  # log action

		# utf-8-sig strips a BOM; newline=None folds \r\n and \r into \n
		with open(filepath, 'r', encoding='utf-8-sig', newline=None) as f:
			movies = self.parse_lines(f)

		logger.info(f"[DataLoader] Successfully loaded {len(movies)} movies.")  # summary
		return movies
