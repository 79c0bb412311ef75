"""
Print a summary of the movie dataset.

This script:
1) Loads movies from data/tmdb_top_rated_movies.csv (or MOVIES_CSV_PATH)
2) Computes the statistics the API serves
3) Logs the headline numbers and the language distribution

Usage:
    python -m scripts.dataset_report [path/to/movies.csv]
"""

import sys  # optional path argument
import time  # measure step timings
from pathlib import Path  # filesystem-safe paths

from loguru import logger  # console logging

from src import config  # default dataset path and logging
from src.movie_store import MovieStore  # data ingestion
from src.query_engine import MovieQueryEngine  # statistics


def main(argv=None):
	argv = sys.argv[1:] if argv is None else argv
	config.setup_logging()

	# Headline banner for visibility in console
	logger.info("=" * 60)
	logger.info("Movie Dataset Report")
	logger.info("=" * 60)

	data_path = Path(argv[0]) if argv else config.MOVIES_CSV_PATH  # input dataset

	# 1) Load data
	logger.info("[1/2] Loading movies...")
	t0 = time.time()  # start timer
	store = MovieStore.from_csv(data_path)  # read dataset
	logger.info(f"[OK] Loaded {len(store)} movies in {time.time() - t0:.2f}s")

	# 2) Statistics
	logger.info("[2/2] Computing statistics...")
	stats = MovieQueryEngine(store).get_movie_statistics()
	if not stats.has_data:
		logger.warning("Dataset contains no valid movies.")
		return 1

	logger.info(f"Average rating   : {stats.average_rating:.2f}")
	logger.info(f"Rating range     : {stats.lowest_rating} - {stats.highest_rating}")
	logger.info(f"Average popularity: {stats.average_popularity:.2f}")
	logger.info(f"Release years    : {stats.year_range.earliest_year} - {stats.year_range.latest_year}")
	logger.info("Languages:")
	for entry in stats.language_distribution:
		logger.info(f"  {entry.language:<6} {entry.count}")

	logger.info("=" * 60)
	return 0


if __name__ == '__main__':
	sys.exit(main())  # invoke report
