"""
US Lottery Historical Data Collector

Fetches draw history from the NY Open Data (SODA) API, parses it into
DrawResult records and stores one CSV per game under Config.DATA_DIR.
"""
import logging
import os

import pandas as pd
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from lottostats.config import Config
from lottostats.draws import DrawResult, DrawTime, draws_to_frame, frame_to_draws, ordered_draws
from lottostats.exceptions import DataFetchError
from lottostats.games import Game, resolve_schema
from lottostats.validation import run_all_checks

logger = logging.getLogger(__name__)


def csv_path(game) -> str:
    return os.path.join(Config.DATA_DIR, f"{resolve_schema(game).slug}.csv")


# ── Fetching ─────────────────────────────────────────────────────────────

RETRY_STATUSES = (429, 500, 502, 503, 504)


def build_session():
    """A requests session that retries transient failures with exponential backoff."""
    session = requests.Session()
    retry = Retry(
        total=Config.RETRY_ATTEMPTS,
        backoff_factor=Config.RETRY_BASE_DELAY,
        status_forcelist=RETRY_STATUSES,
        allowed_methods=("GET",),
    )
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    return session


def fetch_raw(game, session=None):
    """Download every raw record for a game, newest first.

    Retrying is left to the session's transport adapter (see ``build_session``);
    whatever still fails surfaces as ``DataFetchError``.
    """
    schema = resolve_schema(game)
    session = session or build_session()
    params = {"$limit": Config.SODA_ROW_LIMIT, "$order": "draw_date DESC"}

    logger.info("Fetching %s data from SODA API...", schema.name)
    try:
        resp = session.get(schema.data_source.url, params=params, timeout=Config.REQUEST_TIMEOUT)
        if resp.status_code != 200:
            raise DataFetchError(f"Failed to fetch {schema.name}: HTTP {resp.status_code}")
        records = resp.json()
    except (requests.RequestException, ValueError) as e:
        raise DataFetchError(f"Failed to fetch {schema.name}: {e}") from e

    if not isinstance(records, list):
        raise DataFetchError(f"Unexpected {schema.name} payload: {type(records).__name__}")
    logger.info("Received %d %s records", len(records), schema.name)
    return records


# ── Parsing ──────────────────────────────────────────────────────────────

def _split_numbers(text):
    """Whitespace-separated integers, or None if any token is not a number."""
    if not text or not isinstance(text, str):
        return None
    try:
        return [int(tok) for tok in text.split()]
    except ValueError:
        return None


def _parse_int(value):
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return None


def _parse_record(record, schema):
    raw_date = record.get("draw_date")
    if not raw_date:
        return []
    try:
        stamp = pd.Timestamp(str(raw_date))
    except (TypeError, ValueError):
        return []
    if pd.isna(stamp):
        return []
    date = stamp.date()

    source = schema.data_source
    count = schema.main_count

    # Take 5 style: midday and evening draws in separate fields
    if source.split_daily:
        results = []
        for field_name, draw_time in ((source.midday_field, DrawTime.MIDDAY),
                                      (source.evening_field, DrawTime.EVENING)):
            nums = _split_numbers(record.get(field_name))
            if nums and len(nums) >= count:
                results.append(DrawResult(date=date, numbers=tuple(nums[:count]), draw_time=draw_time))
        return results

    nums = _split_numbers(record.get("winning_numbers"))
    if nums is None:
        return []

    if not schema.has_bonus:
        if len(nums) < count:
            return []
        bonus = None
    elif source.bonus_field:
        # Bonus in separate field (Mega Millions, Cash4Life, NY Lotto)
        if len(nums) < count:
            return []
        bonus = _parse_int(record.get(source.bonus_field))
        if bonus is None:
            return []
    else:
        # Bonus is the value after the main numbers (Powerball)
        if len(nums) < count + 1:
            return []
        bonus = nums[count]

    multiplier = None
    if source.multiplier_field and record.get(source.multiplier_field) is not None:
        multiplier = _parse_int(record[source.multiplier_field])

    return [DrawResult(date=date, numbers=tuple(nums[:count]), bonus_number=bonus, multiplier=multiplier)]


def parse_soda_response(records, game):
    """Parse raw SODA rows into draws, most-recent-first. Malformed rows are skipped."""
    schema = resolve_schema(game)
    draws = []
    skipped = 0
    for record in records:
        parsed = _parse_record(record, schema)
        if not parsed:
            skipped += 1
        draws.extend(parsed)
    if skipped:
        logger.info("%s: skipped %d unparseable records", schema.name, skipped)
    return ordered_draws(draws)


# ── Storage ──────────────────────────────────────────────────────────────

def load_draws(game):
    """Stored history for a game, most-recent-first; empty if never fetched."""
    path = csv_path(game)
    if not os.path.exists(path):
        logger.warning("No stored data at %s", path)
        return []
    df = pd.read_csv(path, dtype={"draw_time": "object"})
    return ordered_draws(frame_to_draws(df))


def save_draws(game, draws):
    os.makedirs(Config.DATA_DIR, exist_ok=True)
    path = csv_path(game)
    draws_to_frame(ordered_draws(draws)).to_csv(path, index=False)
    return path


def update_game(game, session=None):
    """
    Fetch, parse, validate and store one game's history.

    Refuses to overwrite stored data with a shorter history.

    Returns
    -------
    dict with keys: game, fetched, stored, saved, warnings
    """
    schema = resolve_schema(game)
    existing = load_draws(game)
    draws = parse_soda_response(fetch_raw(game, session), game)

    checks = run_all_checks(draws, schema)
    for message in checks["warnings"]:
        logger.warning(message)

    saved = False
    if len(draws) < len(existing):
        logger.error("%s: fetched %d draws but %d are stored; keeping stored data",
                     schema.name, len(draws), len(existing))
    else:
        save_draws(game, draws)
        saved = True
        logger.info("%s: saved %d draws to %s", schema.name, len(draws), csv_path(game))

    return {
        "game": schema.slug,
        "fetched": len(draws),
        "stored": len(existing),
        "saved": saved,
        "warnings": checks["warnings"],
    }


def update_all(games=None, session=None):
    session = session or build_session()
    return [update_game(g, session) for g in (games or list(Game))]
