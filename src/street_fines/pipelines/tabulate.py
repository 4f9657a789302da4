"""
Fine tabulation pipeline for the parking tickets dataset.

Reads the tickets CSV in chunks, resolves every ticket's address to a street
name and totals the fines per street. Chunks are handed to a thread pool; all
workers share one StreetNameResolver so a street seen by one worker is a cache
hit for the others.

Modules:
    - logging_setup: Handles logging configuration.
    - settings: CSV column names, worker and chunk sizes.
    - address_cleaners: Street name resolution.
    - form_helpers: Column formatting and CSV output.

To run:
    $ python -m street_fines tabulate data/raw/Parking_Tags_Data_2012.csv
"""

import argparse
from collections import deque
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple, Union

import pandas as pd

from street_fines.utils.logging_setup import logger
from street_fines.config.settings import CSV_COLUMNS, DATA_STORAGE, PIPELINE_CONFIG
from street_fines.utils.data_extraction.address_cleaners import StreetNameResolver
from street_fines.utils.data_extraction.form_helpers.data_formatting import (
    format_column_name,
    totals_to_frame,
)
from street_fines.utils.data_extraction.form_helpers.file_io import (
    get_file_path,
    save_to_csv,
)


def _empty_totals() -> pd.Series:
    return pd.Series(
        dtype="int64",
        name="total_fines",
        index=pd.Index([], dtype=object, name="street"),
    )


def read_tickets(
    file_path: Union[str, Path],
    chunksize: int = PIPELINE_CONFIG["chunksize"],
    address_col: str = CSV_COLUMNS["address"],
    fine_col: str = CSV_COLUMNS["fine"],
) -> Iterator[pd.DataFrame]:
    """
    Reads the address and fine columns of a tickets CSV in chunks.

    Column names are matched after `format_column_name`, so 'Set Fine Amount'
    in the header is found as 'set_fine_amount'. Every yielded chunk has exactly the columns
    `address_col` and `fine_col`.

    Raises:
        ValueError: If either column is missing from the header.
    """
    header = pd.read_csv(file_path, nrows=0).columns
    formatted = {format_column_name(str(col)): col for col in header}

    missing = [col for col in (address_col, fine_col) if col not in formatted]
    if missing:
        logger.error(f"Columns {missing} not found in {file_path}")
        raise ValueError(f"Missing required columns: {', '.join(missing)}")

    raw_address, raw_fine = formatted[address_col], formatted[fine_col]
    reader = pd.read_csv(
        file_path,
        usecols=[raw_address, raw_fine],
        dtype={raw_address: str},
        chunksize=chunksize,
    )
    for chunk in reader:
        chunk = chunk.rename(columns={raw_address: address_col, raw_fine: fine_col})
        yield chunk[[address_col, fine_col]]


def tabulate_chunk(
    chunk: pd.DataFrame,
    resolver: StreetNameResolver,
    address_col: str = CSV_COLUMNS["address"],
    fine_col: str = CSV_COLUMNS["fine"],
) -> Tuple[pd.Series, int]:
    """
    Totals the fines of one chunk of tickets by street.

    Returns:
        (totals, unresolved) where totals maps street -> summed fines and
        unresolved counts the tickets whose address didn't resolve.
    """
    missing = [col for col in (address_col, fine_col) if col not in chunk.columns]
    if missing:
        logger.error(f"Columns {missing} not found in chunk")
        raise ValueError(f"Missing required columns: {', '.join(missing)}")

    streets = chunk[address_col].map(resolver.resolve)
    fines = pd.to_numeric(chunk[fine_col], errors="coerce").fillna(0).astype("float64")

    resolved = streets.notna()
    totals = fines[resolved].groupby(streets[resolved]).sum()
    return totals, int((~resolved).sum())


def tabulate_fines(
    chunks: Iterable[pd.DataFrame],
    resolver: Optional[StreetNameResolver] = None,
    workers: int = PIPELINE_CONFIG["workers"],
    address_col: str = CSV_COLUMNS["address"],
    fine_col: str = CSV_COLUMNS["fine"],
) -> pd.Series:
    """
    Totals fines by street over all chunks using a pool of worker threads.

    At most `workers * 2` chunks are in flight at once, so a chunked reader is
    only pulled as fast as the workers keep up.

    Args:
        chunks (Iterable[pd.DataFrame]): Ticket chunks, e.g. from `read_tickets`.
        resolver (StreetNameResolver): Shared resolver. A fresh one if None.
        workers (int): Number of worker threads.

    Returns:
        pd.Series: street -> total fines, most profitable street first
        (ties broken by street name). Integer totals when every total is a
        whole amount, float otherwise.

    Raises:
        ValueError: If `workers` is less than 1 or a chunk lacks a column.
    """
    if workers < 1:
        logger.error(f"Invalid worker count: {workers}")
        raise ValueError("`workers` must be at least 1.")

    if resolver is None:
        resolver = StreetNameResolver()

    window = workers * 2
    partials: List[pd.Series] = []
    unresolved = 0

    def _collect(future) -> None:
        nonlocal unresolved
        totals, missed = future.result()
        unresolved += missed
        if not totals.empty:
            partials.append(totals)

    with ThreadPoolExecutor(max_workers=workers) as pool:
        pending = deque()
        for chunk in chunks:
            pending.append(
                pool.submit(tabulate_chunk, chunk, resolver, address_col, fine_col)
            )
            if len(pending) >= window:
                _collect(pending.popleft())
        while pending:
            _collect(pending.popleft())

    if unresolved:
        logger.warning(f"Skipped {unresolved} tickets with unresolvable addresses.")

    if not partials:
        logger.info("No tickets resolved to a street.")
        return _empty_totals()

    totals = pd.concat(partials).groupby(level=0).sum()
    if (totals % 1 == 0).all():
        totals = totals.astype("int64")
    totals = totals.sort_index().sort_values(ascending=False, kind="mergesort")
    totals.index.name = "street"
    totals.name = "total_fines"

    logger.info(
        f"Tabulated fines for {len(totals)} streets "
        f"({len(resolver)} cached street keys)."
    )
    return totals


def sort_streets_by_profitability(
    file_path: Union[str, Path],
    workers: int = PIPELINE_CONFIG["workers"],
    chunksize: int = PIPELINE_CONFIG["chunksize"],
    resolver: Optional[StreetNameResolver] = None,
) -> pd.Series:
    """Reads a tickets CSV and returns fines per street, highest first."""
    logger.info(f"Tabulating fines from {file_path}")
    chunks = read_tickets(file_path, chunksize=chunksize)
    return tabulate_fines(chunks, resolver=resolver, workers=workers)


def run_tabulation_pipeline(args: argparse.Namespace) -> pd.Series:
    """
    Runs the tabulation end to end: read, tabulate, report the top streets
    and save all totals to CSV.
    """
    totals = sort_streets_by_profitability(
        args.csv,
        workers=args.workers,
        chunksize=args.chunksize,
    )

    for street, amount in totals.head(args.top).items():
        logger.info(f"{street or '<blank>'}: {amount}")

    output = args.output or get_file_path(
        ".", DATA_STORAGE["processed"], DATA_STORAGE["output_file"]
    )
    save_to_csv(totals_to_frame(totals), output)
    return totals
