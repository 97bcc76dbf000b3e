#!/usr/bin/env python3
"""Batch-price a book of options from historical price files.

Usage
-----
    python scripts/price_book.py --input book.csv --output prices.csv
    python scripts/price_book.py --input book.csv --output prices.json --greeks

Input CSV format
----------------
    id,spot,strike,rate,time,kind,history
    1,100,110,0.05,0.5,call,data/aapl.txt
    2,100,95,0.05,1.0,put,data/aapl.txt

``history`` is a text file with one price per line, resolved relative to
the input CSV.  Each file's volatility is estimated once and reused.

Output
------
    CSV or JSON with columns: id, volatility, price, and with --greeks the
    eight Greeks (delta_call ... rho_put).
"""

from __future__ import annotations
import argparse
import csv
import json
import logging
import sys
from pathlib import Path

from bsvol import (
    MarketInputs, BSVolError, bs_price, bs_greeks,
    estimate_volatility, read_price_series,
)

logger = logging.getLogger("price_book")


def _cell(row: dict, name: str) -> str:
    """Stripped cell text; short rows leave trailing cells as None."""
    value = (row.get(name) or "").strip()
    if not value:
        raise KeyError(f"missing column {name!r}")
    return value


def _price_row(row: dict, base: Path, vol_cache: dict, compute_greeks: bool) -> dict:
    """Price a single book row and return result dict."""
    rid = row.get("id") or ""
    history = (base / _cell(row, "history")).resolve()
    if history not in vol_cache:
        vol_cache[history] = estimate_volatility(read_price_series(history))
    vol = vol_cache[history]

    inputs = MarketInputs(
        spot=float(_cell(row, "spot")),
        strike=float(_cell(row, "strike")),
        rate=float(_cell(row, "rate")),
        time=float(_cell(row, "time")),
        volatility=vol,
    )
    result = {"id": rid, "volatility": vol,
              "price": bs_price(inputs, _cell(row, "kind"))}
    if compute_greeks:
        result.update(bs_greeks(inputs).as_dict())
    return result


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Batch-price an options book from historical prices."
    )
    parser.add_argument("--input", required=True, help="Path to book CSV")
    parser.add_argument("--output", required=True, help="Output path (.csv or .json)")
    parser.add_argument("--greeks", action="store_true", help="Compute Greeks")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    # Read book
    input_path = Path(args.input)
    with open(input_path, newline="") as f:
        rows = list(csv.DictReader(f))

    logger.info("Pricing %d positions...", len(rows))

    results = []
    vol_cache: dict = {}
    for i, row in enumerate(rows):
        try:
            results.append(_price_row(row, input_path.parent, vol_cache, args.greeks))
        except (BSVolError, KeyError, ValueError) as e:
            logger.error("  Row %d (id=%s): ERROR - %s", i, row.get("id") or "?", e)
            results.append({"id": row.get("id") or "", "price": None, "error": str(e)})

    # Write output
    output_path = Path(args.output)
    if output_path.suffix == ".json":
        with open(output_path, "w") as f:
            json.dump(results, f, indent=2, default=str)
    else:
        if not results:
            logger.info("No results to write.")
            return 0
        fieldnames = list(results[0].keys())
        for r in results:
            for k in r:
                if k not in fieldnames:
                    fieldnames.append(k)
        with open(output_path, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames, extrasaction="ignore")
            writer.writeheader()
            writer.writerows(results)

    logger.info("Results written to %s", args.output)

    priced = [r for r in results if r.get("price") is not None]
    failed = [r for r in results if r.get("price") is None]
    logger.info("  Priced: %d  |  Failed: %d", len(priced), len(failed))
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
