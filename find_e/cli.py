"""
Command-line front end for the E-series search.

Usage examples:
  find-e 470 1200 3300 -err 2
  find-e -ratio 2.5 0.33 -err 0.5
  python -m find_e 4.7 9.9 --json

Values are plain floats (no unit suffixes). The maximum error is given in
percent and divided by 100 before reaching the search core.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, List, Sequence, TextIO

from pydantic import BaseModel

from .core.contracts import validate_ratio_search_result, validate_series_search_result
from .core.domain.results import RatioSearchResult, SeriesSearchResult
from .core.math.numerical_safeguards import InvalidInput, is_valid_float
from .search.escalator import DEFAULT_MAX_ERROR, EscalationConfig, SeriesEscalator
from .search.ratio import IndexingConvention

logger = logging.getLogger(__name__)

DEFAULT_MAX_ERROR_PCT = DEFAULT_MAX_ERROR * 100.0

_RULE = "-" * 41


def _pct(fraction: float) -> str:
    return f"{fraction * 100.0:.2f} %"


def render_series_result(result: SeriesSearchResult, out: TextIO) -> None:
    out.write(f"requested max. error: {_pct(result.max_error)}\n")
    out.write(_RULE + "\n")
    if not result.is_found:
        out.write("[!] unable to satisfy conditions\n")
        return

    out.write(f"best series: {result.series_name}\n")
    out.write(f"largest error: {_pct(result.worst_error)}\n")
    out.write(_RULE + "\n")
    out.write(f"{'R_orig':<12}{'R_series':<12}{'error':<12}\n")
    for m in result.matches:
        out.write(f"{m.original:<12.3f}{m.matched:<12.3f}{_pct(m.error):<12}\n")


def render_ratio_result(result: RatioSearchResult, out: TextIO) -> None:
    out.write(f"requested ratio: {result.ratio:g}  max. error: {_pct(result.max_error)}\n")
    out.write(_RULE + "\n")
    if not result.is_found:
        out.write("[!] unable to satisfy conditions\n")
        return

    out.write(f"best series: {result.series_name}\n")
    out.write(f"value 1: {result.value1:g}\n")
    out.write(f"value 2: {result.value2:g}\n")
    out.write(f"ratio: {result.achieved_ratio:.6g}\n")
    out.write(f"error: {_pct(result.error)}\n")


def _dump(result: BaseModel) -> dict[str, Any]:
    data = result.model_dump(mode="json")
    if isinstance(result, SeriesSearchResult):
        validate_series_search_result(data)
    else:
        validate_ratio_search_result(data)
    return data


def _write_json(results: Sequence[BaseModel], ratio_mode: bool, out: TextIO) -> None:
    payload: Any = [_dump(r) for r in results]
    if not ratio_mode:
        payload = payload[0]
    json.dump(payload, out, ensure_ascii=False, indent=2, allow_nan=False)
    out.write("\n")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="find-e",
        description="Find the smallest E-series that matches component values within a maximum error",
    )
    p.add_argument("values", nargs="*", type=float, help="Component values (or ratios with -ratio)")
    p.add_argument(
        "-err",
        dest="error_pct",
        type=float,
        default=DEFAULT_MAX_ERROR_PCT,
        help="Maximum relative error in percent (default: %(default)s)",
    )
    p.add_argument("-ratio", action="store_true", help="Find a value pair for each given ratio")
    p.add_argument(
        "--indexing",
        choices=[c.value for c in IndexingConvention],
        default=IndexingConvention.CONSISTENT.value,
        help="Series positions tried by the ratio search",
    )
    p.add_argument("--json", action="store_true", help="Emit results as JSON")
    p.add_argument("-v", "--verbose", action="count", default=0, help="-v info, -vv debug logging")
    return p


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_intermixed_args(argv)
    _configure_logging(args.verbose)

    if args.ratio and not args.values:
        parser.error("ratio mode requires at least one ratio")

    max_error = args.error_pct / 100.0
    escalator = SeriesEscalator(EscalationConfig(indexing=IndexingConvention(args.indexing)))

    try:
        if not is_valid_float(max_error):
            raise InvalidInput(f"max error must be a finite percentage, got {args.error_pct}")
        if args.ratio:
            results: List[BaseModel] = [escalator.find_best_ratio(r, max_error) for r in args.values]
        else:
            results = [escalator.find_best_series(args.values, max_error)]
    except InvalidInput as exc:
        logger.debug("Rejected input", exc_info=True)
        sys.stderr.write(f"error: {exc}\n")
        return 1

    if args.json:
        _write_json(results, args.ratio, sys.stdout)
        return 0

    for result in results:
        if isinstance(result, SeriesSearchResult):
            render_series_result(result, sys.stdout)
        else:
            render_ratio_result(result, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
