import argparse
import logging
import sys
from .core import MarketInputs, OptionKind, CALL
from .errors import BSVolError, InvalidOptionKindError
from .black_scholes import price as bs_price, greeks as bs_greeks
from .volatility import estimate
from .series import read_price_series
from .report import format_price, format_volatility, format_greeks

logger = logging.getLogger(__name__)

EXIT_ERROR = 1
EXIT_BAD_KIND = 2


def _kind(s: str):
    try:
        return OptionKind.parse(s)
    except InvalidOptionKindError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _count(s: str) -> int:
    try:
        n = int(s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {s!r}") from None
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {n}")
    return n


def add_market(parser: argparse.ArgumentParser):
    parser.add_argument("--spot", "--S0", dest="spot", type=float, required=True)
    parser.add_argument("--strike", "--K", dest="strike", type=float, required=True)
    parser.add_argument("--rate", "--r", dest="rate", type=float, required=True,
                        help="cont. risk-free, e.g. 0.05 for 5%%")
    parser.add_argument("--time", "--T", dest="time", type=float, required=True,
                        help="years, e.g. 0.5 for 6 months")


def add_series(parser: argparse.ArgumentParser):
    parser.add_argument("--prices", required=True,
                        help="text file with one price per line")
    parser.add_argument("--max-count", dest="max_count", type=_count, default=None,
                        help="use only the first N prices (legacy tool: 999)")


def _load_vol(args) -> float:
    prices = read_price_series(args.prices, max_count=args.max_count)
    return estimate(prices)


def cmd_vol(args):
    print(format_volatility(_load_vol(args)))
    return 0


def cmd_price(args):
    # Volatility and input errors abort the run; a bad kind only skips pricing.
    vol = _load_vol(args)
    print(format_volatility(vol))
    inputs = MarketInputs(args.spot, args.strike, args.rate, args.time, vol)

    if args.greeks:
        print()
        print(format_greeks(bs_greeks(inputs)))

    try:
        kind = OptionKind.parse(args.kind)
    except InvalidOptionKindError as e:
        print(f"Invalid option choice: {e}", file=sys.stderr)
        return EXIT_BAD_KIND
    print(format_price(bs_price(inputs, kind)))
    return 0


def cmd_bs(args):
    inputs = MarketInputs(args.spot, args.strike, args.rate, args.time, args.sigma)
    print(format_price(bs_price(inputs, args.kind)))
    return 0


def cmd_greeks(args):
    inputs = MarketInputs(args.spot, args.strike, args.rate, args.time, args.sigma)
    print(format_greeks(bs_greeks(inputs)))
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="bsvol",
        description="Black-Scholes pricing with historical volatility",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    # Historical volatility only
    p_vol = sub.add_parser("vol", help="annualised historical volatility")
    add_series(p_vol)
    p_vol.set_defaults(func=cmd_vol)

    # Full workflow: file -> volatility -> greeks -> price
    p_px = sub.add_parser("price", help="price from a historical price file")
    add_market(p_px)
    add_series(p_px)
    p_px.add_argument("--kind", default=CALL.value, help="call|put (or 1|2)")
    p_px.add_argument("--greeks", action="store_true", help="print Greek analytics")
    p_px.set_defaults(func=cmd_price)

    # Supplied volatility
    p_bs = sub.add_parser("bs", help="Black-Scholes price with a given sigma")
    add_market(p_bs)
    p_bs.add_argument("--sigma", type=float, required=True)
    p_bs.add_argument("--kind", type=_kind, default=CALL, help="call|put (or 1|2)")
    p_bs.set_defaults(func=cmd_bs)

    p_gk = sub.add_parser("greeks", help="Greeks report with a given sigma")
    add_market(p_gk)
    p_gk.add_argument("--sigma", type=float, required=True)
    p_gk.set_defaults(func=cmd_greeks)

    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return args.func(args)
    except BSVolError as e:
        logger.debug("command %s failed", args.cmd, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
