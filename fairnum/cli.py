import argparse
import logging

from .config import load_defaults
from .crypto import generate_random_hex
from .engine import FairNumbers
from .errors import FairnumError, InvalidParameterError
from .seed import SEED_HEX_LENGTH
from .verify import hash_server_seed, verify_server_seed


def _weight(value: str):
    label, sep, weight = value.partition("=")
    if not sep or not label:
        raise argparse.ArgumentTypeError(f"Expected label=weight, received '{value}'.")
    try:
        return label, float(weight)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Weight for '{label}' must be a number.") from exc


def _difficulty(value: str):
    try:
        return int(value)
    except ValueError:
        return value


def _add_seed_args(p, defaults):
    p.add_argument("--server", default=defaults.server_seed,
                   help="Server seed (default: $FAIRNUM_SERVER_SEED or generated)")
    p.add_argument("--client", nargs="+", default=None,
                   help="Client seed; several values are joined with '|'")
    p.add_argument("--nonce", type=int, default=0, help="Starting nonce (default 0)")
    p.add_argument("--index", type=int, default=None, help="Use index mode starting here")


def make_parser(defaults=None):
    defaults = defaults or load_defaults()
    p = argparse.ArgumentParser(
        description="Provably fair numbers from server seed, client seed and nonce"
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_hash = sub.add_parser("hash", help="SHA-256 commitment of a server seed")
    p_hash.add_argument("--server", required=True)

    p_verify = sub.add_parser("verify", help="Check a revealed server seed against its hash")
    p_verify.add_argument("--server", required=True)
    p_verify.add_argument("--hash", required=True, dest="expected")

    p_crash = sub.add_parser("crash", help="Crash multipliers for consecutive nonces")
    _add_seed_args(p_crash, defaults)
    p_crash.add_argument("--rounds", type=int, default=1, help="Number of rounds to generate")
    p_crash.add_argument("--edge", type=float, default=defaults.house_edge,
                         help="House edge, 1 = 1%% or 0.01 = 1%%")
    p_crash.add_argument("--max", type=float, default=defaults.crash_max, dest="max_cap")
    p_crash.add_argument("--out", default=None, help="Append results to a CSV or JSON file")

    p_ints = sub.add_parser("ints", help="List of integers in [min, max]")
    _add_seed_args(p_ints, defaults)
    p_ints.add_argument("--min", type=int, required=True, dest="lo")
    p_ints.add_argument("--max", type=int, required=True, dest="hi")
    p_ints.add_argument("--size", type=int, default=5)
    p_ints.add_argument("--unique", action="store_true")

    p_shuffle = sub.add_parser("shuffle", help="Fisher-Yates shuffle of the given items")
    _add_seed_args(p_shuffle, defaults)
    p_shuffle.add_argument("--items", nargs="*", default=[])

    p_pick = sub.add_parser("pick", help="Weighted pick, e.g. --weights a=1 b=2.5")
    _add_seed_args(p_pick, defaults)
    p_pick.add_argument("--weights", nargs="+", type=_weight, required=True)

    p_pump = sub.add_parser("pump", help="Pump/balloon round: pop point and payout table")
    _add_seed_args(p_pump, defaults)
    p_pump.add_argument("--difficulty", type=_difficulty, default="medium",
                        help="easy, medium, hard, expert or a burst count")
    p_pump.add_argument("--size", type=int, default=defaults.pump_size)
    p_pump.add_argument("--edge", type=float, default=defaults.pump_edge)

    p_draw = sub.add_parser("draw", help="Batch of unique-number draws, one client seed per line")
    p_draw.add_argument("--server", default=defaults.server_seed)
    p_draw.add_argument("--count", type=int, default=10)
    p_draw.add_argument("--min", type=int, default=1, dest="lo")
    p_draw.add_argument("--max", type=int, default=90, dest="hi")
    p_draw.add_argument("--size", type=int, default=90)
    p_draw.add_argument("--out", default=None, help="Append draws to a CSV or JSON file")

    p_audit = sub.add_parser("audit", help="Statistical check of generated or recorded outcomes")
    _add_seed_args(p_audit, defaults)
    p_audit.add_argument("--kind", choices=["crash", "ints"], default="crash")
    p_audit.add_argument("--data", default=None, help="CSV/JSON with recorded outcomes")
    p_audit.add_argument("--column", default="value")
    p_audit.add_argument("--rounds", type=int, default=10000, help="Samples to generate without --data")
    p_audit.add_argument("--edge", type=float, default=defaults.house_edge)
    p_audit.add_argument("--min", type=int, default=1, dest="lo")
    p_audit.add_argument("--max", type=int, default=6, dest="hi")
    p_audit.add_argument("--x", nargs="+", type=float, default=None, help="Thresholds for P(X>=x)")
    p_audit.add_argument("--plot", action="store_true", help="Show survival plot")

    return p


def _engine(args, defaults):
    return FairNumbers(args.client, args.server, nonce=args.nonce, index=args.index,
                       defaults=defaults)


def _audit(args, defaults):
    import numpy as np

    from .export import load_values
    from .fit import best_model_by_aic, fit_models
    from .report import prob_ge_thresholds, summarize_fit, summarize_uniformity
    from .survival import empirical_survival
    from .uniformity import uniformity_test

    if not args.data and args.rounds < 1:
        raise InvalidParameterError(f"audit: --rounds must be at least 1, got {args.rounds}")
    if args.data:
        values = load_values(args.data, args.column).values
    else:
        pf = _engine(args, defaults)
        print(f"server_seed_hash={pf.server_seed_hash}")
        if args.kind == "crash":
            values = np.array(pf.crash_sequence(args.rounds, house_edge=args.edge))
        else:
            values = np.array(pf.int_range(args.lo, args.hi, args.rounds))

    if args.kind == "ints":
        print(summarize_uniformity(uniformity_test(values, args.lo, args.hi)))
        return

    fits = fit_models(values)
    best = best_model_by_aic(fits)
    print(summarize_fit(fits, best, house_edge=args.edge))
    if args.x:
        for x, p in zip(args.x, prob_ge_thresholds(best, args.x)):
            print(f"P(X>= {x:.4g}) = {p:.6f}")
    if args.plot:
        from .plotting import plot_survival
        plot_survival(empirical_survival(values), fits, house_edge=args.edge)


def run(args, defaults):
    if args.cmd == "hash":
        print(hash_server_seed(args.server))
    elif args.cmd == "verify":
        ok = verify_server_seed(args.server, args.expected)
        print("OK" if ok else "MISMATCH")
        return 0 if ok else 1
    elif args.cmd == "crash":
        pf = _engine(args, defaults)
        start = pf.state.counter
        vals = pf.crash_sequence(args.rounds, house_edge=args.edge, max_cap=args.max_cap)
        print(f"server_seed_hash={pf.server_seed_hash}")
        label = pf.mode.value
        for i, v in enumerate(vals):
            print(f"{label}={start + i}  R={v:.2f}x")
        if args.out:
            from .export import write_records
            write_records(args.out, [
                {"client_seed": pf.client_seed, label: start + i, "value": v}
                for i, v in enumerate(vals)
            ])
    elif args.cmd == "ints":
        pf = _engine(args, defaults)
        print(" ".join(str(n) for n in pf.int_range(args.lo, args.hi, args.size, args.unique)))
    elif args.cmd == "shuffle":
        pf = _engine(args, defaults)
        print(" ".join(pf.shuffle(list(args.items))))
    elif args.cmd == "pick":
        pf = _engine(args, defaults)
        choice = pf.pick(args.weights)
        print("(none)" if choice is None else choice)
    elif args.cmd == "pump":
        pf = _engine(args, defaults)
        rnd = pf.pump(args.difficulty, size=args.size, edge=args.edge)
        print(f"pop_point={rnd.pop_point} bursts={rnd.burst_count} size={rnd.size}")
        for k in range(rnd.pop_point):
            print(f"k={k}  S={rnd.survival_probability(k):.6f}  payout={rnd.payout_multiplier(k):.2f}x")
    elif args.cmd == "draw":
        rows = []
        server = args.server or generate_random_hex(SEED_HEX_LENGTH)
        for i in range(args.count):
            pf = FairNumbers(str(i), server, defaults=defaults)
            nums = pf.sample_unique(args.lo, args.hi, args.size)
            print(" ".join(str(n) for n in nums))
            rows.append({"client_seed": pf.client_seed, "server_seed_hash": pf.server_seed_hash,
                         "numbers": " ".join(str(n) for n in nums)})
        if args.out:
            from .export import write_records
            write_records(args.out, rows)
    elif args.cmd == "audit":
        _audit(args, defaults)
    return 0


def main(argv=None):
    defaults = load_defaults()
    parser = make_parser(defaults)
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    try:
        return run(args, defaults)
    except FairnumError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    raise SystemExit(main())
