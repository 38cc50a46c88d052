import argparse
import dataclasses
import json
import logging
import sys

from .config import IdxConfig, load_config
from .errors import IdxError
from .ids import ulid, uuid4
from .ulid import configure


def _setup_logging(cfg: IdxConfig) -> None:
    logging.basicConfig(level=cfg.log_level, format="%(levelname)s %(name)s: %(message)s")


def _check_count(count: int, cfg: IdxConfig) -> None:
    if count < 1 or count > cfg.max_count:
        raise IdxError(f"count must be between 1 and {cfg.max_count}, got {count}")


def _emit(ids, as_json: bool) -> None:
    if as_json:
        print(json.dumps({"ids": ids}))
    else:
        for i in ids:
            print(i)


def cmd_ulid(args: argparse.Namespace) -> int:
    cfg = args.config
    if args.secure:
        cfg = dataclasses.replace(cfg, random_source="secure")
    if args.lenient:
        cfg = dataclasses.replace(cfg, strict_time_range=False)
    try:
        _check_count(args.count, cfg)
        configure(cfg)
        ids = [ulid(args.time) for _ in range(args.count)]
    except IdxError as e:
        print(f"ERROR: {e}")
        return 1
    _emit(ids, args.json)
    return 0


def cmd_uuid(args: argparse.Namespace) -> int:
    try:
        _check_count(args.count, args.config)
    except IdxError as e:
        print(f"ERROR: {e}")
        return 1
    _emit([uuid4() for _ in range(args.count)], args.json)
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    cfg = args.config
    uvicorn.run(
        "idx.web_api:app",
        host=args.host or cfg.host,
        port=args.port or cfg.port,
        log_level=cfg.log_level.lower(),
    )
    return 0


def cmd_config(args: argparse.Namespace) -> int:
    print(args.config.to_json())
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="idx", description="Generate ULIDs and UUIDs")
    sub = p.add_subparsers(dest="cmd", required=True)

    pl = sub.add_parser("ulid", help="Generate ULIDs")
    pl.add_argument("--time", "-t", type=float, default=None, help="Seconds since unix epoch, millisecond precision (default: now)")
    pl.add_argument("--count", "-n", type=int, default=1, help="Number of ULIDs to generate")
    pl.add_argument("--secure", action="store_true", help="Draw the random part from the OS entropy pool")
    pl.add_argument("--lenient", action="store_true", help="Truncate out-of-range timestamps instead of failing")
    pl.add_argument("--json", action="store_true", help="Print a JSON object instead of one id per line")
    pl.set_defaults(func=cmd_ulid)

    pu = sub.add_parser("uuid", help="Generate version 4 UUIDs")
    pu.add_argument("--count", "-n", type=int, default=1, help="Number of UUIDs to generate")
    pu.add_argument("--json", action="store_true", help="Print a JSON object instead of one id per line")
    pu.set_defaults(func=cmd_uuid)

    ps = sub.add_parser("serve", help="Serve the HTTP API")
    ps.add_argument("--host", help="Bind address (default: IDX_HOST)")
    ps.add_argument("--port", type=int, help="Port (default: IDX_PORT)")
    ps.set_defaults(func=cmd_serve)

    pc = sub.add_parser("config", help="Show the effective configuration")
    pc.set_defaults(func=cmd_config)

    return p


def main(argv=None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        args.config = load_config()
    except IdxError as e:
        print(f"ERROR: {e}")
        return 1
    _setup_logging(args.config)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
