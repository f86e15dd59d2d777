"""
Fantasy baseball CLI — entry point for all operations.

Usage:
    fantasy-baseball serve              # Start the API server (+ sync scheduler)
    fantasy-baseball migrate status     # Show applied vs pending migrations
    fantasy-baseball migrate apply      # Apply pending migrations
    fantasy-baseball api-keys create draft-kit
    fantasy-baseball sync-players       # Run the MLB roster sync once
    fantasy-baseball seed-leagues       # Upsert the default league formats
    fantasy-baseball seed-players       # Upsert the sample roster
    fantasy-baseball version            # Show version
"""

from __future__ import annotations

import argparse
import sys

from fantasy_baseball.config import Config, load_config
from fantasy_baseball.context import AppContext, build_context
from fantasy_baseball.errors import ConfigError
from fantasy_baseball.logging_config import configure_logging


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="fantasy-baseball",
        description="Fantasy baseball data API and administration tools.",
    )
    parser.add_argument("--version", action="store_true", help="Show version and exit")

    subparsers = parser.add_subparsers(dest="command")

    # serve
    serve_parser = subparsers.add_parser("serve", help="Start the API server")
    serve_parser.add_argument("--host", default="0.0.0.0", help="Bind address")
    serve_parser.add_argument("--port", type=int, default=None, help="Port (default: $PORT or 3001)")
    serve_parser.add_argument(
        "--no-scheduler", action="store_true", help="Do not schedule the player sync"
    )

    # migrate
    migrate_parser = subparsers.add_parser("migrate", help="Run database migrations")
    migrate_parser.add_argument("action", nargs="?", choices=["status", "apply"], default="apply")
    migrate_parser.add_argument("target", nargs="?", help="Apply only this version (e.g. 002)")
    migrate_parser.add_argument("--dry-run", action="store_true", help="List without executing")

    # api-keys
    keys_parser = subparsers.add_parser(
        "api-keys",
        help="Manage service API keys",
        description="<create|rotate|set-status|show|delete> <service-name> [active|inactive]",
    )
    keys_parser.add_argument("args", nargs=argparse.REMAINDER)

    subparsers.add_parser("sync-players", help="Run the MLB roster sync once")
    subparsers.add_parser("seed-leagues", help="Upsert the default league formats")
    subparsers.add_parser("seed-players", help="Upsert the sample player roster")
    subparsers.add_parser("version", help="Show version")

    args = parser.parse_args(argv)

    if args.version or args.command == "version":
        from fantasy_baseball import __version__

        print(f"fantasy-baseball {__version__}")
        return 0

    if args.command is None:
        parser.print_help()
        return 0

    try:
        config = load_config()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    configure_logging(config)

    if args.command == "serve":
        return _cmd_serve(args, config)

    ctx = build_context(config)
    try:
        if args.command == "migrate":
            return _cmd_migrate(args, ctx)
        elif args.command == "api-keys":
            return _cmd_api_keys(args, ctx)
        elif args.command == "sync-players":
            return _cmd_sync_players(ctx)
        elif args.command == "seed-leagues":
            return _cmd_seed_leagues(ctx)
        elif args.command == "seed-players":
            return _cmd_seed_players(ctx)
        else:
            parser.print_help()
            return 0
    finally:
        ctx.close()


def _cmd_serve(args: argparse.Namespace, config: Config) -> int:
    import uvicorn

    from fantasy_baseball.api.app import create_app

    ctx = build_context(config)
    app = create_app(ctx, run_scheduler=not args.no_scheduler)
    port = args.port or config.port
    print(f"Starting Fantasy Baseball API on {args.host}:{port}...")
    uvicorn.run(app, host=args.host, port=port, log_config=None)
    return 0


def _cmd_migrate(args: argparse.Namespace, ctx: AppContext) -> int:
    from fantasy_baseball.db import migrate

    try:
        if args.action == "status":
            rows = migrate.status(ctx.db)
            for row in rows:
                applied_at = row["applied_at"].isoformat() if row["applied_at"] else "-"
                print(f"{row['version']:>5}  {row['status']:<8} {applied_at:<32} {row['filename']}")
            return 1 if any(r["status"] == "DRIFT" for r in rows) else 0

        versions = migrate.apply(ctx.db, version=args.target, dry_run=args.dry_run)
    except Exception as e:
        print(f"Error: Migration failed: {e}", file=sys.stderr)
        return 1

    label = "Would apply" if args.dry_run else "Applied"
    print(f"{label} {len(versions)} migration(s): {', '.join(versions) or 'none'}")
    return 0


def _cmd_api_keys(args: argparse.Namespace, ctx: AppContext) -> int:
    from fantasy_baseball.api_keys.manage import deps_for, run_manage_api_keys

    return run_manage_api_keys(args.args, deps_for(ctx.api_keys, ctx.db))


def _cmd_sync_players(ctx: AppContext) -> int:
    import asyncio

    from fantasy_baseball.jobs.sync import sync_players

    try:
        count = asyncio.run(sync_players(ctx))
    except Exception as e:
        print(f"Error: Player sync failed: {e}", file=sys.stderr)
        return 1
    print(f"Synced {count} players")
    return 0


def _cmd_seed_leagues(ctx: AppContext) -> int:
    from fantasy_baseball.leagues.seed import seed_default_leagues

    count = seed_default_leagues(ctx.leagues)
    print(f"Seeded {count} default leagues")
    return 0 if count else 1


def _cmd_seed_players(ctx: AppContext) -> int:
    from fantasy_baseball.players.samples import create_sample_players

    players = create_sample_players()
    try:
        count = ctx.players.upsert_players(players)
    except Exception as e:
        print(f"Error: Seeding sample players failed: {e}", file=sys.stderr)
        return 1
    print(f"Upserted {count} of {len(players)} sample players")
    return 0


if __name__ == "__main__":
    sys.exit(main())
