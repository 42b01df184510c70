# folio/cli.py

from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path

from folio.core.data import PortfolioDataError, load_portfolio
from folio.core.load.paths import prefix_path
from folio.core.media.cache import ResolutionCache
from folio.core.media.manifest import DEFAULT_DATA_FILES, generate_manifest
from folio.core.media.service import ThumbnailService
from folio.diagnostics import attach_console
from folio.schemas.models import ProbePolicy


def _cmd_manifest(args: argparse.Namespace) -> int:
    public_dir = Path(args.public_dir)
    files = args.data or [str(public_dir / f) for f in DEFAULT_DATA_FILES]
    failed = 0
    for f in files:
        path = Path(f)
        try:
            n = generate_manifest(path, public_dir)
        except (OSError, ValueError) as e:
            print(f"failed: {path}: {e}")
            failed += 1
            continue
        print(f"{path}: {n} galleries")
    return 1 if failed else 0


def _cmd_thumbs(args: argparse.Namespace) -> int:
    overrides = {} if args.base_path is None else {"base_path": args.base_path}
    policy = ProbePolicy(
        allow_network=bool(args.online),
        timeout_s=float(args.timeout),
        public_dir=Path(args.public_dir),
        verify_decode=bool(args.verify),
        **overrides,
    )
    try:
        portfolio = load_portfolio(Path(args.data_dir))
    except PortfolioDataError as e:
        print(f"error: {e}")
        return 2
    service = ThumbnailService(policy=policy, cache=ResolutionCache())

    pairs = list(portfolio.iter_subjects())
    results = asyncio.run(service.resolve_all(s for _, s in pairs))

    found = 0
    for (collection, subject), thumb in zip(pairs, results):
        url = prefix_path(thumb.url, policy.base_path) if thumb else "-"
        found += thumb is not None
        print(f"{collection}\t{subject.id}\t{url}")
    print(f"thumbnails: {found}/{len(pairs)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="folio", description="Portfolio media thumbnails")
    p.add_argument("--verbose", type=int, default=0, help="Log progress to stderr")
    sub = p.add_subparsers(dest="command", required=True)

    pm = sub.add_parser("manifest", help="Populate gallery image lists from the public folder")
    pm.add_argument("--public-dir", type=str, default="public")
    pm.add_argument("--data", type=str, nargs="*", default=None, help="Data files (default: projects.json, achievements.json)")
    pm.set_defaults(func=_cmd_manifest)

    pt = sub.add_parser("thumbs", help="Resolve a thumbnail for every subject")
    pt.add_argument("--data-dir", type=str, default="public/data")
    pt.add_argument("--public-dir", type=str, default="public")
    pt.add_argument("--base-path", type=str, default=None, help="Deployment prefix, e.g. /portfolio")
    pt.add_argument("--online", type=int, choices=(0, 1), default=0, help="Allow probing http(s) candidates")
    pt.add_argument("--timeout", type=float, default=10.0)
    pt.add_argument("--verify", type=int, choices=(0, 1), default=1, help="Decode images before accepting them")
    pt.set_defaults(func=_cmd_thumbs)

    args = p.parse_args(argv)
    if args.verbose:
        attach_console(logging.DEBUG if args.verbose > 1 else logging.INFO)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
