from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .buffer import Output, ob_demo
from .config import build_options, config_path, load_config
from .diagnostics import run_diag
from .errors import SmokeUserError
from .jsonic import dumps as jdumps
from .log import setup_logging
from .script import run_script
from .version import tool_version


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="smoke",
        description="Runtime smoke-test scenario",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {tool_version()}")
    sub = p.add_subparsers(dest="cmd", required=True)

    def add_config(sp: argparse.ArgumentParser) -> None:
        sp.add_argument(
            "--config",
            type=Path,
            metavar="PATH",
            help="config file (default: ./smoke.yaml)",
        )

    sp_run = sub.add_parser("run", help="Run the scenario on stdout")
    add_config(sp_run)
    sp_run.add_argument(
        "--include",
        action="store_true",
        help="include <script-dir>/web-bootstrap.py before anything else",
    )
    sp_run.add_argument(
        "--dump",
        action="store_true",
        help="dump server/environment info after the scenario",
    )
    sp_run.add_argument(
        "--script-dir",
        type=Path,
        metavar="DIR",
        help="directory the bootstrap file is looked up in",
    )

    sub.add_parser("ob-demo", help="Run the output-buffering demo in isolation")

    sp_diag = sub.add_parser("diag", help="Environment and config diagnostics (JSON)")
    add_config(sp_diag)

    return p


def main(argv: list[str] | None = None) -> int:
    ns = _build_parser().parse_args(argv)
    setup_logging()

    try:
        if ns.cmd == "run":
            cfg = load_config(config_path(Path.cwd(), ns.config))
            opts = build_options(
                cfg,
                include=bool(ns.include),
                dump=bool(ns.dump),
                script_dir=ns.script_dir,
            )
            with Output(sys.stdout) as out:
                run_script(opts, out)
            return 0

        if ns.cmd == "ob-demo":
            with Output(sys.stdout) as out:
                ob_demo(out)
            return 0

        if ns.cmd == "diag":
            report = run_diag(config=ns.config)
            sys.stdout.write(jdumps(report.model_dump(mode="json")))
            return 0

    except SmokeUserError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
