from __future__ import annotations

import logging

from .bootstrap import bootstrap_path, include
from .buffer import Output
from .dump import Dumper
from .environment import server_vars
from .greeter import Greeter
from .sequence import drain, values
from .types import RunOptions

_LOG = logging.getLogger(__name__)


def run_script(opts: RunOptions, out: Output) -> Greeter:
    """
    Run the smoke scenario top to bottom and return the greeter used.

    Nothing is caught here: a missing bootstrap or a failure in any step
    ends the run.
    """
    if opts.run_bootstrap:
        include(bootstrap_path(opts.script_dir))

    stdout = out.handle()
    _LOG.debug("stdout handle: %r", stdout)

    dumper = Dumper(out)

    dbg = Greeter(out)
    dumper.dump(dbg.is_great("PHP Rocks !!"))

    produced = drain(values())
    _LOG.debug("sequence drained: %d value(s)", produced)

    out.echo("it works!\n")

    if opts.dump_environment:
        _LOG.info("dumping environment")
        dumper.dump(server_vars())

    return dbg


__all__ = ["run_script"]
