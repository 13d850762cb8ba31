from __future__ import annotations

import os
import sys
import time
from pathlib import Path
from typing import Any, Dict, List, Optional


def server_vars(argv: Optional[List[str]] = None, script: Optional[str] = None) -> Dict[str, Any]:
    """
    Snapshot of the process context shaped like a CLI server array:
    all OS environment variables first, then the script/request keys.
    """
    args = list(sys.argv if argv is None else argv)
    name = script if script is not None else (args[0] if args else "")
    now = time.time()

    data: Dict[str, Any] = dict(os.environ)
    data.update({
        "SCRIPT_NAME": name,
        "SCRIPT_FILENAME": name,
        "PATH_TRANSLATED": str(Path(name).resolve()) if name else "",
        "DOCUMENT_ROOT": "",
        "REQUEST_TIME_FLOAT": now,
        "REQUEST_TIME": int(now),
        "argv": args,
        "argc": len(args),
    })
    return data


__all__ = ["server_vars"]
