import io
from pathlib import Path

import pytest

from smoke.buffer import Output
from tests.infrastructure import write


@pytest.fixture
def sink() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def out(sink: io.StringIO) -> Output:
    return Output(sink)


@pytest.fixture
def script_dir(tmp_path: Path) -> Path:
    """Directory with a bootstrap that leaves a marker file next to itself."""
    d = tmp_path / "scripts"
    write(
        d / "web-bootstrap.py",
        "from pathlib import Path\n"
        "Path(__file__).with_name('bootstrapped.txt').write_text('yes', encoding='utf-8')\n"
        "BOOTSTRAPPED = True\n",
    )
    return d
