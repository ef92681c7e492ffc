import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Ensure the project sources are importable without installing the package.
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from iGallery.library.tree import AlbumFactory  # noqa: E402


@pytest.fixture()
def factory() -> AlbumFactory:
    return AlbumFactory()
