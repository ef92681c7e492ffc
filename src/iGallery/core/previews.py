"""Selection of the thumbnails shown in an album's preview grid."""

from __future__ import annotations

from itertools import chain, islice
from typing import Iterable, Sequence

from ..config import PREVIEW_COUNT
from ..models.types import PREVIEW_MISSING, Preview, is_placeholder


def pick_previews(
    files: Sequence[Preview],
    nested: Iterable[Sequence[Preview]],
    count: int = PREVIEW_COUNT,
) -> tuple[Preview, ...]:
    """Return exactly *count* previews for an album.

    The album's own *files* come first, followed by the previews already
    picked for its sub-albums (*nested*, in sub-album order). Placeholders
    coming from sub-albums are dropped so that the only placeholders in the
    result fill this album's own shortfall.
    """

    borrowed = (
        item for item in chain.from_iterable(nested) if not is_placeholder(item)
    )
    picks = list(islice(chain(files, borrowed), max(count, 0)))
    picks.extend(PREVIEW_MISSING for _ in range(count - len(picks)))
    return tuple(picks)


__all__ = ["pick_previews"]
