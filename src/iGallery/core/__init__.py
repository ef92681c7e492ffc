"""Per-album computations applied while finalizing the tree."""
