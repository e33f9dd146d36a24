#!/usr/bin/env python3
"""
Basic loading example for lazydirtree.

This example demonstrates:
- Loading a volume lazily from a (fake) directory store
- Limiting the load by depth and entry count
- Reading the loaded tree back in DFS, BFS and level order
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from lazydirtree.sync import Dir, LoadLimitError, dfs_load
from lazydirtree.testing import build_sample_store


def print_entries(title, entries):
    print(f"--------{title}---------")
    for entry in entries:
        print(entry)


def main():
    """Load the sample volume and print it in every supported order."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    store = build_sample_store()

    # A depth limit that is too tight stops the load
    root = Dir.virtual(volume_id=1)
    try:
        dfs_load(root, max_depth=2, retrieve=store.retrieve)
    except LoadLimitError as e:
        print(f"Partial load stopped: {e}")

    # Start over with the default limits
    root = Dir.virtual(volume_id=1)
    total_size, total_count = dfs_load(root, retrieve=store.retrieve)
    print(f"Loaded {total_count} entries, {total_size} bytes\n")

    print_entries("All pure files", root.all_pure_files())
    print_entries("All folders", root.all_folders())
    print_entries("All folders and files (DFS)", root.all_folders_and_files())
    print_entries("All folders and files (BFS)", root.all_folders_and_files_bfs())

    for level, entries in enumerate(root.all_folders_and_files_by_level()):
        print_entries(f"level:{level}", entries)

    print("+++++++++ Post-order walk ++++++++")

    def print_dir(ctx, dir):
        print(f"----dir name={dir.name},depth={dir.depth},size={dir.size},"
              f"count={dir.count},loaded={dir.loaded}")

    root.dfs_postorder(print_dir)


if __name__ == "__main__":
    main()
