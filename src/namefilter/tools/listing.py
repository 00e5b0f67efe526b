"""
Directory lister for namefilter.

This module produces FileEntry records for the contents of one or more
directories, optionally recursing into subdirectories. It respects ignore
patterns and an entry limit, and logs and skips anything it cannot read.
"""

from pathlib import Path
from typing import Dict, List, Optional, Iterator
import logging

from ..models.records import FileEntry
from ..models.settings import ListingConfig


logger = logging.getLogger(__name__)


class DirectoryLister:
    """
    Lists directory contents as FileEntry records.

    Entries are emitted in a stable order: directories are walked top-down and
    the entries of each directory are sorted by name.
    """

    def __init__(self, config: Optional[ListingConfig] = None):
        """
        Initialize the directory lister.

        Args:
            config: Listing configuration (roots, recursion, ignore patterns, limits)
        """
        self.config = config or ListingConfig()
        self._stats = self._empty_stats()

    @staticmethod
    def _empty_stats() -> Dict[str, int]:
        return {
            'entries_listed': 0,
            'directories_traversed': 0,
            'entries_ignored': 0,
            'errors': 0
        }

    def list_entries(self, roots: Optional[List[str]] = None) -> Iterator[FileEntry]:
        """
        List the contents of root directories.

        Args:
            roots: Directories to list; defaults to the configured roots

        Yields:
            FileEntry objects for each listed file or directory
        """
        for root in roots or self.config.roots:
            if self._stats['entries_listed'] >= self.config.max_entries:
                return

            try:
                root_path = Path(root).expanduser().resolve()
            except OSError as e:
                logger.error(f"Error resolving root {root}: {e}")
                self._stats['errors'] += 1
                continue

            try:
                exists = root_path.exists()
                is_dir = exists and root_path.is_dir()
            except OSError as e:
                logger.warning(f"Cannot access root {root_path}: {e}")
                self._stats['errors'] += 1
                continue

            if not exists:
                logger.warning(f"Root directory does not exist: {root_path}")
                continue

            if not is_dir:
                logger.warning(f"Root path is not a directory: {root_path}")
                continue

            logger.info(f"Listing directory: {root_path}")
            yield from self._list_directory(root_path)

    def _list_directory(self, root_path: Path) -> Iterator[FileEntry]:
        """
        List a single root, recursing when configured.

        Args:
            root_path: Resolved root directory

        Yields:
            FileEntry objects for the root's contents
        """
        pending = [root_path]

        while pending:
            current_path = pending.pop(0)
            self._stats['directories_traversed'] += 1

            try:
                children = sorted(current_path.iterdir(), key=lambda p: p.name)
            except OSError as e:
                logger.warning(f"Cannot read directory {current_path}: {e}")
                self._stats['errors'] += 1
                continue

            subdirs = []
            for child in children:
                try:
                    is_dir = child.is_dir()
                    descend = is_dir and self.config.recurse and not child.is_symlink()
                except OSError as e:
                    logger.warning(f"Cannot access {child}: {e}")
                    self._stats['errors'] += 1
                    continue

                relative = child.relative_to(root_path).as_posix()

                if self.config.should_ignore(relative, is_dir=is_dir):
                    self._stats['entries_ignored'] += 1
                    continue

                if descend:
                    subdirs.append(child)

                if is_dir and not self.config.include_directories:
                    continue

                entry = self._create_entry(child)
                if entry is None:
                    continue

                self._stats['entries_listed'] += 1
                yield entry

                if self._stats['entries_listed'] >= self.config.max_entries:
                    logger.warning(f"Reached maximum entry limit: {self.config.max_entries}")
                    return

            # Keep the walk top-down: this directory's subdirectories come next
            pending[0:0] = subdirs

    def _create_entry(self, path: Path) -> Optional[FileEntry]:
        """
        Create a FileEntry for a path.

        Args:
            path: Path to describe

        Returns:
            FileEntry or None if the path cannot be read
        """
        try:
            return FileEntry.from_path(path)
        except OSError as e:
            logger.warning(f"Error reading entry {path}: {e}")
            self._stats['errors'] += 1
            return None

    def get_stats(self) -> Dict[str, int]:
        """
        Get statistics about the listing operation.

        Returns:
            Dictionary containing operation statistics
        """
        return self._stats.copy()

    def reset_stats(self) -> None:
        """Reset the statistics counters."""
        self._stats = self._empty_stats()


def list_directory(path: str, recurse: bool = False) -> List[FileEntry]:
    """
    Convenience function to list one directory with default settings.

    Args:
        path: Directory to list
        recurse: Whether to descend into subdirectories

    Returns:
        List of FileEntry objects
    """
    lister = DirectoryLister(ListingConfig(roots=[path], recurse=recurse))
    return list(lister.list_entries())
