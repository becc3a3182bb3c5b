"""File discovery and concurrent per-file outline extraction."""

import asyncio
import glob
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import pathspec

from ..config import DEFAULT_CONCURRENCY
from ..parser import OutlineNode, parse_file

logger = logging.getLogger(__name__)


# Ignore patterns applied to every glob (gitwildmatch syntax)
DEFAULT_IGNORE = ["**/node_modules/**", "**/dist/**", "**/build/**"]

_BRACE_RE = re.compile(r"\{([^{}]*)\}")


class FileProcessorError(Exception):
    """Raised when file discovery or processing cannot continue."""


@dataclass
class ProcessedFile:
    """Outline result for one file; outline is None when parsing failed."""
    file: str
    outline: Optional[OutlineNode]
    error: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "file": self.file,
            "outline": self.outline.to_dict() if self.outline else None,
        }


def expand_braces(pattern: str) -> list[str]:
    """Expand `{a,b}` alternatives in a glob pattern.

    Example: src/*.{js,ts} -> [src/*.js, src/*.ts]
    """
    match = _BRACE_RE.search(pattern)
    if not match:
        return [pattern]

    head, tail = pattern[:match.start()], pattern[match.end():]
    expanded = []
    for option in match.group(1).split(","):
        expanded.extend(expand_braces(head + option + tail))
    return expanded


class FileProcessor:
    """Finds files by glob pattern and builds their outlines concurrently."""

    def __init__(
        self,
        ignore: Optional[list[str]] = None,
        concurrency: int = DEFAULT_CONCURRENCY,
    ):
        self.ignore = DEFAULT_IGNORE if ignore is None else ignore
        self.ignore_spec = pathspec.PathSpec.from_lines("gitwildmatch", self.ignore)
        self.concurrency = concurrency

    def should_skip_file(self, path: Path) -> bool:
        """Check if a file matches an ignore pattern."""
        try:
            rel_path = path.relative_to(Path.cwd().resolve()).as_posix()
        except ValueError:
            rel_path = path.as_posix().lstrip("/")
        return self.ignore_spec.match_file(rel_path)

    def find_files(self, pattern: str) -> list[str]:
        """Find files matching a glob pattern.

        Args:
            pattern: Glob pattern; supports ** and {a,b}

        Returns:
            Sorted absolute file paths

        Raises:
            FileProcessorError: if nothing matches
        """
        found = set()
        for expanded in expand_braces(pattern):
            for match in glob.glob(expanded, recursive=True):
                path = Path(match).resolve()
                if not path.is_file():
                    continue
                if self.should_skip_file(path):
                    continue
                found.add(str(path))

        if not found:
            raise FileProcessorError(f"No files found matching pattern: {pattern}")

        logger.debug("Pattern %s matched %d files", pattern, len(found))
        return sorted(found)

    async def process_files(
        self,
        files: list[str],
        max_depth: Optional[int] = None,
        named_only: bool = True,
    ) -> list[ProcessedFile]:
        """Build outlines for files concurrently, preserving input order.

        A failure in one file is logged and reported on its ProcessedFile;
        the rest of the batch continues.
        """
        semaphore = asyncio.Semaphore(self.concurrency)

        async def process_with_limit(file: str) -> ProcessedFile:
            resolved = str(Path(file).resolve())
            async with semaphore:
                try:
                    outline = await asyncio.to_thread(parse_file, file, max_depth, named_only)
                except Exception as e:
                    logger.error("Error parsing %s: %s", resolved, e)
                    return ProcessedFile(file=resolved, outline=None, error=str(e))
            return ProcessedFile(file=resolved, outline=outline)

        return list(await asyncio.gather(*(process_with_limit(f) for f in files)))
