"""Get file outline - structural outline of one file or a glob of files."""

from pathlib import Path
from typing import Optional, Union

from ..config import OutlineConfig, validate_depth_value
from ..formatter import Formatter, validate_format
from ..parser import UnsupportedLanguageError, parse_file
from .file_processor import FileProcessor, ProcessedFile


def get_file_outline(
    path: str,
    depth: Optional[Union[int, str]] = None,
    named_only: bool = True,
    fmt: str = "json",
) -> dict:
    """Get the outline of a single source file.

    Args:
        path: Path to the file (supports ~ for home directory)
        depth: Maximum outline depth, or None/"Infinity" for unbounded
        named_only: Keep only named constructs and their ancestors
        fmt: Output format (json, yaml, ascii, llmtext)

    Returns:
        Dict with the file path and formatted outline, or an error
    """
    file_path = Path(path).expanduser().resolve()

    if not file_path.is_file():
        return {"error": f"File not found: {path}"}

    max_depth = validate_depth_value(depth)
    output_format = validate_format(fmt)

    try:
        outline = parse_file(file_path, max_depth=max_depth, named_only=named_only)
    except UnsupportedLanguageError as e:
        return {"file": str(file_path), "error": str(e)}

    results = [ProcessedFile(file=str(file_path), outline=outline)]

    return {
        "file": str(file_path),
        "format": output_format.value,
        "outline": Formatter(output_format).format(results),
    }


async def outline_files(
    pattern: str,
    depth: Optional[Union[int, str]] = None,
    named_only: bool = True,
    fmt: str = "json",
) -> dict:
    """Get outlines for every file matching a glob pattern.

    Returns:
        Dict with file counts, per-file errors and the formatted output
    """
    max_depth = validate_depth_value(depth)
    output_format = validate_format(fmt)

    processor = FileProcessor(concurrency=OutlineConfig.from_env().concurrency)
    files = processor.find_files(pattern)
    results: list[ProcessedFile] = await processor.process_files(files, max_depth, named_only)

    result = {
        "pattern": pattern,
        "file_count": len(results),
        "format": output_format.value,
        "output": Formatter(output_format).format(results),
    }

    errors = {r.file: r.error for r in results if r.outline is None}
    if errors:
        result["errors"] = errors

    return result
