#!/usr/bin/env python3
"""
Markdown Filename Normalizer
Replaces whitespace in Markdown filenames with underscores.

"01. What is a closure.md" -> "01._What_is_a_closure.md"

Only regular *.md files directly inside the directory are renamed; other
files and subdirectories are left alone. A file that cannot be renamed is
reported and skipped.

Usage:
    python -m qdocs.utilities.md_renamer [DIRECTORY] [--dry-run]
"""

import argparse
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Set, Tuple

from qdocs.filenames import MARKDOWN_EXT, underscore_whitespace
from qdocs.icons import ERROR, SUCCESS


@dataclass
class RenameReport:
    """Outcome of one rename pass."""
    renamed: List[Tuple[str, str]] = field(default_factory=list)
    failed: List[Tuple[str, str]] = field(default_factory=list)  # (filename, reason)
    aborted: bool = False


class MarkdownRenamer:
    """Renames Markdown files in one directory."""

    def __init__(self, directory: Path, dry_run: bool = False):
        self.directory = Path(directory)
        self.dry_run = dry_run
        self.report = RenameReport()
        self.planned: Set[str] = set()  # dry-run targets claimed so far

    def record_change(self, old: str, new: str):
        """Record a rename for the summary report."""
        self.report.renamed.append((old, new))
        prefix = "Would rename" if self.dry_run else "Renamed"
        print(f"{prefix}: {old} -> {new}")

    def record_error(self, filename: str, error: str):
        """Record a per-file failure for the summary report."""
        self.report.failed.append((filename, error))
        print(f"{ERROR} Error renaming file {filename}: {error}", file=sys.stderr)

    def markdown_files(self) -> List[Path]:
        """Regular files with exactly the .md extension, sorted by name."""
        entries = sorted(os.listdir(self.directory))
        files = []
        for name in entries:
            path = self.directory / name
            if os.path.splitext(name)[1] != MARKDOWN_EXT:
                continue
            if not path.is_file():
                continue
            files.append(path)
        return files

    def rename_file(self, path: Path):
        old = path.name
        new = underscore_whitespace(old)
        if new == old:
            return

        target = path.with_name(new)
        if target.exists() or new in self.planned:
            self.record_error(old, f"target already exists: {new}")
            return

        if self.dry_run:
            self.planned.add(new)
            self.record_change(old, new)
            return

        try:
            path.rename(target)
        except OSError as e:
            self.record_error(old, str(e))
            return

        self.record_change(old, new)

    def run(self) -> RenameReport:
        try:
            files = self.markdown_files()
        except OSError as e:
            print(f"{ERROR} Error reading directory {self.directory}: {e}", file=sys.stderr)
            self.report.aborted = True
            return self.report

        for path in files:
            self.rename_file(path)

        self.print_summary()
        return self.report

    def print_summary(self):
        n = len(self.report.renamed)
        if n:
            verb = "Would rename" if self.dry_run else "Renamed"
            print(f"{SUCCESS} {verb} {n} file(s).")
        else:
            print("No files needed renaming.")
        if self.report.failed:
            print(f"{ERROR} {len(self.report.failed)} file(s) could not be renamed.")


def normalize_markdown_filenames(directory: Optional[Path] = None,
                                 dry_run: bool = False) -> RenameReport:
    """Rename every *.md file in directory (default: cwd), replacing whitespace runs with '_'."""
    directory = Path(directory) if directory is not None else Path.cwd()
    return MarkdownRenamer(directory, dry_run=dry_run).run()


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Replace whitespace in Markdown filenames with underscores"
    )
    parser.add_argument(
        "directory",
        nargs="?",
        type=Path,
        default=Path.cwd(),
        help="Directory holding the .md files (default: cwd)"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show renames without performing them"
    )
    args = parser.parse_args(argv)

    report = normalize_markdown_filenames(args.directory, dry_run=args.dry_run)
    return 1 if report.aborted else 0


if __name__ == "__main__":
    sys.exit(main())
