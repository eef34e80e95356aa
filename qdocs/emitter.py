#!/usr/bin/env python3
"""
emitter.py (qdocs)

Write one numbered Markdown stub per question.

For each question in a set this writes "NN. <question>.md" containing
"# <question>" followed by a blank line. Characters that are illegal in
filenames are dropped from the name but kept in the heading.

A failed write is reported and the batch moves on to the next question;
no question depends on another.

Usage (standalone):
    python -m qdocs.emitter                         # every set in question_sets/
    python -m qdocs.emitter question_sets/closure-basic.yaml
    python -m qdocs.emitter question_sets/closure-basic.yaml -o ./out --dry-run

Usage (from Python):
    from qdocs.emitter import emit_question_files
    emit_question_files(["Alpha", "Beta"], offset=1, output_dir=Path("out"))
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from qdocs.config_utils import ConfigurationError, get_question_sets_dir
from qdocs.errors import QDocsError
from qdocs.filenames import build_question_filename, render_question_stub
from qdocs.icons import ERROR, FOLDER, WARNING, fence
from qdocs.question_sets import QuestionSet, find_question_sets, load_question_set


@dataclass
class EmitReport:
    """Outcome of one emitter batch."""
    created: List[Path] = field(default_factory=list)
    failed: List[Tuple[str, str]] = field(default_factory=list)  # (filename, reason)

    @property
    def ok(self) -> bool:
        return not self.failed

    def merge(self, other: "EmitReport") -> None:
        self.created.extend(other.created)
        self.failed.extend(other.failed)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def emit_question_files(
    questions: Iterable[str],
    offset: int = 1,
    output_dir: Optional[Path] = None,
    dry_run: bool = False,
) -> EmitReport:
    """
    Write a Markdown stub for each question, numbered from offset.

    Args:
        questions: Question texts, in order
        offset: Number given to the first question
        output_dir: Target directory (default: cwd); created if missing
        dry_run: Print what would be written without touching the disk

    Returns:
        EmitReport listing created paths and per-file failures
    """
    output_dir = Path(output_dir) if output_dir is not None else Path.cwd()
    report = EmitReport()

    if not dry_run:
        output_dir.mkdir(parents=True, exist_ok=True)

    for index, question in enumerate(questions):
        filename = build_question_filename(index, question, offset)
        target = output_dir / filename

        if dry_run:
            print(f"Would create: {filename}")
            report.created.append(target)
            continue

        try:
            _write_stub(target, question)
        except (OSError, ValueError) as e:
            report.failed.append((filename, str(e)))
            print(f"{ERROR} Failed to create {filename}: {e}", file=sys.stderr)
            continue

        report.created.append(target)
        print(f"Created: {filename}")

    _print_summary(report, dry_run)
    return report


def emit_question_set(
    question_set: QuestionSet,
    root: Optional[Path] = None,
    output_dir: Optional[Path] = None,
    dry_run: bool = False,
) -> EmitReport:
    """
    Emit a loaded question set.

    The output directory is output_dir when given, else the set's own
    directory (relative to root), else the current directory.
    """
    target_dir = resolve_output_dir(question_set, root, output_dir)
    return emit_question_files(
        question_set.questions,
        offset=question_set.offset,
        output_dir=target_dir,
        dry_run=dry_run,
    )


def resolve_output_dir(
    question_set: QuestionSet,
    root: Optional[Path] = None,
    output_dir: Optional[Path] = None,
) -> Path:
    if output_dir is not None:
        return Path(output_dir)
    root = Path(root) if root is not None else Path.cwd()
    if question_set.directory:
        return root / question_set.directory
    return root


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------


def _write_stub(target: Path, question: str) -> None:
    # newline="\n" keeps the stub byte-identical across platforms
    with open(target, "w", encoding="utf-8", newline="\n") as f:
        f.write(render_question_stub(question))


def _print_summary(report: EmitReport, dry_run: bool) -> None:
    if dry_run:
        print(f"Dry run: {len(report.created)} file(s) would be created.")
    elif report.ok:
        print("All files created successfully.")
    else:
        print(f"Created {len(report.created)} file(s); {len(report.failed)} failed.")


def _collect_set_paths(args: argparse.Namespace, root: Path) -> List[Path]:
    if args.sets:
        return [p if p.is_absolute() else root / p for p in args.sets]

    sets_dir = get_question_sets_dir(root)
    paths = find_question_sets(sets_dir)
    if not paths:
        print(f"{WARNING} No question sets found in {sets_dir}")
    return paths


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Create numbered Markdown files from question sets",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Emit every set in the configured question_sets directory
  python -m qdocs.emitter

  # Emit one set into its own directory
  python -m qdocs.emitter question_sets/closure-basic.yaml

  # Emit into a scratch directory without writing anything
  python -m qdocs.emitter question_sets/map.yaml -o ./scratch --dry-run
        """
    )
    parser.add_argument(
        "sets",
        nargs="*",
        type=Path,
        help="Question set files (.yaml, .yml or .md)"
    )
    parser.add_argument(
        "--all",
        action="store_true",
        help="Emit every set in the question set directory (default when no sets given)"
    )
    parser.add_argument(
        "-o", "--output-dir",
        type=Path,
        default=None,
        help="Write files here instead of each set's directory"
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=Path.cwd(),
        help="Project root holding qdocs.yaml (default: cwd)"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be created without writing files"
    )
    args = parser.parse_args(argv)
    if args.sets and args.all:
        parser.error("pass question set files or --all, not both")

    try:
        set_paths = _collect_set_paths(args, args.root)
        question_sets = [load_question_set(p) for p in set_paths]
    except ConfigurationError as e:
        print(f"{ERROR} Configuration error: {e}", file=sys.stderr)
        return 1
    except QDocsError as e:
        print(f"{ERROR} {e}", file=sys.stderr)
        return 1

    total = EmitReport()
    unprepared = 0
    for question_set in question_sets:
        if len(question_sets) > 1:
            fence(f"{FOLDER} {question_set.title}")
        try:
            report = emit_question_set(
                question_set,
                root=args.root,
                output_dir=args.output_dir,
                dry_run=args.dry_run,
            )
        except OSError as e:
            print(f"{ERROR} Could not prepare output for '{question_set.title}': {e}",
                  file=sys.stderr)
            unprepared += 1
            continue
        total.merge(report)

    return 0 if total.ok and not unprepared else 1


if __name__ == "__main__":
    sys.exit(main())
