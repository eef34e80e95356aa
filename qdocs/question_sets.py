#!/usr/bin/env python3
"""
question_sets.py - Load question sets from disk.

A question set is an ordered list of questions plus the number the first
question gets. Two file formats are accepted.

YAML (*.yaml, *.yml):

    title: Basic Closure Questions
    directory: docs/closure/Basic Closure Questions
    offset: 1
    questions:
      - What is a closure in JavaScript?
      - How do closures work in JavaScript?

Markdown with frontmatter (*.md), one question per list item:

    ---
    title: Basic Closure Questions
    offset: 1
    ---

    - What is a closure in JavaScript?
    - How do closures work in JavaScript?
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import frontmatter
import yaml

from qdocs.errors import QuestionSetError


YAML_EXTENSIONS = {".yaml", ".yml"}
MARKDOWN_EXTENSIONS = {".md"}
QUESTION_SET_EXTENSIONS = YAML_EXTENSIONS | MARKDOWN_EXTENSIONS

# "- text", "* text", "+ text", "1. text", "1) text"
LIST_ITEM_RE = re.compile(r"^\s*(?:[-*+]|\d+[.)])\s+(.+?)\s*$")


@dataclass
class QuestionSet:
    """An ordered list of questions and its numbering offset."""
    title: str
    questions: List[str] = field(default_factory=list)
    offset: int = 1
    directory: Optional[str] = None
    source: Optional[Path] = None


def load_question_set(path: Path) -> QuestionSet:
    """
    Load a question set file.

    Raises:
        QuestionSetError: If the file is unreadable or its contents invalid
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix not in QUESTION_SET_EXTENSIONS:
        raise QuestionSetError(path, f"unsupported file type '{path.suffix}'")
    if not path.is_file():
        raise QuestionSetError(path, "file not found")

    if suffix in YAML_EXTENSIONS:
        meta, questions = _read_yaml(path)
    else:
        meta, questions = _read_markdown(path)

    return _build_question_set(path, meta, questions)


def find_question_sets(directory: Path) -> List[Path]:
    """Question set files directly inside a directory, sorted by name."""
    directory = Path(directory)
    if not directory.is_dir():
        return []
    return sorted(
        p for p in directory.iterdir()
        if p.is_file() and p.suffix.lower() in QUESTION_SET_EXTENSIONS
    )


def load_question_sets(directory: Path) -> List[QuestionSet]:
    """Load every question set in a directory."""
    return [load_question_set(p) for p in find_question_sets(directory)]


def _read_yaml(path: Path) -> Tuple[Dict[str, Any], Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise QuestionSetError(path, f"invalid YAML: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise QuestionSetError(path, f"could not read file: {e}") from e

    if not isinstance(data, dict):
        raise QuestionSetError(path, "expected a mapping with a 'questions' list")

    questions = data.pop("questions", None)
    return data, questions


def _read_markdown(path: Path) -> Tuple[Dict[str, Any], Any]:
    try:
        post = frontmatter.load(path)
    except yaml.YAMLError as e:
        raise QuestionSetError(path, f"invalid frontmatter: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise QuestionSetError(path, f"could not read file: {e}") from e

    questions = []
    for line in post.content.splitlines():
        m = LIST_ITEM_RE.match(line)
        if m:
            questions.append(m.group(1))

    return dict(post.metadata), questions


def _build_question_set(path: Path, meta: Dict[str, Any], questions: Any) -> QuestionSet:
    if not questions:
        raise QuestionSetError(path, "no questions found")
    if not isinstance(questions, list):
        raise QuestionSetError(path, "'questions' must be a list")

    for i, question in enumerate(questions, start=1):
        if not isinstance(question, str) or not question.strip():
            raise QuestionSetError(path, f"question {i} must be non-empty text")

    offset = meta.get("offset", 1)
    if isinstance(offset, bool) or not isinstance(offset, int):
        raise QuestionSetError(path, f"'offset' must be an integer, got {offset!r}")
    if offset < 0:
        raise QuestionSetError(path, f"'offset' cannot be negative, got {offset}")

    directory = meta.get("directory")
    if directory is not None and not isinstance(directory, str):
        raise QuestionSetError(path, "'directory' must be a string")

    title = meta.get("title") or path.stem

    return QuestionSet(
        title=str(title),
        questions=list(questions),
        offset=offset,
        directory=directory,
        source=path,
    )
