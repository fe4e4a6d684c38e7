"""Collection config validation: syntactic, then semantic.

Syntactic = required fields and types.
Semantic  = the referenced files and directory exist on disk.

Relative paths in a collection resolve against the collection file's
directory, which is also the default ``documents_dir``.
"""

from __future__ import annotations

import json
from pathlib import Path

REQUIRED_FIELDS = ("name", "docs_file", "noise_words_file")


# ── Loading ─────────────────────────────────────────────────────────


def load_collection(collection_path: str | Path) -> dict:
    """Read a collection JSON and resolve its paths to absolute ones."""
    path = Path(collection_path)
    config = json.loads(path.read_text(encoding="utf-8"))
    base = path.resolve().parent

    resolved = dict(config)
    for key in ("docs_file", "noise_words_file"):
        resolved[key] = str(base / config[key])
    resolved["documents_dir"] = str(base / config.get("documents_dir", "."))
    return resolved


# ── Syntactic Validation ────────────────────────────────────────────


def validate_collection(config: dict) -> list[str]:
    """Check required fields and types.  Returns list of error strings."""
    if not isinstance(config, dict):
        return ["Collection must be a JSON object."]

    errors: list[str] = []
    for key in REQUIRED_FIELDS:
        value = config.get(key)
        if not isinstance(value, str) or not value:
            errors.append(f"'{key}' is required and must be a non-empty string.")

    documents_dir = config.get("documents_dir")
    if documents_dir is not None and (not isinstance(documents_dir, str) or not documents_dir):
        errors.append("'documents_dir' must be a non-empty string if provided.")

    return errors


# ── Semantic Validation ─────────────────────────────────────────────


def validate_paths(config: dict) -> list[str]:
    """Check that a resolved collection points at existing files."""
    errors: list[str] = []
    if not Path(config["docs_file"]).is_file():
        errors.append(f"Document list not found: {config['docs_file']}")
    if not Path(config["noise_words_file"]).is_file():
        errors.append(f"Noise word list not found: {config['noise_words_file']}")
    if not Path(config["documents_dir"]).is_dir():
        errors.append(f"Documents directory not found: {config['documents_dir']}")
    return errors


# ── Top-level validate ──────────────────────────────────────────────


def validate_collection_file(collection_path: str | Path) -> tuple[bool, list[str]]:
    """Run syntactic + semantic validation on a collection file.

    Returns (passed, errors).
    """
    path = Path(collection_path)
    try:
        config = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        return False, [f"Invalid JSON: {e}"]
    except FileNotFoundError:
        return False, [f"Collection file not found: {collection_path}"]
    except (OSError, UnicodeDecodeError) as e:
        return False, [f"Cannot read collection file: {collection_path} ({e})"]

    syn_errors = validate_collection(config)
    if syn_errors:
        return False, syn_errors

    sem_errors = validate_paths(load_collection(path))
    if sem_errors:
        return False, sem_errors

    return True, []
