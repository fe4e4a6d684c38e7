import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from littlesearch import app

runner = CliRunner()


@pytest.fixture
def collection(tmp_path: Path) -> Path:
    corpus = tmp_path / "corpus"
    corpus.mkdir()
    (corpus / "d1.txt").write_text("The cat sat. The cat ran; cat!")
    (corpus / "d2.txt").write_text("A dog, a cat and a dog.")
    (corpus / "d3.txt").write_text("dog dog dog")
    (tmp_path / "docs.txt").write_text("d1.txt\nd2.txt\nd3.txt\n")
    (tmp_path / "noise.txt").write_text("the\na\nand\n")

    path = tmp_path / "collection.json"
    path.write_text(
        json.dumps(
            {
                "name": "pets",
                "docs_file": "docs.txt",
                "noise_words_file": "noise.txt",
                "documents_dir": "corpus",
            }
        )
    )
    return path


def test_validate_passes(collection: Path) -> None:
    result = runner.invoke(app, ["validate", str(collection)])
    assert result.exit_code == 0
    assert "Validation passed" in result.output


def test_validate_fails(tmp_path: Path) -> None:
    path = tmp_path / "collection.json"
    path.write_text(json.dumps({"name": "broken"}))
    result = runner.invoke(app, ["validate", str(path)])
    assert result.exit_code == 1
    assert "Validation failed" in result.output


def test_index_summary(collection: Path) -> None:
    result = runner.invoke(app, ["index", str(collection)])
    assert result.exit_code == 0
    assert "Documents" in result.output
    assert "Keywords" in result.output


def test_search_ranks_documents(collection: Path) -> None:
    result = runner.invoke(app, ["search", str(collection), "cat", "DOG"])
    assert result.exit_code == 0
    out = result.output
    assert out.index("d1.txt") < out.index("d3.txt") < out.index("d2.txt")
    assert "3 results returned" in out


def test_search_no_match(collection: Path) -> None:
    result = runner.invoke(app, ["search", str(collection), "fish", "bird"])
    assert result.exit_code == 0
    assert "No matching documents." in result.output


def test_lookup(collection: Path) -> None:
    result = runner.invoke(app, ["lookup", str(collection), "dog"])
    assert result.exit_code == 0
    assert result.output.index("d3.txt") < result.output.index("d2.txt")


def test_missing_document_exits_with_error(collection: Path) -> None:
    (collection.parent / "corpus" / "d2.txt").unlink()
    result = runner.invoke(app, ["search", str(collection), "cat", "dog"])
    assert result.exit_code == 1
    assert "Document not found" in result.output


def test_lookup_json(collection: Path) -> None:
    result = runner.invoke(app, ["lookup", str(collection), "Dog", "--json"])
    assert result.exit_code == 0
    assert json.loads(result.output) == [
        {"document": "d3.txt", "frequency": 3},
        {"document": "d2.txt", "frequency": 2},
    ]


def test_collection_path_is_directory(tmp_path: Path) -> None:
    result = runner.invoke(app, ["search", str(tmp_path), "cat", "dog"])
    assert result.exit_code == 1
    assert "Cannot read collection file" in result.output
