"""Tests for configuration models and loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from graphdiff.config import SymmetricDifferenceConfig
from graphdiff.graph import CloneContext
from graphdiff.runtime.config_loader import load_symdiff_config


def test_defaults_are_strict_and_share_references() -> None:
    config = load_symdiff_config(None)

    assert config.enforce_identical_node_sets is True
    assert config.clone_strategy == "reference"
    assert SymmetricDifferenceConfig.permissive().enforce_identical_node_sets is False


def test_load_from_toml_file_with_section(tmp_path: Path) -> None:
    path = tmp_path / "graphdiff.toml"
    path.write_text(
        "[symmetric_difference]\n"
        "enforce_identical_node_sets = false\n"
        'clone_strategy = "deepcopy"\n',
        encoding="utf-8",
    )

    config = load_symdiff_config(path)

    assert config.enforce_identical_node_sets is False
    assert config.clone_strategy == "deepcopy"


def test_load_from_inline_json_and_dict() -> None:
    inline = load_symdiff_config('{"clone_strategy": "copy"}')
    mapping = load_symdiff_config({"enforce_identical_node_sets": False})

    assert inline.clone_strategy == "copy"
    assert mapping.enforce_identical_node_sets is False
    assert mapping.to_dict()["clone_strategy"] == "reference"


def test_invalid_values_are_rejected() -> None:
    with pytest.raises(ValidationError):
        load_symdiff_config({"clone_strategy": "pickle"})
    with pytest.raises(ValueError):
        load_symdiff_config("[1, 2]")
    with pytest.raises(TypeError):
        load_symdiff_config(42)  # type: ignore[arg-type]


def test_clone_context_rejects_unknown_strategy() -> None:
    with pytest.raises(ValueError):
        CloneContext("pickle")
    assert CloneContext("copy").name == "copy"


def test_json_file_and_inline_toml_are_accepted(tmp_path: Path) -> None:
    path = tmp_path / "graphdiff.json"
    path.write_text('{"symmetric_difference": {"clone_strategy": "copy"}}', encoding="utf-8")

    from_file = load_symdiff_config(str(path))
    inline = load_symdiff_config("enforce_identical_node_sets = false")

    assert from_file.clone_strategy == "copy"
    assert inline.enforce_identical_node_sets is False
