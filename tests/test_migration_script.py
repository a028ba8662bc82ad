"""
Tests for the data-migration CSV loader script.
"""

import importlib.util
from pathlib import Path

import pytest

SCRIPT_PATH = Path(__file__).resolve().parent.parent / "data-migration" / "script.py"


@pytest.fixture
def script():
    spec = importlib.util.spec_from_file_location("migration_script", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_default_folder_is_anchored_to_project_root(script):
    assert script.NORMALIZED_DIR.is_absolute()
    assert script.NORMALIZED_DIR == SCRIPT_PATH.parent / "normalized"


def test_imports_every_csv_in_folder(script, tmp_path, store):
    (tmp_path / "jan.csv").write_text("date,description,amount\n2024-01-05,Coffee,4.50\n", encoding="utf-8")
    (tmp_path / "feb.csv").write_text(
        "date,description,amount\n2024-02-01,Rent,800\n2024-02-02,Tea,2.00\n", encoding="utf-8"
    )

    assert script.import_folder(tmp_path) == 3
    assert store.count() == 3


def test_empty_folder_is_an_error(script, tmp_path):
    with pytest.raises(FileNotFoundError):
        script.import_folder(tmp_path)
