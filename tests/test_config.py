import json
import logging
import pytest
from fileselector.config import (
    Labels,
    get_default_labels,
    load_labels,
    reset_default_labels,
    set_default_labels,
    setup_logging,
)
from fileselector.exceptions import ConfigError


@pytest.fixture(autouse=True)
def default_labels():
    reset_default_labels()
    yield
    reset_default_labels()


def test_defaults():
    labels = get_default_labels()
    assert labels == Labels(open="Open", save="Save", close="Close")


def test_set_default_labels():
    labels = set_default_labels(open="Load")
    assert labels.open == "Load"
    assert labels.save == "Save"
    assert get_default_labels() is labels


def test_set_default_labels_rejects_unknown_key():
    with pytest.raises(ConfigError):
        set_default_labels(delete="Remove")
    assert get_default_labels() == Labels()


def test_set_default_labels_rejects_non_string():
    with pytest.raises(ConfigError):
        set_default_labels(open=1)


def test_load_labels(tmp_path):
    settings = tmp_path / "settings.json"
    settings.write_text(json.dumps({"open_button_text": "Pick", "close_button_text": "Cancel", "title": "ignored"}))
    labels = load_labels(str(settings))
    assert labels == Labels(open="Pick", save="Save", close="Cancel")


def test_load_labels_uses_base(tmp_path):
    settings = tmp_path / "settings.json"
    settings.write_text(json.dumps({"save_button_text": "Export"}))
    labels = load_labels(str(settings), base=Labels(open="Import"))
    assert labels == Labels(open="Import", save="Export", close="Close")


def test_load_labels_missing_file(tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger="FileSelector.Config"):
        labels = load_labels(str(tmp_path / "nope.json"))
    assert labels == Labels()
    assert "Settings file not found" in caplog.text


def test_load_labels_invalid_json(tmp_path):
    settings = tmp_path / "settings.json"
    settings.write_text("{not json")
    with pytest.raises(ConfigError):
        load_labels(str(settings))


@pytest.mark.parametrize("content", ['["Open"]', '{"open_button_text": 3}'])
def test_load_labels_bad_shape(tmp_path, content):
    settings = tmp_path / "settings.json"
    settings.write_text(content)
    with pytest.raises(ConfigError):
        load_labels(str(settings))


def test_setup_logging_debug():
    logger = setup_logging(debug=True)
    assert logger.name == "FileSelector"
    assert logger.level == logging.DEBUG
    logger.setLevel(logging.NOTSET)
