import pytest

from episode_names.constants.paths import DATA_DIR
from episode_names.errors import DatasetSchemaError, EpisodeNamesError, LanguageUnavailableError
from episode_names.utils.datasets import (
    get_available_languages,
    get_dataset_path,
    load_dataset,
    load_language_dataset,
)

from conftest import SAMPLE_DATASET, write_dataset


def test_dataset_path_follows_language_pattern(data_dir):
    assert get_dataset_path("en", data_dir) == data_dir / "en-episodes.json"


def test_missing_language_raises(data_dir):
    with pytest.raises(LanguageUnavailableError) as excinfo:
        get_dataset_path("xx", data_dir)

    assert excinfo.value.language == "xx"
    assert '"xx"' in str(excinfo.value)
    assert isinstance(excinfo.value, LookupError)


def test_load_keeps_file_key_order(tmp_path):
    path = write_dataset(tmp_path, "en", '{"10": ["A"], "2": ["B"], "1": ["C"]}')
    dataset = load_dataset(path)

    assert list(dataset) == ["10", "2", "1"]
    assert dataset.names_for("2") == ["B"]


def test_load_language_dataset(data_dir):
    dataset = load_language_dataset("en", data_dir)

    assert len(dataset) == 2
    assert dataset.root == SAMPLE_DATASET


@pytest.mark.parametrize(
    "content",
    [
        "not json at all",
        '["Rose", "Nine"]',
        '{"1": "Rose"}',
        '{"1": ["Rose", 9]}',
        '{"1": [["Rose"]]}',
        b'{"1": ["Ros\xff"]}',
    ],
)
def test_schema_violations_raise_dataset_schema_error(tmp_path, content):
    path = write_dataset(tmp_path, "en", content)

    with pytest.raises(DatasetSchemaError) as excinfo:
        load_dataset(path)

    assert excinfo.value.path == path
    assert isinstance(excinfo.value, EpisodeNamesError)


def test_available_languages(tmp_path):
    write_dataset(tmp_path, "en", SAMPLE_DATASET)
    write_dataset(tmp_path, "pt-br", SAMPLE_DATASET)
    (tmp_path / "notes.txt").write_text("ignored", encoding="utf-8")

    assert get_available_languages(tmp_path) == ["en", "pt-br"]


def test_available_languages_missing_dir(tmp_path):
    assert get_available_languages(tmp_path / "nope") == []


def test_bundled_datasets_are_valid():
    languages = get_available_languages()

    assert "pt-br" in languages
    assert "en" in languages
    for language in languages:
        dataset = load_language_dataset(language, DATA_DIR)
        assert len(dataset) > 0
