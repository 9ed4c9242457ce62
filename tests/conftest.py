import json

import pytest


SAMPLE_DATASET = {
    "1": ["Rose", "Nine"],
    "2": ["Rose", "Ten", "Martha"],
}


def write_dataset(directory, language, data):
    path = directory / f"{language}-episodes.json"
    if isinstance(data, bytes):
        path.write_bytes(data)
    elif isinstance(data, str):
        path.write_text(data, encoding="utf-8")
    else:
        path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def data_dir(tmp_path):
    """A data directory holding the sample dataset under the 'en' tag."""
    write_dataset(tmp_path, "en", SAMPLE_DATASET)
    return tmp_path
