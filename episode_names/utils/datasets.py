"""Episode dataset access utilities."""

import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from ..constants.paths import DATA_DIR, EPISODES_FILENAME_PATTERN, EPISODES_FILENAME_SUFFIX
from ..errors import DatasetSchemaError, LanguageUnavailableError
from ..models.dataset import EpisodeDataset

logger = logging.getLogger(__name__)


def get_dataset_path(language: str, data_dir: Optional[Path] = None) -> Path:
    """
    Resolve the dataset file for a language tag.
    
    Args:
        language: The language tag (e.g., "pt-br")
        data_dir: Directory holding the dataset files (defaults to the bundled data)
        
    Returns:
        Path to the `<language>-episodes.json` file
        
    Raises:
        LanguageUnavailableError: If no file exists for the language
    """
    data_dir = Path(data_dir) if data_dir is not None else DATA_DIR
    dataset_path = data_dir / EPISODES_FILENAME_PATTERN.format(language=language)
    
    if not dataset_path.is_file():
        raise LanguageUnavailableError(language, dataset_path)
    
    return dataset_path


def load_dataset(dataset_path: Path) -> EpisodeDataset:
    """
    Load and validate an episodes dataset file.
    
    Raises:
        DatasetSchemaError: If the file is not JSON mapping identifiers to lists of names
    """
    logger.debug("Loading episodes dataset from %s", dataset_path)
    
    with open(dataset_path, "rb") as f:
        raw = f.read()
    
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DatasetSchemaError(dataset_path, f"not valid UTF-8 ({e.reason} at byte {e.start})") from e
    
    try:
        dataset = EpisodeDataset.model_validate_json(text)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"]) or "<root>"
        raise DatasetSchemaError(dataset_path, f"{location}: {first['msg']}") from e
    
    logger.debug("Loaded %d episodes from %s", len(dataset), dataset_path)
    return dataset


def load_language_dataset(language: str, data_dir: Optional[Path] = None) -> EpisodeDataset:
    """Resolve and load the dataset for a language tag."""
    return load_dataset(get_dataset_path(language, data_dir))


def get_available_languages(data_dir: Optional[Path] = None) -> list[str]:
    """
    Get all language tags that have a dataset file.
    
    Returns:
        Sorted list of language tags found in the data directory
    """
    data_dir = Path(data_dir) if data_dir is not None else DATA_DIR
    
    if not data_dir.exists():
        return []
    
    return sorted(
        p.name[: -len(EPISODES_FILENAME_SUFFIX)]
        for p in data_dir.iterdir()
        if p.is_file() and p.name.endswith(EPISODES_FILENAME_SUFFIX)
    )
