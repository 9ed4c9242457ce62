"""Errors raised while selecting and sampling episode names."""

from pathlib import Path
from typing import Any


class EpisodeNamesError(Exception):
    """Base class for every error raised by this package."""


class LanguageUnavailableError(EpisodeNamesError, LookupError):
    """No dataset file exists for the requested language tag."""

    def __init__(self, language: str, path: Path | None = None):
        self.language = language
        self.path = path
        super().__init__(
            f'Language "{language}" is not available. You can contribute to add it.'
        )


class DatasetSchemaError(EpisodeNamesError, ValueError):
    """A dataset file is not valid JSON or does not map identifiers to lists of names."""

    def __init__(self, path: Path, detail: str):
        self.path = path
        self.detail = detail
        super().__init__(f"Invalid episodes dataset {path}: {detail}")


class InvalidSelectorError(EpisodeNamesError, TypeError):
    """The episode selector is neither 'all' nor a non-empty sequence."""

    def __init__(self, selector: Any):
        self.selector = selector
        super().__init__(
            "Episode selector must be either 'all' or a non-empty sequence of episode "
            f"identifiers. Received {type(selector).__name__} with value {selector!r}."
        )


class UnknownEpisodeError(EpisodeNamesError, LookupError):
    """A selected episode identifier is absent from the dataset."""

    def __init__(self, episode: Any):
        self.episode = episode
        super().__init__(f"Unknown episode number '{episode}'.")


class InvalidCountError(EpisodeNamesError, ValueError):
    """get() was called with a count that is not an integer >= 1."""

    def __init__(self, count: Any):
        self.count = count
        super().__init__(f"Count must be an integer greater than 0. Received {count!r}.")


class InsufficientCountError(EpisodeNamesError, ValueError):
    """get() asked for more names than there are unique names."""

    def __init__(self, count: int, available: int):
        self.count = count
        self.available = available
        super().__init__(
            f"Not enough values to retrieve {count} unique items ({available} available)."
        )


class EmptySetError(EpisodeNamesError, LookupError):
    """Sampling was attempted on a selection with no names."""

    def __init__(self):
        super().__init__("No names available to sample from.")
