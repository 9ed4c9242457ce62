"""Episode name selection and random sampling."""

import logging
import random
from collections.abc import Sequence
from pathlib import Path
from typing import Any, Iterator, Optional

from .constants.config import ALL_SELECTOR, DEFAULT_COUNT, DEFAULT_LANGUAGE
from .errors import (
    EmptySetError,
    InsufficientCountError,
    InvalidCountError,
    InvalidSelectorError,
    UnknownEpisodeError,
)
from .models.dataset import EpisodeDataset
from .utils.datasets import load_language_dataset
from .utils.shuffle import fisher_yates_shuffle

logger = logging.getLogger(__name__)


def _episode_key(episode_id: Any) -> str:
    """Dataset key for an identifier: str() of it, with integral floats as ints (2.0 -> "2")."""
    if isinstance(episode_id, float) and episode_id.is_integer():
        return str(int(episode_id))
    return str(episode_id)


def _is_episode_sequence(selector: Any) -> bool:
    """Check for a non-empty sequence of identifiers (strings are not sequences here)."""
    return (
        isinstance(selector, Sequence)
        and not isinstance(selector, (str, bytes))
        and len(selector) > 0
    )


class Episodes:
    """Names associated with a selection of episodes in one language.

    The deduplicated name list is built once at construction; every sampling
    call shuffles a copy of it.

    Args:
        episode: "all", or a non-empty sequence of episode identifiers; each is
            matched against the dataset keys by its str() form, integral floats
            as ints (2 and 2.0 both select "2")
        season: "all", or a sequence of seasons (accepted but not used for filtering)
        language: Language tag selecting `<language>-episodes.json`
        data_dir: Directory holding the dataset files (defaults to the bundled data)
        rng: Random source for shuffling (defaults to the `random` module)

    Raises:
        LanguageUnavailableError: If there is no dataset for the language
        DatasetSchemaError: If the dataset file is malformed
        InvalidSelectorError: If episode is neither "all" nor a non-empty sequence
        UnknownEpisodeError: If a selected episode is not in the dataset
    """

    def __init__(
        self,
        episode: Any = ALL_SELECTOR,
        season: Any = ALL_SELECTOR,
        language: str = DEFAULT_LANGUAGE,
        data_dir: Optional[Path] = None,
        rng: Optional[random.Random] = None,
    ):
        self.episode = episode
        self.season = season
        self.language = language
        self._rng = rng

        if season != ALL_SELECTOR:
            logger.warning("Season selector %r is ignored; datasets carry no season data", season)

        dataset = load_language_dataset(language, data_dir)
        self._names: tuple[str, ...] = tuple(self._select_names(dataset, episode))

        logger.debug(
            "Selected %d unique names for language %s (episode=%r)",
            len(self._names), language, episode,
        )

    @staticmethod
    def _select_names(dataset: EpisodeDataset, episode: Any) -> dict[str, None]:
        # dict keys give an insertion-ordered set: first occurrence wins
        names: dict[str, None] = {}

        if isinstance(episode, str) and episode == ALL_SELECTOR:
            episode_ids = list(dataset)
        elif _is_episode_sequence(episode):
            episode_ids = []
            for episode_id in episode:
                key = _episode_key(episode_id)
                if key not in dataset:
                    raise UnknownEpisodeError(episode_id)
                episode_ids.append(key)
        else:
            raise InvalidSelectorError(episode)

        for episode_id in episode_ids:
            for name in dataset.names_for(episode_id):
                names.setdefault(name, None)

        return names

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __repr__(self) -> str:
        return (
            f"Episodes(episode={self.episode!r}, season={self.season!r}, "
            f"language={self.language!r}, names={len(self._names)})"
        )

    def random(self) -> str:
        """Get one random name."""
        return self._shuffle()[0]

    def all(self) -> list[str]:
        """Get every selected name in first-seen order."""
        return list(self._names)

    def get(self, count: int = DEFAULT_COUNT) -> list[str]:
        """
        Get several distinct random names.

        Args:
            count: The amount of names to retrieve

        Returns:
            A list of `count` distinct names in random order

        Raises:
            InvalidCountError: If count is not an integer >= 1
            InsufficientCountError: If count exceeds the number of unique names
            EmptySetError: If there are no names at all
        """
        if isinstance(count, bool) or not isinstance(count, int) or count < 1:
            raise InvalidCountError(count)
        if not self._names:
            raise EmptySetError()
        if count > len(self._names):
            raise InsufficientCountError(count, len(self._names))

        return self._shuffle()[:count]

    def _shuffle(self) -> list[str]:
        """Get a shuffled copy of the names."""
        if not self._names:
            raise EmptySetError()
        return fisher_yates_shuffle(self._names, self._rng)
