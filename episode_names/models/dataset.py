"""Dataset model for episode name files."""

from typing import Dict, Iterator, List

from pydantic import RootModel


class EpisodeDataset(RootModel[Dict[str, List[str]]]):
    """Pydantic model for a `<language>-episodes.json` file.

    Maps an episode identifier (numeric-looking string keys such as "1") to the
    names associated with that episode, in file order.
    """

    def __iter__(self) -> Iterator[str]:
        return iter(self.root)

    def __contains__(self, episode_id: object) -> bool:
        return episode_id in self.root

    def __len__(self) -> int:
        return len(self.root)

    def names_for(self, episode_id: str) -> List[str]:
        """Get the names listed for one episode."""
        return self.root[episode_id]
