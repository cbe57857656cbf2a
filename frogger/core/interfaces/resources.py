"""
Resource provider protocol - read side of the image loader
"""

from typing import Any, Protocol


class ResourceProvider(Protocol):
    """Gives access to images that finished loading"""

    def get(self, path: str) -> Any:
        """
        Return the drawable image loaded for a path.

        Only valid once the path has been loaded.
        """
        ...
