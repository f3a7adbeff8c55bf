"""In-memory, ordered collection of slides backed by slides.json."""

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Iterator, Optional, Union

from pydantic import TypeAdapter, ValidationError

from slideshow.domain.slide import Slide
from slideshow.utils.error_handling import SlideStoreError

logger = logging.getLogger(__name__)

_SLIDE_LIST = TypeAdapter(list[Slide])


class SlideStore:
    """Ordered sequence of slides; insertion order is display order.

    The store is built once during startup and handed to the API, which only
    reads from it.
    """

    def __init__(self, slides: Optional[Iterable[Slide]] = None):
        self._slides: list[Slide] = list(slides or [])

    def __len__(self) -> int:
        return len(self._slides)

    def __iter__(self) -> Iterator[Slide]:
        return iter(self._slides)

    def __repr__(self) -> str:
        return f"SlideStore(slides={len(self._slides)})"

    def to_list(self) -> list[dict[str, Any]]:
        return [slide.to_dict() for slide in self._slides]

    def to_json(self, indent: Optional[int] = None) -> str:
        """
        Serialize the store as a JSON array.

        Args:
            indent: Indentation width; None for compact output

        Returns:
            JSON text
        """
        return json.dumps(self.to_list(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_json(cls, text: Union[str, bytes]) -> "SlideStore":
        """
        Parse a JSON array of slide objects.

        Raises:
            SlideStoreError: If the text is not valid JSON or does not match
                the slide schema
        """
        try:
            return cls(_SLIDE_LIST.validate_json(text))
        except ValidationError as e:
            raise SlideStoreError(
                "Invalid slides data", {"errors": e.error_count()}
            ) from e

    @classmethod
    def load(cls, path: Path) -> "SlideStore":
        """
        Load slides from a JSON file.

        Args:
            path: Path to slides.json

        Returns:
            SlideStore with the file's slides, in file order

        Raises:
            SlideStoreError: If the file cannot be read or parsed
        """
        try:
            data = Path(path).read_bytes()
        except OSError as e:
            raise SlideStoreError(f"Failed to read {path}: {e.strerror or e}") from e
        return cls.from_json(data)

    def save(self, path: Path) -> None:
        """
        Write the slides to a JSON file with 2-space indentation.

        Existing content is overwritten.

        Raises:
            OSError: If the file cannot be written
        """
        Path(path).write_text(self.to_json(indent=2), encoding="utf-8")
        logger.info(f"Saved {len(self)} slides to {path}")
