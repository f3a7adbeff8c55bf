"""Slide model: one image reference paired with a quote."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class Slide(BaseModel):
    """A single slide as stored in slides.json and returned by the API.

    Attributes:
        id: Sequential identifier, starting at 1 for derived slides
        image_url: Path under the image route (serialized as ``imageUrl``)
        quote: Quote text shown with the image
        author: Optional attribution; omitted from JSON when empty

    Missing fields in hand-edited JSON load as zero values; only wrong
    types are rejected.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: int = 0
    image_url: str = Field("", alias="imageUrl")
    quote: str = ""
    author: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Return the serialized form, keyed by the JSON field names."""
        data = self.model_dump(by_alias=True)
        if not data.get("author"):
            data.pop("author", None)
        return data

    def __str__(self) -> str:
        by = f" - {self.author}" if self.author else ""
        return f"Slide {self.id}: {self.quote!r}{by} ({self.image_url})"
