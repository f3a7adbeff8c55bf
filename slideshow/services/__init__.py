"""Service layer."""

from slideshow.services.bootstrap import (
    create_sample_data,
    derive_from_images_dir,
    load_slides,
    scan_images_dir,
)

__all__ = [
    "create_sample_data",
    "derive_from_images_dir",
    "load_slides",
    "scan_images_dir",
]
