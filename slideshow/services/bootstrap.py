"""
Startup derivation of the slide store.

Slides come from exactly one source, in priority order:
    1. slides.json, used as-is when it reads and parses cleanly
    2. a scan of the images directory
    3. fixed sample quotes with placeholder files

Derived slides (2 or 3) are written back to slides.json.
"""

import logging
from pathlib import Path

from slideshow.config.settings import AppSettings
from slideshow.domain.slide import Slide
from slideshow.domain.slide_store import SlideStore
from slideshow.utils.error_handling import BootstrapError, SlideStoreError

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".gif"})
IMAGE_URL_PREFIX = "/images/"
DEFAULT_AUTHOR = "Unknown"

SAMPLE_QUOTES: tuple[tuple[str, str], ...] = (
    ("The only way to do great work is to love what you do.", "Steve Jobs"),
    ("Life is what happens when you're busy making other plans.", "John Lennon"),
    (
        "The future belongs to those who believe in the beauty of their dreams.",
        "Eleanor Roosevelt",
    ),
    (
        "Success is not final, failure is not fatal: It is the courage to continue that counts.",
        "Winston Churchill",
    ),
)


def _extension(filename: str) -> str:
    """Lowercased extension including the dot, e.g. ".jpg"; "" if none."""
    _, dot, ext = filename.rpartition(".")
    return f".{ext}".lower() if dot else ""


def default_quote(filename: str) -> str:
    return f"This is a default quote for image {filename}"


def create_sample_data(images_dir: Path) -> SlideStore:
    """
    Create sample slides with placeholder files.

    The placeholders are plain text, so their image URLs will not render as
    images; they only give an empty installation something to show.

    Args:
        images_dir: Directory to write placeholder files into

    Returns:
        SlideStore with one slide per sample quote

    Raises:
        BootstrapError: If the directory or a placeholder cannot be written
    """
    try:
        images_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise BootstrapError(f"Failed to create images directory {images_dir}: {e}") from e

    slides = []
    for number, (quote, author) in enumerate(SAMPLE_QUOTES, start=1):
        filename = f"placeholder_{number}.txt"
        try:
            (images_dir / filename).write_text(
                f"This is a placeholder for image {number}. "
                "Replace with an actual image file.",
                encoding="utf-8",
            )
        except OSError as e:
            raise BootstrapError(f"Failed to create placeholder file: {e}") from e

        slides.append(
            Slide(id=number, image_url=f"{IMAGE_URL_PREFIX}{filename}", quote=quote, author=author)
        )

    logger.info(f"Created {len(slides)} sample slides in {images_dir}")
    return SlideStore(slides)


def scan_images_dir(images_dir: Path) -> SlideStore:
    """
    Build one slide per image file in a directory.

    Entries are taken in filename order; subdirectories and files whose
    extension is not in IMAGE_EXTENSIONS (case-insensitive) are skipped.

    Raises:
        BootstrapError: If the directory cannot be listed
    """
    try:
        entries = sorted(images_dir.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise BootstrapError(f"Failed to read images directory {images_dir}: {e}") from e

    slides = []
    for entry in entries:
        if entry.is_dir() or _extension(entry.name) not in IMAGE_EXTENSIONS:
            continue
        slides.append(
            Slide(
                id=len(slides) + 1,
                image_url=f"{IMAGE_URL_PREFIX}{entry.name}",
                quote=default_quote(entry.name),
                author=DEFAULT_AUTHOR,
            )
        )
    return SlideStore(slides)


def derive_from_images_dir(images_dir: Path) -> SlideStore:
    """
    Derive slides from the images directory, falling back to sample data.

    A directory that did not exist is created and filled with sample data
    without being scanned.

    Raises:
        BootstrapError: On any file system error
    """
    if not images_dir.exists():
        try:
            images_dir.mkdir(parents=True)
        except OSError as e:
            raise BootstrapError(f"Failed to create images directory {images_dir}: {e}") from e
        logger.info(f"Created images directory {images_dir}")
        return create_sample_data(images_dir)

    store = scan_images_dir(images_dir)
    if len(store) == 0:
        logger.info(f"No images found in {images_dir}, using sample data")
        return create_sample_data(images_dir)

    logger.info(f"Found {len(store)} images in {images_dir}")
    return store


def load_slides(settings: AppSettings) -> SlideStore:
    """
    Populate the slide store for this process.

    Args:
        settings: Application settings (storage paths)

    Returns:
        The slide store to serve

    Raises:
        BootstrapError: If derivation or persisting derived slides fails
    """
    slides_file = settings.storage.slides_file

    try:
        store = SlideStore.load(slides_file)
        logger.info(f"Loaded {len(store)} slides from {slides_file}")
        return store
    except SlideStoreError as e:
        logger.info(f"{slides_file} not usable ({e}), initializing from images directory")

    store = derive_from_images_dir(settings.storage.images_dir)

    try:
        store.save(slides_file)
    except OSError as e:
        raise BootstrapError(f"Failed to write {slides_file}: {e}") from e

    return store
