"""Locale document loading from the filesystem.

Reads <locale>.json, <locale>.yml and <locale>.yaml files from a directory
into construction options. Parsing happens later, when the registry is built.
"""

from pathlib import Path
from typing import List

import structlog

from i18nkit.i18n.models import DocumentFormat, LocaleOptions

logger = structlog.get_logger()

SUPPORTED_SUFFIXES = (".json", ".yml", ".yaml")


class LocaleDirectoryLoader:
    """Loader for locale documents stored one file per locale.

    The file stem is the locale identifier: ``en.json`` registers ``en``,
    ``pt-BR.yml`` registers ``pt-BR``.

    Attributes:
        locales_dir: Directory containing the locale documents.
    """

    def __init__(self, locales_dir: Path):
        """Initialize the loader.

        Args:
            locales_dir: Directory with locale documents.

        Raises:
            ValueError: If the directory does not exist.
        """
        self.locales_dir = Path(locales_dir)

        if not self.locales_dir.is_dir():
            raise ValueError(f"Locales directory not found: {self.locales_dir}")

        logger.info("initialized_locale_loader", locales_dir=str(self.locales_dir))

    def discover(self) -> List[Path]:
        """List supported locale files sorted by file name."""
        return sorted(
            path
            for path in self.locales_dir.iterdir()
            if path.is_file() and path.suffix.lower() in SUPPORTED_SUFFIXES
        )

    def load_options(self) -> List[LocaleOptions]:
        """Read every locale document in the directory.

        Two files with the same stem (e.g. ``en.json`` and ``en.yml``) are
        both returned, and the registry rejects the duplicate.

        Returns:
            LocaleOptions in file name order.

        Raises:
            ValueError: If the directory holds no locale documents.
        """
        files = self.discover()
        if not files:
            raise ValueError(f"No locale documents found in {self.locales_dir}")

        options = [
            LocaleOptions(
                locale=path.stem,
                document=path.read_bytes(),
                format=DocumentFormat.from_suffix(path.suffix),
            )
            for path in files
        ]

        logger.info(
            "loaded_locale_documents",
            locales_dir=str(self.locales_dir),
            locales=[o.locale for o in options],
        )
        return options
