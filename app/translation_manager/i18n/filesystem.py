"""File system access for translation files.

Defines the contract the package store uses to discover locale directories
and load translation files, and a local implementation reading YAML or JSON.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, List, Union

import yaml

from translation_manager.i18n.errors import TranslationFileError
from translation_manager.logging import get_module_logger

logger = get_module_logger()

PathLike = Union[str, Path]

YAML_EXTENSIONS = ("yml", "yaml")
JSON_EXTENSIONS = ("json",)


class TranslationFileSystem(ABC):
    """Abstract file system provider for translation files."""

    @abstractmethod
    def is_directory(self, path: PathLike) -> bool:
        """Check whether ``path`` is an existing directory."""
        pass

    @abstractmethod
    def list_directories(self, path: PathLike) -> List[str]:
        """List the names of the direct subdirectories of ``path``."""
        pass

    @abstractmethod
    def exists(self, path: PathLike) -> bool:
        """Check whether ``path`` is an existing file."""
        pass

    @abstractmethod
    def load(self, path: PathLike) -> Any:
        """Load and deserialize a translation file.

        Args:
            path: File to load.

        Returns:
            The deserialized content. Callers check that it is a mapping.

        Raises:
            TranslationFileError: If the file cannot be read or parsed.
        """
        pass


class LocalTranslationFileSystem(TranslationFileSystem):
    """Reads translation files from the local disk.

    Files ending in ``.yml``/``.yaml`` are parsed with ``yaml.safe_load`` and
    files ending in ``.json`` with ``json.load``.
    """

    def is_directory(self, path: PathLike) -> bool:
        return Path(path).is_dir()

    def list_directories(self, path: PathLike) -> List[str]:
        base = Path(path)
        if not base.is_dir():
            return []
        return sorted(entry.name for entry in base.iterdir() if entry.is_dir())

    def exists(self, path: PathLike) -> bool:
        return Path(path).is_file()

    def load(self, path: PathLike) -> Any:
        file_path = Path(path)
        extension = file_path.suffix.lstrip(".").lower()

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                if extension in YAML_EXTENSIONS:
                    data = yaml.safe_load(f)
                elif extension in JSON_EXTENSIONS:
                    data = json.load(f)
                else:
                    raise TranslationFileError(
                        str(file_path), f"unsupported extension '{extension}'"
                    )
        except yaml.YAMLError as e:
            logger.error("yaml_parse_error", file=str(file_path), error=str(e))
            raise TranslationFileError(str(file_path), str(e)) from e
        except json.JSONDecodeError as e:
            logger.error("json_parse_error", file=str(file_path), error=str(e))
            raise TranslationFileError(str(file_path), str(e)) from e
        except (OSError, UnicodeDecodeError) as e:
            logger.error("translation_file_read_error", file=str(file_path), error=str(e))
            raise TranslationFileError(str(file_path), str(e)) from e

        logger.debug("translation_file_loaded", file=str(file_path))
        return data
