"""Message loading interface and implementations.

Loaders walk a directory and yield one nested mapping per source file. The
mappings are handed to the message store, which merges them in the order
they are yielded.
"""

import importlib.util
import re
from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Iterator, List, Optional, Sequence, Union

import yaml

import structlog

logger = structlog.get_logger()

PathLike = Union[str, Path]


class MessageLoader(ABC):
    """Abstract base for message loaders.

    Implementations define how source files under a directory are found and
    turned into nested mappings.
    """

    @abstractmethod
    def iter_sources(self, path: PathLike) -> Iterator[Mapping]:
        """Yield one message mapping per source file under ``path``.

        Args:
            path: Directory to search recursively.

        Yields:
            Nested mappings of the message tree shape.

        Raises:
            FileNotFoundError: If ``path`` is not a directory.
        """
        pass

    @staticmethod
    def _find_files(path: PathLike, patterns: Sequence[str]) -> List[Path]:
        directory = Path(path)
        if not directory.is_dir():
            raise FileNotFoundError(f"Messages directory not found: {directory}")

        files = set()
        for pattern in patterns:
            files.update(directory.rglob(pattern))
        return sorted(file for file in files if file.is_file())


class YAMLMessageLoader(MessageLoader):
    """Loader for YAML message files (``*.yml`` and ``*.yaml``).

    Expected format, one or more locales per file:

        en:
          greeting: Hello, %{name}!
          date:
            formats:
              default: "%Y-%m-%d"
    """

    patterns = ("*.yml", "*.yaml")

    def iter_sources(self, path: PathLike) -> Iterator[Mapping]:
        for yaml_file in self._find_files(path, self.patterns):
            try:
                with open(yaml_file, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                logger.error("yaml_parse_error", file=str(yaml_file), error=str(e))
                raise

            if data is None:
                logger.debug("empty_message_file", file=str(yaml_file))
                continue

            if not isinstance(data, Mapping):
                logger.warning(
                    "invalid_message_file_format",
                    file=str(yaml_file),
                    expected="mapping",
                )
                continue

            logger.debug("message_file_loaded", file=str(yaml_file), format="yaml")
            yield data


class PythonMessageLoader(MessageLoader):
    """Loader for Python message modules (``*.py``).

    Each file is executed as a standalone module and must define a
    ``MESSAGES`` mapping. Values may be callables taking ``(key, options)``:

        MESSAGES = {
            "en": {
                "welcome": lambda key, options: f"Welcome, {options['name']}!",
            }
        }
    """

    patterns = ("*.py",)
    attribute = "MESSAGES"

    def iter_sources(self, path: PathLike) -> Iterator[Mapping]:
        for module_file in self._find_files(path, self.patterns):
            module = self._exec_module(module_file)
            messages = getattr(module, self.attribute, None)

            if messages is None:
                logger.warning(
                    "missing_messages_attribute",
                    file=str(module_file),
                    attribute=self.attribute,
                )
                continue

            if not isinstance(messages, Mapping):
                logger.warning(
                    "invalid_message_file_format",
                    file=str(module_file),
                    expected="mapping",
                )
                continue

            logger.debug("message_file_loaded", file=str(module_file), format="python")
            yield messages

    @staticmethod
    def _exec_module(module_file: Path):
        name = "tater_messages_" + re.sub(r"\W", "_", str(module_file.with_suffix("")))
        spec = importlib.util.spec_from_file_location(name, module_file)
        if spec is None or spec.loader is None:
            raise ImportError(f"Cannot load message module: {module_file}")

        module = importlib.util.module_from_spec(spec)
        try:
            spec.loader.exec_module(module)
        except Exception as e:
            logger.error("message_module_error", file=str(module_file), error=str(e))
            raise
        return module


class DirectoryMessageLoader(MessageLoader):
    """Chains several loaders over the same directory.

    By default YAML files are yielded first, then Python message modules, so
    values defined in Python win on conflicts.
    """

    def __init__(self, loaders: Optional[Sequence[MessageLoader]] = None):
        self.loaders: List[MessageLoader] = list(
            loaders if loaders is not None else (YAMLMessageLoader(), PythonMessageLoader())
        )

    def iter_sources(self, path: PathLike) -> Iterator[Mapping[str, Any]]:
        for loader in self.loaders:
            yield from loader.iter_sources(path)
