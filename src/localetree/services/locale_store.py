"""
Locale file storage

All file system access of the toolkit goes through this module. Locale files
are written the way they are expected to be stored in the app repository:
UTF-8, two-space indent, non-ASCII characters kept literal and a trailing
newline. Re-saving an unmodified tree reproduces the original bytes.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from localetree.errors import MalformedTree, MissingSourceFile
from localetree.models.patch import MergePatch
from localetree.models.report import TranslationReport
from localetree.models.tree import Node, parse_tree
from localetree.services.classifier import IntentionalMatchTable

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class LocaleStore:
    """Read and write locale, patch and report files"""

    def __init__(self, indent: int = 2):
        self.indent = indent

    def read_json(self, path: PathLike) -> Dict[str, Any]:
        """
        Read a JSON object from disk

        Raises:
            MissingSourceFile: file does not exist or cannot be read
            MalformedTree: content is not a JSON object
        """
        path = Path(path)
        try:
            raw = path.read_bytes()
        except FileNotFoundError:
            raise MissingSourceFile(str(path))
        except OSError as e:
            raise MissingSourceFile(str(path), str(e))

        try:
            data = json.loads(raw.decode('utf-8'))
        except UnicodeDecodeError as e:
            raise MalformedTree(str(path), f"not UTF-8 encoded: {e}")
        except json.JSONDecodeError as e:
            raise MalformedTree(str(path), f"invalid JSON: {e}")

        if not isinstance(data, dict):
            raise MalformedTree(str(path), f"top level is {type(data).__name__}, expected an object")

        logger.debug(f"Loaded {path} ({len(raw)} bytes)")
        return data

    def load_tree(self, path: PathLike) -> Node:
        return parse_tree(self.read_json(path))

    def dumps(self, data: Union[Node, Mapping[str, Any]]) -> str:
        """Serialize a tree (or plain mapping) in locale file layout"""
        plain = data.to_plain() if isinstance(data, Node) else data
        return json.dumps(plain, ensure_ascii=False, indent=self.indent) + '\n'

    def write_json(self, path: PathLike, data: Union[Node, Mapping[str, Any]]) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open('w', encoding='utf-8', newline='\n') as f:
            f.write(self.dumps(data))
        logger.info(f"Wrote {path}")

    def save_tree(self, path: PathLike, tree: Node) -> None:
        self.write_json(path, tree)

    def load_patch(self, path: PathLike, root: Optional[str] = None, shape: str = 'auto') -> MergePatch:
        return MergePatch.from_plain(self.read_json(path), root=root, shape=shape)

    def save_report(self, path: PathLike, report: TranslationReport, mode: str = 'flat') -> None:
        """Write the untranslated subset of a report as ``{key_path: reference_value}``"""
        if mode == 'flat':
            data = report.to_flat()
        elif mode == 'nested':
            data = report.to_nested()
        else:
            raise ValueError(f"Unknown report format: {mode}")
        self.write_json(path, data)

    def load_match_table(self, path: Optional[PathLike]) -> IntentionalMatchTable:
        """Load the intentional match table; no path means an empty table"""
        if not path:
            return IntentionalMatchTable()
        data = self.read_json(path)
        try:
            return IntentionalMatchTable.from_mapping(data)
        except ValueError as e:
            raise MalformedTree(str(path), str(e))

    @staticmethod
    def locale_path(locales_dir: PathLike, language: str) -> Path:
        return Path(locales_dir) / f"{language}.json"

    @staticmethod
    def list_languages(locales_dir: PathLike) -> List[str]:
        """Language codes of every ``*.json`` file in a directory, sorted"""
        locales_dir = Path(locales_dir)
        if not locales_dir.is_dir():
            raise MissingSourceFile(str(locales_dir), "locales directory not found")
        return sorted(p.stem for p in locales_dir.glob('*.json') if p.is_file())
