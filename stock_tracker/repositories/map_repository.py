"""
Map Repository - whole-file JSON persistence for keyed records
"""
import json
import os
import stat
import tempfile
from pathlib import Path
from typing import Callable, Dict, Type, TypeVar, Union

from pydantic import BaseModel, TypeAdapter, ValidationError

from stock_tracker.core.exceptions import (
    DeserializeFailedError,
    OpenFailedError,
    SerializeFailedError,
    WriteFailedError,
)
from stock_tracker.logger import logger

T = TypeVar("T", bound=BaseModel)
PathLike = Union[str, Path]


def _target_mode(path: Path) -> int:
    """Permission bits for ``path``: its current mode, else the umask default."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_atomic(path: PathLike, payload: str) -> None:
    """
    Replace ``path`` with ``payload`` in one step

    The text is written to a sibling temporary file which then replaces
    the target, so readers see either the old or the new document. The
    target keeps its permission bits; a new file gets the umask default.

    Raises:
        WriteFailedError: If the file cannot be written or replaced
    """
    path = Path(path)
    tmp_name = None
    try:
        mode = _target_mode(path)
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp_file:
            tmp_name = tmp_file.name
            tmp_file.write(payload)
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise WriteFailedError(path) from e


class MapRepository:
    """Repository for JSON files holding a ``key -> record`` object"""

    @staticmethod
    def load(path: PathLike, model: Type[T]) -> Dict[str, T]:
        """
        Load the full map stored at ``path``

        Args:
            path: JSON file
            model: Record type of every value

        Returns:
            Mapping of key to validated record

        Raises:
            OpenFailedError: File missing or unreadable
            DeserializeFailedError: Not JSON, or not a map of ``model``
        """
        path = Path(path)
        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as e:
            raise OpenFailedError(path) from e
        except UnicodeDecodeError as e:
            raise DeserializeFailedError(path) from e

        try:
            records = TypeAdapter(Dict[str, model]).validate_json(raw)
        except ValidationError as e:
            logger.debug(f"Invalid store {path}: {e}")
            raise DeserializeFailedError(path) from e

        logger.trace(f"Loaded {len(records)} record(s) from {path}")
        return records

    @staticmethod
    def save(path: PathLike, records: Dict[str, T]) -> None:
        """
        Serialize the whole map and overwrite ``path``

        Raises:
            SerializeFailedError: A record could not be serialized
            WriteFailedError: The file could not be written
        """
        path = Path(path)
        try:
            payload = json.dumps(
                {key: record.model_dump(mode="json") for key, record in records.items()},
                indent=2,
                sort_keys=True,
            )
        except (TypeError, ValueError) as e:
            raise SerializeFailedError(path) from e

        write_atomic(path, payload)
        logger.trace(f"Saved {len(records)} record(s) to {path}")

    @staticmethod
    def modify(path: PathLike, model: Type[T], mutation: Callable[[Dict[str, T]], None]) -> Dict[str, T]:
        """
        Load, mutate in place, save

        If ``mutation`` raises, nothing is written and the error propagates.
        There is no locking: the last writer wins.

        Args:
            path: JSON file
            model: Record type
            mutation: Callable applied to the loaded map

        Returns:
            The saved map
        """
        records = MapRepository.load(path, model)
        mutation(records)
        MapRepository.save(path, records)
        return records

    @staticmethod
    def reset(path: PathLike) -> None:
        """Overwrite ``path`` with an empty map."""
        MapRepository.save(path, {})
