"""JSON file helpers shared by the loaders and the CLI."""

import json
import logging
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

T = TypeVar('T', bound=BaseModel)
logger = logging.getLogger('leaguetable.utils')


def load_json(path: Path | str, schema: type[T] | None = None) -> Any | T:
    """
    Read a JSON file, optionally validating it against a pydantic model.

    Args:
        path: Group, tournament or config file
        schema: Model to validate with (e.g. GroupFile); raw data if None

    Returns:
        Validated model instance, or the decoded JSON

    Raises:
        FileNotFoundError: If the file doesn't exist
        json.JSONDecodeError: If the file isn't valid JSON
        ValueError: If the data doesn't match schema

    Example:
        from leaguetable.schemas import GroupFile
        group = load_json('data/groups/sample_playdown.json', schema=GroupFile)
    """
    path = Path(path)
    if not path.exists():
        logger.error(f'File not found: {path}')
        raise FileNotFoundError(f'File not found: {path}')

    with open(path, encoding='utf-8') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            logger.error(f'Invalid JSON in {path}: {e.msg} at position {e.pos}')
            raise json.JSONDecodeError(f'Invalid JSON in {path}: {e.msg}', e.doc, e.pos) from e

    if schema is None:
        return data

    try:
        return schema.model_validate(data)
    except ValidationError as e:
        logger.error(f'{path} does not match {schema.__name__}: {e.error_count()} error(s)')
        raise ValueError(f'Schema validation failed for {path}:\n{e}') from e


def save_json(path: Path | str, data: Any, indent: int = 2) -> None:
    """
    Write data (plain JSON or a pydantic model) to a file.

    Parent directories are created as needed.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    if isinstance(data, BaseModel):
        data = data.model_dump(mode='json')

    with open(path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=indent, ensure_ascii=False)
    logger.debug(f'Wrote {path}')


def validate_json_file(path: Path | str, schema: type[T]) -> tuple[bool, str | None]:
    """
    Check a JSON file against a schema without raising.

    Returns:
        (True, None) if valid, otherwise (False, error message)
    """
    try:
        load_json(path, schema=schema)
    except FileNotFoundError:
        return False, f'File not found: {path}'
    except json.JSONDecodeError as e:
        return False, f'Invalid JSON: {e.msg} at position {e.pos}'
    except ValueError as e:
        return False, str(e)
    return True, None
