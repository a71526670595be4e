"""BIM document loader: bytes -> text -> JSON -> TabularModel."""

from __future__ import annotations

import asyncio
import json
import logging
import os
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Any

from tomparser.models.errors import ErrorCode, TomParserError
from tomparser.models.options import ParseOptions
from tomparser.models.tabular import TabularModel
from tomparser.parser.assembler import ModelAssembler
from tomparser.parser.encoding import decode_bytes

logger = logging.getLogger(__name__)

ByteReader = Callable[[Path], Awaitable[bytes]]


def _reject_constant(name: str) -> Any:
    """Reject the non-standard ``NaN``, ``Infinity`` and ``-Infinity`` literals."""
    raise ValueError(f"Invalid JSON constant {name!r}")


async def read_file_bytes(path: Path) -> bytes:
    """Default reader: read the whole file in a worker thread."""
    return await asyncio.to_thread(path.read_bytes)


class BimLoader:
    """Loads ``.bim`` files into :class:`TabularModel` graphs.

    *reader* is the storage collaborator; it must raise ``FileNotFoundError``
    for missing sources.
    """

    def __init__(
        self,
        reader: ByteReader | None = None,
        assembler: ModelAssembler | None = None,
    ) -> None:
        self._reader = reader or read_file_bytes
        self._assembler = assembler or ModelAssembler()

    async def load(
        self, source: str | os.PathLike[str], options: ParseOptions | None = None
    ) -> TabularModel:
        """Read, decode and parse the BIM file at *source*."""
        path = Path(source)
        try:
            data = await self._reader(path)
        except FileNotFoundError as exc:
            raise TomParserError(
                ErrorCode.FILE_NOT_FOUND, f"BIM file not found: {path}", exc
            ) from exc
        except TomParserError:
            raise
        except Exception as exc:
            raise TomParserError(
                ErrorCode.UNKNOWN, f"Error parsing BIM file: {exc}", exc
            ) from exc
        logger.debug("Read %d bytes from %s", len(data), path)
        return self.load_bytes(data, options)

    def load_bytes(self, data: bytes, options: ParseOptions | None = None) -> TabularModel:
        """Decode and parse raw BIM bytes already in memory."""
        try:
            document = json.loads(decode_bytes(data), parse_constant=_reject_constant)
        except ValueError as exc:
            # JSONDecodeError, or a literal refused by _reject_constant
            raise TomParserError(
                ErrorCode.INVALID_JSON, f"Invalid JSON in BIM file: {exc}", exc
            ) from exc
        except Exception as exc:
            raise TomParserError(
                ErrorCode.UNKNOWN, f"Error parsing BIM file: {exc}", exc
            ) from exc
        return self.load_value(document, options)

    def load_value(self, document: Any, options: ParseOptions | None = None) -> TabularModel:
        """Normalise an already-deserialised BIM document."""
        try:
            return self._assembler.assemble(document, options)
        except TomParserError:
            raise
        except Exception as exc:
            raise TomParserError(
                ErrorCode.UNKNOWN, f"Error parsing BIM file: {exc}", exc
            ) from exc
