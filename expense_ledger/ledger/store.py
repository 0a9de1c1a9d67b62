"""Mini README: JSON persistence for the expense ledger.

Structure:
    * LedgerStore - loads and saves the full expense sequence in one file.

The store is a pure translation layer: it knows the on-disk record layout
but no business rules. The file holds a JSON array of objects with the keys
``id``, ``amount``, ``description``, ``date`` and ``category``. Amounts are
written as decimal strings and read with ``parse_float=Decimal`` so values
round-trip exactly. Dates use ``YYYY-MM-DD``.

Saving writes a temporary sibling file and swaps it in with ``os.replace``
so a reader never observes a half-written ledger. The permission bits of an
existing ledger file are copied onto the replacement. There is no locking
between processes; two overlapping invocations resolve as last writer wins.
"""

from __future__ import annotations

import json
import os
import shutil
import tempfile
from datetime import datetime
from decimal import Decimal
from pathlib import Path
from typing import List, Optional, Sequence, Set, Union

from ..errors import PersistenceError
from ..logging_utils import get_logger
from .models import Expense

LOGGER = get_logger(__name__)

CORRUPT_SUFFIX = ".corrupt"


class LedgerStore:
    """Read and write the ledger file at ``path``."""

    def __init__(self, path: Union[str, Path], *, backup_corrupt_files: bool = True) -> None:
        self.path = Path(path)
        self.backup_corrupt_files = backup_corrupt_files

    def backup_path_for(self, moment: datetime) -> Path:
        """Name a corrupt-file copy so earlier copies are never overwritten."""

        stamp = moment.strftime("%Y%m%dT%H%M%S%f")
        return self.path.with_name(f"{self.path.name}{CORRUPT_SUFFIX}-{stamp}")

    def load(self) -> List[Expense]:
        """Return every stored expense in file order.

        A missing file, an empty file and a top-level ``null`` all mean an
        empty ledger. Anything else that cannot be decoded raises
        ``PersistenceError`` after the file has optionally been copied to
        ``<name>.corrupt-<timestamp>``.
        """

        if not self.path.exists():
            LOGGER.debug("Ledger file %s does not exist yet; starting empty", self.path)
            return []

        try:
            with self.path.open("rb") as handle:
                content = handle.read()
        except OSError as error:
            raise PersistenceError(
                f"Error reading ledger file {self.path}: {error}", path=self.path
            ) from error

        if not content.strip():
            LOGGER.debug("Ledger file %s is empty", self.path)
            return []

        try:
            payload = json.loads(content.decode("utf-8"), parse_float=Decimal)
            expenses = self._decode(payload)
        except (ValueError, RecursionError) as error:
            backup = self._backup_corrupt_file()
            raise PersistenceError(
                f"Ledger file {self.path} could not be parsed: {error}",
                path=self.path,
                backup_path=backup,
            ) from error

        LOGGER.debug("Loaded %s expenses from %s", len(expenses), self.path)
        return expenses

    @staticmethod
    def _decode(payload: object) -> List[Expense]:
        if payload is None:
            return []
        if not isinstance(payload, list):
            raise ValueError(f"expected a JSON array, got {type(payload).__name__}")

        expenses: List[Expense] = []
        seen: Set[str] = set()
        for index, record in enumerate(payload):
            try:
                expense = Expense.from_dict(record)
            except ValueError as error:
                raise ValueError(f"record {index}: {error}") from error
            if expense.expense_id in seen:
                raise ValueError(f"record {index}: duplicate id {expense.expense_id}")
            seen.add(expense.expense_id)
            expenses.append(expense)
        return expenses

    def _backup_corrupt_file(self) -> Optional[Path]:
        if not self.backup_corrupt_files:
            return None
        base = self.backup_path_for(datetime.now())
        backup_path = base
        counter = 1
        while backup_path.exists():
            backup_path = base.with_name(f"{base.name}~{counter}")
            counter += 1
        try:
            shutil.copy2(self.path, backup_path)
        except OSError as error:
            LOGGER.error("Could not back up corrupt ledger %s: %s", self.path, error)
            return None
        LOGGER.warning("Copied unreadable ledger %s to %s", self.path, backup_path)
        return backup_path

    def save(self, expenses: Sequence[Expense]) -> None:
        """Replace the ledger file with ``expenses``.

        Raises ``PersistenceError`` when the file cannot be written; the
        previous contents stay untouched in that case.
        """

        records = [expense.as_dict() for expense in expenses]
        directory = self.path.parent
        temp_name = None
        try:
            directory.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=directory,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as handle:
                temp_name = handle.name
                json.dump(records, handle, indent=2, ensure_ascii=False)
                handle.write("\n")
                handle.flush()
                os.fsync(handle.fileno())
            if self.path.exists():
                shutil.copymode(self.path, temp_name)
            os.replace(temp_name, self.path)
        except OSError as error:
            if temp_name is not None and os.path.exists(temp_name):
                os.unlink(temp_name)
            raise PersistenceError(
                f"Error writing ledger file {self.path}: {error}", path=self.path
            ) from error

        LOGGER.debug("Saved %s expenses to %s", len(records), self.path)
