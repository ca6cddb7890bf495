# SPDX-License-Identifier: MIT

import csv
import logging
from pathlib import Path
from typing import Any, Optional, Sequence, Union

from yaml import YAMLError, load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from ganttline.errors import MalformedInput
from ganttline.model.annotation import SpotRow
from ganttline.model.timeline_entry import ProjectRow

log = logging.getLogger(__name__)

Column = Union[int, str]

# Layout of the shared planning spreadsheet: the project table in the first
# four columns, milestones in columns 2, 5 and 6
DEFAULT_PROJECT_COLUMNS: list[Column] = [0, 1, 2, 3]
DEFAULT_SPOT_COLUMNS: list[Column] = [1, 4, 5]

PROJECT_KEYS = ["wp", "activity", "start_date", "end_date"]
SPOT_KEYS = ["activity", "spot_date", "spot_type"]

CSV_SUFFIXES = {".csv", ".tsv"}
YAML_SUFFIXES = {".yaml", ".yml"}


class TableRepository:
    """Reads the project and milestone tables from a CSV or YAML file."""

    def __init__(
        self,
        path: Path,
        project_columns: Optional[list[Column]] = None,
        spot_columns: Optional[list[Column]] = None,
    ) -> None:
        self.path = path
        self.project_columns = project_columns or DEFAULT_PROJECT_COLUMNS
        self.spot_columns = spot_columns or DEFAULT_SPOT_COLUMNS
        self._project_rows: Optional[list[ProjectRow]] = None
        self._spot_rows: Optional[list[SpotRow]] = None

    def __load_data(self) -> None:
        if not self.path.is_file():
            raise FileNotFoundError(f"No such table: {self.path}")

        suffix = self.path.suffix.lower()
        if suffix in CSV_SUFFIXES:
            self.__load_csv(delimiter="\t" if suffix == ".tsv" else ",")
        elif suffix in YAML_SUFFIXES:
            self.__load_yaml()
        else:
            raise MalformedInput(
                f"Unsupported table format '{suffix}', expected CSV, TSV or YAML"
            )
        log.debug(
            "Loaded %d project rows and %d milestone rows from %s",
            len(self._project_rows or []),
            len(self._spot_rows or []),
            self.path,
        )

    def __load_csv(self, delimiter: str) -> None:
        with self.path.open(newline="", encoding="utf-8-sig") as table_file:
            records = [record for record in csv.reader(table_file, delimiter=delimiter)]
        if not records:
            raise MalformedInput(f"{self.path} is empty")

        header, body = records[0], records[1:]
        body = [record for record in body if any(cell.strip() for cell in record)]

        project_indexes = _resolve_columns(header, self.project_columns)
        self._project_rows = [
            ProjectRow(*_pick(record, project_indexes)) for record in body
        ]

        # A table without milestone columns simply has no milestones
        if any(
            isinstance(column, int) and column >= len(header)
            for column in self.spot_columns
        ):
            log.info("%s has no milestone columns", self.path)
            self._spot_rows = []
            return
        spot_indexes = _resolve_columns(header, self.spot_columns)
        self._spot_rows = [SpotRow(*_pick(record, spot_indexes)) for record in body]

    def __load_yaml(self) -> None:
        try:
            data = load(self.path.read_text(), Loader=Loader)
        except YAMLError as e:
            raise MalformedInput(f"{self.path} is not valid YAML: {e}") from e
        if not isinstance(data, dict) or "project" not in data:
            raise MalformedInput(f"{self.path} has no 'project' list")

        self._project_rows = [
            ProjectRow(*_pick_keys(item, PROJECT_KEYS, "project"))
            for item in data["project"] or []
        ]
        self._spot_rows = [
            SpotRow(*_pick_keys(item, SPOT_KEYS, "spots"))
            for item in data.get("spots") or []
        ]

    def get_project_rows(self) -> list[ProjectRow]:
        if self._project_rows is None:
            self.__load_data()
        return list(self._project_rows or [])

    def get_spot_rows(self) -> list[SpotRow]:
        if self._spot_rows is None:
            self.__load_data()
        return list(self._spot_rows or [])


def _resolve_columns(header: list[str], columns: Sequence[Column]) -> list[int]:
    stripped = [name.strip() for name in header]
    indexes = []
    for column in columns:
        if isinstance(column, int):
            if column < 0 or column >= len(header):
                raise MalformedInput(
                    f"Column {column} is out of range, the table has {len(header)} columns"
                )
            indexes.append(column)
        else:
            if column not in stripped:
                raise MalformedInput(f"No column named '{column}'")
            indexes.append(stripped.index(column))
    return indexes


def _pick(record: list[str], indexes: list[int]) -> list[Optional[str]]:
    values: list[Optional[str]] = []
    for index in indexes:
        value = record[index].strip() if index < len(record) else ""
        values.append(value or None)
    return values


def _pick_keys(item: Any, keys: list[str], section: str) -> list[Any]:
    if not isinstance(item, dict):
        raise MalformedInput(f"Entries of '{section}' must be mappings, got {item!r}")
    return [item.get(key) for key in keys]
