from collections.abc import Iterable
from dataclasses import asdict, fields, is_dataclass
from typing import Any

import pandas as pd


class TableExporter:
    """Converts scored tables into structures a presentation layer can consume."""

    def to_records(self, rows: Iterable[Any]) -> list[dict[str, Any]]:
        """Transform dataclass rows into JSON-ready dicts.

        Returns:
            One dict per row, keys in field declaration order.
        """
        return [self._row_to_dict(row) for row in rows]

    def to_dataframe(
        self,
        rows: Iterable[Any],
        row_type: type | None = None,
    ) -> pd.DataFrame:
        """Build a DataFrame with one column per dataclass field.

        ``row_type`` provides the columns when ``rows`` is empty.
        """
        records = self.to_records(rows)
        if records:
            return pd.DataFrame.from_records(records)
        columns = [f.name for f in fields(row_type)] if row_type is not None else []
        return pd.DataFrame(columns=columns)

    def _row_to_dict(self, row: Any) -> dict[str, Any]:
        if not is_dataclass(row) or isinstance(row, type):
            raise TypeError(f"Expected a dataclass row, got {type(row).__name__}")
        return asdict(row)
