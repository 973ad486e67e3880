from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import pandas as pd

"""Typed record set models.

FieldSpec is created once per column from the header row. TypedRecordSet is the
result of one import call: records plus the delimiter / encoding actually used.
"""

__all__ = [
    "FieldSpec",
    "TypedRecordSet",
]


@dataclass(frozen=True)
class FieldSpec:
    """One usable header column."""
    name: str
    index: int  # 元の列位置 (0-based)
    type: str | None = None  # "string" / "number" / None (= infer)


@dataclass(frozen=True)
class TypedRecordSet:
    records: list[dict[str, Any]]
    fields: tuple[FieldSpec, ...] = ()
    field_types: dict[str, str] = field(default_factory=dict)  # 推定後の型
    delimiter: str = ","
    encoding: str | None = None

    @property
    def field_names(self) -> list[str]:
        """Unique field names in column order (record keys)."""
        names: list[str] = []
        for spec in self.fields:
            if spec.name not in names:
                names.append(spec.name)
        return names

    @property
    def info(self) -> dict[str, Any]:
        return {"input_delimiter": self.delimiter, "input_encoding": self.encoding}

    def get_records(self) -> list[dict[str, Any]]:
        return self.records

    def __len__(self) -> int:
        return len(self.records)

    def to_dataframe(self) -> pd.DataFrame:
        """Hand the records to pandas; number fields become numeric columns."""
        import pandas as pd

        df = pd.DataFrame(self.records, columns=self.field_names, dtype=object)
        for name, field_type in self.field_types.items():
            if field_type == "number" and name in df.columns:
                df[name] = pd.to_numeric(df[name])
        return df
