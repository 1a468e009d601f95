import pytest

from textmine.export.exporter import TableExporter
from textmine.scoring.models import DocumentTotal, ScoredTerm

_ROW = ScoredTerm(
    document_id="A", term="cat", count=1, total=3, tf=1 / 3, idf=0.5, tf_idf=1 / 6
)


class TestToRecords:
    def test_converts_rows_in_field_order(self) -> None:
        records = TableExporter().to_records([_ROW])

        assert records == [
            {
                "document_id": "A",
                "term": "cat",
                "count": 1,
                "total": 3,
                "tf": 1 / 3,
                "idf": 0.5,
                "tf_idf": 1 / 6,
            }
        ]
        assert list(records[0]) == ["document_id", "term", "count", "total", "tf", "idf", "tf_idf"]

    def test_rejects_non_dataclass_rows(self) -> None:
        with pytest.raises(TypeError, match="dict"):
            TableExporter().to_records([{"term": "cat"}])


class TestToDataFrame:
    def test_one_column_per_field(self) -> None:
        frame = TableExporter().to_dataframe([DocumentTotal("A", 3), DocumentTotal("B", 4)])

        assert list(frame.columns) == ["document_id", "total"]
        assert frame["total"].tolist() == [3, 4]

    def test_values_are_not_rounded(self) -> None:
        frame = TableExporter().to_dataframe([_ROW])
        assert frame.loc[0, "tf"] == 1 / 3

    def test_empty_rows_keep_columns(self) -> None:
        frame = TableExporter().to_dataframe([], row_type=ScoredTerm)

        assert frame.empty
        assert list(frame.columns) == ["document_id", "term", "count", "total", "tf", "idf", "tf_idf"]

    def test_empty_rows_without_type(self) -> None:
        assert TableExporter().to_dataframe([]).empty
