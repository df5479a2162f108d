"""
Tests for DataFrame export
"""

import pytest

from linqstream import query

pd = pytest.importorskip("pandas")


class TestToDataFrame:
    """Test to_dataframe()"""

    def test_dict_rows(self, sales_data):
        """Test dict elements become columns"""
        df = query(sales_data).where(lambda r: r["city"] == "LA").to_dataframe()

        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == ["city", "product", "amount"]
        assert df["amount"].tolist() == [150, 250]

    def test_scalar_rows_with_columns(self, numbers):
        """Test scalar elements become a single named column"""
        df = query(numbers).select(lambda x: x * x).to_dataframe(columns=["square"])

        assert df["square"].tolist() == [1, 4, 9, 16, 25]

    def test_empty(self):
        """Test an empty query exports an empty frame"""
        assert query([]).to_dataframe().empty


def test_missing_pandas(monkeypatch, numbers):
    """Test a clear ImportError when pandas is unavailable"""
    import linqstream.core.pandas_export as pandas_export

    monkeypatch.setattr(pandas_export, "PANDAS_AVAILABLE", False)

    with pytest.raises(ImportError, match="linqstream\\[pandas\\]"):
        query(numbers).to_dataframe()
