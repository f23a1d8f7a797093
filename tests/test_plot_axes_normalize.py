from __future__ import annotations

from decimal import Decimal
import math
import unittest

import numpy as np

from plot_axes.adapters.normalize import coerce_item, normalize_data, number_or_nan
from plot_axes.errors import PlotDataError
from plot_axes.series import NormalizedData, Point, Scalar, Series


class NormalizeDataTests(unittest.TestCase):
    def test_flat_list_is_one_series(self) -> None:
        data = normalize_data([1, 2, 3])
        self.assertEqual(len(data.series), 1)
        self.assertEqual(data.values().tolist(), [1.0, 2.0, 3.0])

    def test_decimal_and_holes(self) -> None:
        data = normalize_data([Decimal("1.5"), Decimal("2.25"), None, "x", Decimal("3.5")])
        values = data.values()
        self.assertEqual(values.dtype, np.float64)
        self.assertTrue(np.array_equal(np.isfinite(values), np.asarray([True, True, False, False, True])))
        self.assertEqual(values[np.isfinite(values)].tolist(), [1.5, 2.25, 3.5])

    def test_series_objects_keep_names(self) -> None:
        data = normalize_data({"series": [{"name": "a", "data": [1, {"value": 2}]}, [3]]})
        self.assertEqual([s.name for s in data.series], ["a", None])
        self.assertEqual(data.series[0].items, (Scalar(1.0), Scalar(2.0)))

    def test_points_resolve_per_dimension(self) -> None:
        data = normalize_data([[{"x": 1, "y": 5}, {"y": 7}, {"x": "2", "y": None}]])
        series = data.series[0]
        self.assertEqual(series.items[0], Point(x=1.0, y=5.0))
        self.assertEqual(series.values("x")[[0, 2]].tolist(), [1.0, 2.0])
        self.assertTrue(math.isnan(series.values("x")[1]))
        self.assertEqual(series.values("y")[:2].tolist(), [5.0, 7.0])
        self.assertTrue(math.isnan(series.values("y")[2]))

    def test_passthrough_of_normalized_input(self) -> None:
        normalized = NormalizedData(series=(Series(items=(Scalar(1.0),)),))
        self.assertIs(normalize_data(normalized), normalized)
        wrapped = normalize_data(normalized.series[0])
        self.assertEqual(wrapped.series, normalized.series)

    def test_none_and_empty(self) -> None:
        self.assertEqual(normalize_data(None).values().size, 0)
        self.assertEqual(normalize_data([]).values().size, 0)

    def test_bare_number(self) -> None:
        self.assertEqual(normalize_data(4).values().tolist(), [4.0])

    def test_numpy_inputs(self) -> None:
        one_d = normalize_data(np.asarray([1, 2, 3], dtype=np.int64))
        self.assertEqual(one_d.values().tolist(), [1.0, 2.0, 3.0])
        two_d = normalize_data(np.asarray([[1.0, np.inf], [3.0, 4.0]]))
        self.assertEqual(len(two_d.series), 2)
        self.assertTrue(math.isnan(two_d.series[0].values()[1]))

    def test_three_dimensional_array_rejected(self) -> None:
        with self.assertRaises(PlotDataError):
            normalize_data(np.zeros((2, 2, 2)))

    def test_series_must_be_a_sequence(self) -> None:
        with self.assertRaises(PlotDataError):
            normalize_data({"series": 5})
        with self.assertRaises(PlotDataError):
            normalize_data({"series": [5]})

    def test_coerce_item_helpers(self) -> None:
        self.assertEqual(coerce_item({"value": {"x": 1, "y": 2}}), Point(x=1.0, y=2.0))
        self.assertEqual(coerce_item(True), Scalar(1.0))
        self.assertTrue(math.isnan(number_or_nan(object())))
        self.assertTrue(math.isnan(number_or_nan(float("-inf"))))

    def test_normalize_torch_tensor(self) -> None:
        try:
            import torch
        except Exception:
            self.skipTest("torch is not installed")

        data = normalize_data(torch.tensor([1, 2, 3], dtype=torch.int64))
        self.assertEqual(data.values().tolist(), [1.0, 2.0, 3.0])

    def test_normalize_pandas_inputs(self) -> None:
        try:
            import pandas as pd
        except Exception:
            self.skipTest("pandas is not installed")

        df = pd.DataFrame({"value": [1, 2, 3], "other": [4.0, None, 6.0], "label": ["a", "b", "c"]})
        data = normalize_data(df)
        self.assertEqual([s.name for s in data.series], ["value", "other"])
        self.assertEqual(data.series[0].values().tolist(), [1.0, 2.0, 3.0])
        self.assertTrue(math.isnan(data.series[1].values()[1]))

        series = normalize_data(pd.Series([5, 6]))
        self.assertEqual(series.values().tolist(), [5.0, 6.0])


if __name__ == "__main__":
    unittest.main()
