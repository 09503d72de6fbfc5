"""Tests for the DataSet holder: dimension invariant, ownership and updates."""

import numpy as np
import pytest
from scipy import sparse

from spatialstatpy.core.dataset import DataSet, check_unweighted
from spatialstatpy.core.getis_ord import GetisOrd
from spatialstatpy.core.moran import Moran
from spatialstatpy.errors import (
    DimensionMismatch,
    SpatialStatError,
    WeightingNotImplementedError,
)


class TestConstruction:
    """Tests for DataSet construction."""

    def test_basic(self, chain_data, path_locality):
        """Test construction with matching dimensions."""
        ds = DataSet(chain_data, path_locality)
        assert len(ds) == 10
        assert ds.mean == pytest.approx(0.4)

    @pytest.mark.parametrize("cls", [DataSet, GetisOrd, Moran])
    def test_dimension_mismatch(self, cls):
        """Test data length differing from locality size raises."""
        with pytest.raises(DimensionMismatch, match="data length mismatch"):
            cls(np.zeros(4), np.zeros((5, 5)))

    def test_non_square_locality(self):
        """Test rectangular locality raises."""
        with pytest.raises(DimensionMismatch):
            DataSet(np.zeros(4), np.zeros((4, 5)))

    def test_locality_not_2d(self):
        """Test 1-D locality raises."""
        with pytest.raises(DimensionMismatch, match="2-D"):
            DataSet(np.zeros(4), np.zeros(4))

    def test_data_not_1d(self):
        """Test 2-D data raises."""
        with pytest.raises(DimensionMismatch, match="one-dimensional"):
            DataSet(np.zeros((2, 2)), np.zeros((2, 2)))

    def test_error_hierarchy(self):
        """Test errors are catchable as ValueError / NotImplementedError."""
        assert issubclass(DimensionMismatch, ValueError)
        assert issubclass(DimensionMismatch, SpatialStatError)
        assert issubclass(WeightingNotImplementedError, NotImplementedError)

    @pytest.mark.parametrize("cls", [GetisOrd, Moran])
    def test_weighted_rejected(self, cls, chain_data, path_locality):
        """Test non-empty observation weights raise."""
        with pytest.raises(WeightingNotImplementedError):
            cls(chain_data, path_locality, weights=np.ones(10))

    def test_empty_weights_accepted(self, chain_data, path_locality):
        """Test empty weights are treated as unweighted."""
        ds = DataSet(chain_data, path_locality, weights=[])
        assert len(ds) == 10
        check_unweighted(None)

    def test_copies_inputs(self, chain_data, path_locality):
        """Test the holder does not alias caller storage."""
        ds = DataSet(chain_data, path_locality)
        chain_data[:] = 5.0
        path_locality[:] = 7.0

        assert ds.data[0] == 0.0
        assert ds.locality[0, 0] == 0.0
        assert ds.mean == pytest.approx(0.4)

    def test_properties_are_copies(self, chain_data, path_locality):
        """Test returned arrays can be modified without affecting state."""
        ds = DataSet(chain_data, path_locality)
        ds.data[:] = 9.0
        ds.locality[:] = 9.0

        assert np.array_equal(ds.data, chain_data)
        assert np.array_equal(ds.locality, path_locality)

    def test_sparse_locality(self, chain_data, path_locality):
        """Test sparse localities are densified."""
        ds = DataSet(chain_data, sparse.csr_matrix(path_locality))
        assert isinstance(ds.locality, np.ndarray)
        assert np.array_equal(ds.locality, path_locality)

    def test_nested_list_locality(self):
        """Test nested sequences are accepted."""
        ds = DataSet([1, 2], [[0, 1], [1, 0]])
        assert ds.locality.dtype == np.float64

    def test_lazy_locality(self, grid_locality, euclid_locality):
        """Test element-addressable localities are materialized."""
        ds = DataSet(np.zeros(100), euclid_locality)
        assert np.allclose(ds.locality, grid_locality)


class TestMutation:
    """Tests for set_data, set_locality and reset."""

    def test_set_data(self, chain_data, path_locality):
        """Test set_data replaces data and recomputes the mean."""
        ds = DataSet(chain_data, path_locality)
        ds.set_data(np.ones(10))
        assert ds.mean == 1.0
        assert np.all(ds.data == 1.0)

    def test_set_data_mismatch_unchanged(self, chain_data, path_locality):
        """Test rejected set_data leaves state unchanged."""
        ds = DataSet(chain_data, path_locality)
        with pytest.raises(DimensionMismatch):
            ds.set_data(np.ones(9))
        assert np.array_equal(ds.data, chain_data)
        assert ds.mean == pytest.approx(0.4)

    def test_set_locality(self, chain_data, path_locality, window_locality):
        """Test set_locality replaces weights without touching moments."""
        g = GetisOrd(chain_data, path_locality)
        mean, s = g.mean, g.s
        g.set_locality(window_locality)

        assert np.array_equal(g.locality, window_locality)
        assert g.mean == mean
        assert g.s == s

    def test_set_locality_mismatch_unchanged(self, chain_data, path_locality):
        """Test rejected set_locality leaves state unchanged."""
        ds = DataSet(chain_data, path_locality)
        with pytest.raises(DimensionMismatch):
            ds.set_locality(np.ones((11, 11)))
        assert np.array_equal(ds.locality, path_locality)

    def test_reset_neither_is_noop(self, chain_data, path_locality):
        """Test reset with no arguments changes nothing."""
        m = Moran(chain_data, path_locality)
        before = m.I()
        m.reset()
        assert m.I() == before

    def test_reset_both_grow(self):
        """Test reset can change n when both fields are supplied."""
        ds = DataSet(np.arange(3.0), np.zeros((3, 3)))
        ds.reset(np.arange(5.0), np.ones((5, 5)))
        assert len(ds) == 5
        assert ds.mean == 2.0

    def test_reset_data_only_mismatch(self, chain_data, path_locality):
        """Test reset validates new data against the held locality."""
        ds = DataSet(chain_data, path_locality)
        with pytest.raises(DimensionMismatch):
            ds.reset(data=np.ones(5))
        assert np.array_equal(ds.data, chain_data)

    def test_reset_rejected_combination_unchanged(self, chain_data, path_locality):
        """Test a rejected combined reset touches neither field."""
        m = Moran(chain_data, path_locality)
        i_before = m.I()

        with pytest.raises(DimensionMismatch):
            m.reset(np.ones(10), np.ones((9, 9)))

        assert np.array_equal(m.data, chain_data)
        assert np.array_equal(m.locality, path_locality)
        assert m.I() == i_before

    def test_reset_locality_only(self, chain_data, path_locality, window_locality):
        """Test reset with only locality keeps data and moments."""
        g = GetisOrd(chain_data, path_locality)
        g.reset(locality=window_locality)
        assert np.array_equal(g.locality, window_locality)
        assert g.s == pytest.approx(0.24)

    def test_reset_data_recomputes_moments(self, chain_data, path_locality):
        """Test reset with data recomputes mean and s."""
        g = GetisOrd(chain_data, path_locality)
        g.reset(data=np.arange(10.0))
        assert g.mean == pytest.approx(4.5)
        assert g.s == pytest.approx(8.25)

    def test_set_data_and_locality_copy_inputs(self, chain_data, path_locality, window_locality):
        """Test mutating caller arrays after set_data/set_locality has no effect."""
        m = Moran(chain_data, path_locality)
        x = np.arange(10.0)
        W = window_locality.copy()
        m.set_data(x)
        m.set_locality(W)
        expected = m.result()

        x[:] = 0.0
        W[:] = 1.0

        assert m.result() == expected
        assert np.array_equal(m.data, np.arange(10.0))
        assert np.array_equal(m.locality, window_locality)

    def test_reset_copies_inputs(self, chain_data, path_locality, window_locality):
        """Test mutating caller arrays after reset has no effect."""
        g = GetisOrd(np.zeros(10), path_locality)
        x = chain_data.copy()
        W = window_locality.copy()
        g.reset(x, W)
        expected = [g.gstar(i) for i in range(10)]
        mean, s = g.mean, g.s

        x[:] = 5.0
        W[0, :] = 0.0

        assert [g.gstar(i) for i in range(10)] == expected
        assert (g.mean, g.s) == (mean, s)

    def test_rejected_data_keeps_cached_moments(self, chain_data, window_locality):
        """Test rejected set_data and reset leave mean and s untouched."""
        g = GetisOrd(chain_data, window_locality)
        mean, s = g.mean, g.s
        before = g.gstar(4)

        with pytest.raises(DimensionMismatch):
            g.set_data(np.ones(9))
        with pytest.raises(DimensionMismatch):
            g.reset(data=np.ones(9))

        assert g.mean == mean
        assert g.s == s
        assert g.gstar(4) == before
