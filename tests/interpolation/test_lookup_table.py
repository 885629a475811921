"""Tests for the piecewise-linear lookup tables."""

import pytest

from takeoffperf.interpolation import LookupTable, VectorLookupTable


class TestLookupTable:
    """Test one-dimensional and nested scalar tables."""

    @pytest.fixture
    def t_max(self) -> LookupTable:
        """Tmax against pressure altitude."""
        return LookupTable([(-2000, 55), (0, 55), (9200, 38)])

    def test_exact_breakpoint(self, t_max: LookupTable) -> None:
        """Test a key on a breakpoint returns the sample."""
        assert t_max.get(0) == pytest.approx(55.0)
        assert t_max.get(9200) == pytest.approx(38.0)

    def test_interpolates_between_breakpoints(self, t_max: LookupTable) -> None:
        """Test linear interpolation between samples."""
        assert t_max.get(4600) == pytest.approx(46.5)

    def test_clamps_outside_domain(self, t_max: LookupTable) -> None:
        """Test keys beyond the domain return the boundary sample."""
        assert t_max.get(-5000) == pytest.approx(55.0)
        assert t_max.get(20000) == pytest.approx(38.0)

    def test_samples_in_any_order(self) -> None:
        """Test unsorted samples are accepted."""
        table = LookupTable([(10, 20), (0, 0), (5, 15)])
        assert table.get(2.5) == pytest.approx(7.5)
        assert table.get(7.5) == pytest.approx(17.5)

    def test_single_sample_is_constant(self) -> None:
        """Test a table with one sample returns it everywhere."""
        table = LookupTable([(100, 3.5)])
        assert table.get(-1e6) == pytest.approx(3.5)
        assert table.get(1e6) == pytest.approx(3.5)

    def test_returns_float(self, t_max: LookupTable) -> None:
        """Test scalar tables return plain floats."""
        assert type(t_max.get(1000)) is float


class TestNestedLookupTable:
    """Test tables with an outer and an inner key."""

    @pytest.fixture
    def table(self) -> LookupTable:
        """Two inner tables at outer keys 0 and 1000."""
        return LookupTable(
            [
                ((0, 100), 10),
                ((0, 200), 20),
                ((1000, 100), 30),
                ((1000, 200), 50),
            ]
        )

    def test_inner_interpolation(self, table: LookupTable) -> None:
        """Test interpolation on the inner key at an outer breakpoint."""
        assert table.get(0, 150) == pytest.approx(15.0)
        assert table.get(1000, 150) == pytest.approx(40.0)

    def test_blends_outer_key(self, table: LookupTable) -> None:
        """Test the two inner results are blended on the outer key."""
        # 15 at outer 0, 40 at outer 1000
        assert table.get(500, 150) == pytest.approx(27.5)

    def test_clamps_both_keys(self, table: LookupTable) -> None:
        """Test both keys clamp independently."""
        assert table.get(-500, 0) == pytest.approx(10.0)
        assert table.get(5000, 1000) == pytest.approx(50.0)

    def test_inner_tables_may_differ(self) -> None:
        """Test inner tables with different breakpoints."""
        table = LookupTable([((0, 0), 0), ((0, 10), 10), ((10, 5), 100)])
        assert table.get(10, 0) == pytest.approx(100.0)
        assert table.get(5, 10) == pytest.approx(55.0)

    def test_wrong_key_count(self, table: LookupTable) -> None:
        """Test a call with the wrong number of keys fails."""
        with pytest.raises(ValueError, match="expects 2 key"):
            table.get(500)

    def test_three_keys(self) -> None:
        """Test deeper nesting."""
        table = LookupTable(
            [
                ((0, 0, 0), 0),
                ((0, 0, 10), 10),
                ((10, 0, 0), 100),
                ((10, 0, 10), 110),
            ]
        )
        assert table.get(5, 0, 5) == pytest.approx(55.0)


class TestVectorLookupTable:
    """Test tables with vector outputs."""

    def test_interpolates_each_component(self) -> None:
        """Test every component is interpolated separately."""
        table = VectorLookupTable([(0, (1.0, 10.0)), (10, (2.0, 20.0))])
        assert table.get(5) == pytest.approx((1.5, 15.0))
        assert table.width == 2
        assert table.key_count == 1

    def test_clamps_vector(self) -> None:
        """Test vectors clamp at the domain boundary."""
        table = VectorLookupTable([(262_481, (15, 32.5)), (324_051, (15, 37))])
        assert table.get(0) == pytest.approx((15.0, 32.5))
        assert table.get(1e6) == pytest.approx((15.0, 37.0))

    def test_nested_vector(self) -> None:
        """Test nested vector tables blend per component."""
        table = VectorLookupTable(
            [
                ((0, 0), (0, 0)),
                ((0, 10), (10, 100)),
                ((10, 0), (20, 200)),
                ((10, 10), (30, 300)),
            ]
        )
        assert table.get(5, 5) == pytest.approx((15.0, 150.0))


class TestLookupTableValidation:
    """Test construction errors."""

    def test_empty(self) -> None:
        """Test an empty table is rejected."""
        with pytest.raises(ValueError, match="at least one sample"):
            LookupTable([])

    def test_duplicate_key(self) -> None:
        """Test a repeated key is rejected."""
        with pytest.raises(ValueError, match="strictly monotonic"):
            LookupTable([(0, 1), (0, 2)])

    def test_duplicate_inner_key(self) -> None:
        """Test a repeated inner key is rejected."""
        with pytest.raises(ValueError, match="strictly monotonic"):
            LookupTable([((0, 5), 1), ((0, 5), 2)])

    def test_ragged_vectors(self) -> None:
        """Test vectors of different widths are rejected."""
        with pytest.raises(ValueError, match="output width"):
            VectorLookupTable([(0, (1, 2)), (1, (1,))])

    def test_mixed_key_arity(self) -> None:
        """Test mixing scalar and tuple keys is rejected."""
        with pytest.raises(ValueError, match="key arity"):
            LookupTable([(0, 1), ((1, 2), 3)])

    def test_empty_vector(self) -> None:
        """Test zero-width outputs are rejected."""
        with pytest.raises(ValueError, match="at least one component"):
            VectorLookupTable([(0, ())])
