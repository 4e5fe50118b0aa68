import pytest

from numlab.spline import natural_cubic_spline

XS = [0.0, 0.9, 1.8, 2.7, 3.6]
YS = [0.0, 0.36892, 0.85408, 1.7856, 6.3138]


@pytest.fixture
def spline():
    return natural_cubic_spline(XS, YS)


def test_interpolates_nodes(spline):
    for x, y in zip(XS, YS):
        assert spline(x) == pytest.approx(y, abs=1e-12)


def test_segment_count_and_bounds(spline):
    assert len(spline.segments) == len(XS) - 1
    assert [s.start for s in spline.segments] == XS[:-1]
    assert [s.stop for s in spline.segments] == XS[1:]


def test_smooth_at_interior_knots(spline):
    for left, right in zip(spline.segments, spline.segments[1:]):
        h = left.stop - left.start
        value = left.a + left.b * h + left.c * h ** 2 + left.d * h ** 3
        slope = left.b + 2 * left.c * h + 3 * left.d * h ** 2
        curvature = 2 * left.c + 6 * left.d * h
        assert value == pytest.approx(right.a, abs=1e-10)
        assert slope == pytest.approx(right.b, abs=1e-10)
        assert curvature == pytest.approx(2 * right.c, abs=1e-10)


def test_natural_end_conditions(spline):
    first, last = spline.segments[0], spline.segments[-1]
    h = last.stop - last.start
    assert first.c == 0.0
    assert 2 * last.c + 6 * last.d * h == pytest.approx(0.0, abs=1e-10)


def test_linear_data_gives_line():
    xs = [0.0, 1.0, 2.5, 4.0]
    line = natural_cubic_spline(xs, [2 * x - 1 for x in xs])
    for seg in line.segments:
        assert seg.c == pytest.approx(0.0, abs=1e-12)
        assert seg.d == pytest.approx(0.0, abs=1e-12)
    assert line(3.0) == pytest.approx(5.0)


def test_two_nodes_are_linear():
    s = natural_cubic_spline([1.0, 3.0], [2.0, 6.0])
    assert s(2.0) == pytest.approx(4.0)


def test_segment_index(spline):
    assert spline.segment_index(1.5) == 1
    assert spline.segment_index(0.9) == 1
    assert spline.segment_index(3.6) == len(spline.segments) - 1


def test_out_of_range(spline):
    with pytest.raises(ValueError):
        spline(-0.1)
    with pytest.raises(ValueError):
        spline(4.0)


def test_invalid_nodes():
    with pytest.raises(ValueError):
        natural_cubic_spline([0.0, 2.0, 1.0], [0.0, 1.0, 2.0])
    with pytest.raises(ValueError):
        natural_cubic_spline([0.0, 1.0], [0.0])
    with pytest.raises(ValueError):
        natural_cubic_spline([0.0], [0.0])