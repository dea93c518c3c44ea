import point_sets


def test_package_surface():
    for name in point_sets.__all__:
        assert hasattr(point_sets, name)


def test_both_implementations_share_the_contract():
    for cls in (point_sets.OrderedPointSet, point_sets.KdPointSet):
        assert issubclass(cls, point_sets.PointSet)
        point_set = cls([point_sets.Point(x=1, y=1)])
        assert point_set.nearest(point_sets.Point(x=0, y=0)) == point_sets.Point(x=1, y=1)
