import calckit


def test_version_is_exposed():
    assert calckit.__version__
    assert calckit.__all__ == ["__version__"]
