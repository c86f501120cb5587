from pathlib import Path

from rbfinterp.tests.__main__ import find_test_dir


def test_find_test_dir_points_at_this_directory():
    # None when rbfinterp is imported from an installed copy instead of the checkout.
    assert find_test_dir() in (None, Path(__file__).resolve().parent)
