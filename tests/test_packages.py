"""Tests for the package layout."""

import models
import repositories


def test_package_markers_do_not_re_export():
    assert not hasattr(models, "User")
    assert not hasattr(models, "PropertySearchOptions")
    assert not hasattr(repositories, "UserRepository")
    assert not hasattr(repositories, "PropertyRepository")
