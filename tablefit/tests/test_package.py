# tablefit/tests/test_package.py
"""Tests for the top-level tablefit import surface."""

import inspect

import tablefit


class TestPackageImports:
    """Tests that the public names work when imported from the package."""

    def test_align_submodule_not_shadowed(self):
        """tablefit.align stays the module after the package re-exports."""
        assert inspect.ismodule(tablefit.align)
        assert tablefit.align.between is tablefit.between

    def test_render_through_package(self):
        table = tablefit.Table([
            ["Title", "Artist", "Year"],
            ["Once in a Lifetime", "Talking Heads", "1981"],
        ], 25)
        table.set_priorities([2, 0, 1])
        table.set_surround(True)
        table.set_alignment(tablefit.Align.RIGHT)
        assert table.render() == [
            "              Title Year ",
            " Once in a Lifetime 1981 ",
        ]

    def test_render_blank_rows_through_package(self):
        assert tablefit.Table([[], []], 3).render() == ["   ", "   "]

    def test_public_names(self):
        for name in tablefit.__all__:
            assert hasattr(tablefit, name)
