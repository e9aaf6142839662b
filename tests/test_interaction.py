"""Tests for hit testing and the hover/click state transitions."""

from share_dashboard.data_model import (
    CalendarMonth,
    TimeSeriesPoint,
    Tooltip,
    TreemapLeaf,
)
from share_dashboard.interaction import (
    InteractionController,
    leaf_at,
    leaf_tooltip_text,
    nearest_point,
    point_tooltip_text,
)

LEAVES = [
    TreemapLeaf("Facebook", 65.0, 1, 1, 60, 99),
    TreemapLeaf("Twitter", 35.0, 61, 1, 99, 99),
]


class TestHitTests:
    """Tests for leaf_at and nearest_point."""

    def test_leaf_at(self):
        assert leaf_at(LEAVES, 30, 50).name == "Facebook"
        assert leaf_at(LEAVES, 80, 50).name == "Twitter"

    def test_padding_gap_hits_nothing(self):
        assert leaf_at(LEAVES, 60.5, 50) is None
        assert leaf_at(LEAVES, 0, 0) is None

    def test_nearest_point(self):
        assert nearest_point([10, 50, 90], [20, 20, 20], 52, 23) == 1

    def test_nearest_point_out_of_radius(self):
        assert nearest_point([10, 50], [20, 20], 30, 20, radius=8) is None

    def test_nearest_point_empty(self):
        assert nearest_point([], [], 0, 0) is None


class TestTooltipText:
    """Tests for tooltip formatting."""

    def test_leaf(self):
        assert leaf_tooltip_text(LEAVES[0]) == "Facebook\n65.00%"

    def test_point(self):
        point = TimeSeriesPoint(CalendarMonth(2009, 4), 12.345)
        assert point_tooltip_text(point) == "2009-04\n12.35%"


class TestInteractionController:
    """Tests for InteractionController."""

    def test_hover_leaf_shows_tooltip(self, state):
        interaction = InteractionController(state)
        interaction.hover_leaf(LEAVES[1], (70, 40))
        assert state.active_tooltip == Tooltip("Twitter\n35.00%", (80, 50))
        assert interaction.hovered == LEAVES[1]

    def test_move_follows_mouse(self, state):
        interaction = InteractionController(state)
        interaction.hover_leaf(LEAVES[0], (5, 5))
        interaction.move((20, 30))
        assert state.active_tooltip.anchor == (30, 40)
        assert state.active_tooltip.text == "Facebook\n65.00%"

    def test_move_without_tooltip_is_noop(self, state, recorder):
        interaction = InteractionController(state)
        interaction.move((20, 30))
        assert state.active_tooltip is None
        assert recorder == []

    def test_leave_hides_tooltip(self, state):
        interaction = InteractionController(state)
        interaction.hover_leaf(LEAVES[0], (5, 5))
        interaction.leave()
        assert state.active_tooltip is None
        assert interaction.hovered is None

    def test_hover_point(self, state):
        interaction = InteractionController(state)
        point = TimeSeriesPoint(CalendarMonth(2010, 1), 50.0)
        interaction.hover_point(point, (100, 100))
        assert state.active_tooltip.text == "2010-01\n50.00%"

    def test_click_selects_platform(self, state, recorder):
        interaction = InteractionController(state)
        interaction.click_leaf(LEAVES[1])
        interaction.click_leaf(LEAVES[1])
        assert state.selected_platform == "Twitter"
        assert recorder == ["selected_platform"]

    def test_click_changes_selection(self, state):
        interaction = InteractionController(state)
        interaction.click_leaf(LEAVES[0])
        interaction.click_leaf(LEAVES[1])
        assert state.selected_platform == "Twitter"
