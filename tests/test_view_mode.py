import pytest

from logistic_explorer.classifier import ParameterPair
from logistic_explorer.graph_engine import Overlay
from logistic_explorer.view_mode import ViewMode, coerce_view_mode


@pytest.mark.parametrize(
    "value, expected",
    [
        ("sigmoid", ViewMode.SIGMOID),
        ("Threshold", ViewMode.THRESHOLD),
        (" threshold ", ViewMode.THRESHOLD),
        (ViewMode.THRESHOLD, ViewMode.THRESHOLD),
        ("bogus", ViewMode.SIGMOID),
        (None, ViewMode.SIGMOID),
    ],
)
def test_coerce_view_mode(value, expected):
    assert coerce_view_mode(value) is expected


def test_threshold_mode_pins_points_and_swaps_layers(controller, surface):
    controller.set_mode(ViewMode.THRESHOLD)

    assert {y for _, y in surface.points(Overlay.CLASS_0)} == {0}
    assert {y for _, y in surface.points(Overlay.CLASS_1)} == {0}
    assert not surface.is_visible(Overlay.CURVE)
    assert not surface.is_visible(Overlay.REFERENCE_LINE)
    assert not surface.is_visible(Overlay.BOUNDARY)
    assert surface.is_visible(Overlay.MARKER)


def test_sigmoid_mode_places_points_at_their_class(controller, surface):
    controller.set_mode(ViewMode.THRESHOLD)
    controller.set_mode(ViewMode.SIGMOID)

    assert {y for _, y in surface.points(Overlay.CLASS_0)} == {0}
    assert {y for _, y in surface.points(Overlay.CLASS_1)} == {1}
    assert surface.is_visible(Overlay.CURVE)
    assert surface.is_visible(Overlay.REFERENCE_LINE)
    assert surface.is_visible(Overlay.BOUNDARY)
    assert not surface.is_visible(Overlay.MARKER)


def test_switching_modes_does_not_change_counts(controller, context):
    context.show_parameters(ParameterPair(slope=1.0, intercept=-5.0))
    context.redraw()
    before = context.counts

    controller.set_mode(ViewMode.THRESHOLD)
    in_threshold = context.counts
    controller.set_mode(ViewMode.SIGMOID)

    assert before == in_threshold == context.counts
    assert before.total == len(context.dataset)


def test_switching_clears_curve_and_marker_but_keeps_boundary(controller, context, surface):
    context.show_parameters(ParameterPair(slope=2.0, intercept=-6.0))
    context.redraw()
    assert surface.points(Overlay.CURVE)

    controller.set_mode(ViewMode.THRESHOLD)

    assert surface.points(Overlay.CURVE) == []
    assert surface.points(Overlay.MARKER) == []
    assert surface.points(Overlay.BOUNDARY) == [(3.0, -0.05), (3.0, 1.05)]
    assert context.x0 == 3.0


def test_quadrant_labels_only_in_sigmoid_mode(controller, context, surface):
    context.show_parameters(ParameterPair(slope=1.0, intercept=-5.0))
    context.redraw()
    assert [label.text for label in surface.annotations()] == ["FN: 1", "TN: 1", "TP: 2", "FP: 1"]

    controller.set_mode(ViewMode.THRESHOLD)
    assert surface.annotations() == []

    controller.set_mode(ViewMode.SIGMOID)
    assert len(surface.annotations()) == 4


def test_reference_line_spans_padded_range(context, surface):
    assert surface.points(Overlay.REFERENCE_LINE) == [
        pytest.approx((0.3, 0.5)),
        pytest.approx((8.7, 0.5)),
    ]
