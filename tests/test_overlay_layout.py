import dataclasses

import numpy as np

from frame_timing.overlay_layout import (
    Label,
    dial_center,
    graph_points,
    needle_endpoint,
    overlay_labels,
)
from frame_timing.simulation import TimingSimulation


def test_dial_center_matches_overlay_size() -> None:
    assert dial_center() == (120, 80)


def test_needle_points_up_and_rotates_clockwise() -> None:
    center = (120, 80)
    assert needle_endpoint(center, 50, 0) == (120, 30)
    assert needle_endpoint(center, 50, 90) == (170, 80)
    assert needle_endpoint(center, 50, 180) == (120, 130)
    assert needle_endpoint(center, 50, 270) == (70, 80)


def test_graph_points_without_samples_stay_on_baseline() -> None:
    points = graph_points(np.zeros(120), highest=0.0)
    assert points.shape == (120, 2)
    assert points[:, 0].tolist() == list(range(0, 240, 2))
    assert (points[:, 1] == 239).all()


def test_graph_points_scale_by_highest_delta() -> None:
    history = np.zeros(120)
    history[-1] = 0.02
    history[-2] = 0.01
    points = graph_points(history, highest=0.02)
    assert tuple(points[-1]) == (238, 179)
    assert tuple(points[-2]) == (236, 209)
    assert tuple(points[0]) == (0, 239)


def test_graph_points_clamp_values_above_highest() -> None:
    points = graph_points([0.5, 2.0], highest=1.0, width=10, height=100, graph_height=20)
    assert points.tolist() == [[0, 89], [5, 79]]


def test_graph_points_empty_history() -> None:
    assert graph_points([], highest=1.0).shape == (0, 2)


def test_overlay_labels_text_and_anchors() -> None:
    snap = dataclasses.replace(
        TimingSimulation().snapshot(),
        tick_count=5,
        render_count=12,
        elapsed_seconds=1.5,
        highest_delta=0.0166,
        last_delta=0.0083,
        angle_degrees=7.0,
        degree_budget=0.00123,
    )
    labels = overlay_labels(snap)
    assert labels[0] == Label("Ticks: 5     ", 1, 1, "left_top")
    assert labels[1] == Label("Draws: 12    ", 1, 10, "left_top")
    assert labels[2] == Label("Secs:  1.50", 239, 1, "right_top")
    assert labels[3] == Label("Highest: 0.0166", 1, 176, "left_bottom")
    assert labels[4] == Label("Delta: 0.0083", 239, 176, "right_bottom")
    assert labels[5] == Label("0.0012", 174, 79, "left_bottom")
    assert labels[6] == Label("  7 deg", 174, 81, "left_top")
