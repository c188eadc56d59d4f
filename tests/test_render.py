"""Tests for the matplotlib renderer (headless)."""

import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest
from nbody_sim.physics.simulator import SimulationEngine
from nbody_sim.render.renderer_2d import Renderer2D, trail_segments


def test_trail_segments():
    assert trail_segments(np.zeros((0, 2))).shape == (0, 2, 2)
    assert trail_segments(np.zeros((1, 2))).shape == (0, 2, 2)

    points = np.array([[0.0, 0.0], [1.0, 0.0], [1.0, 1.0]])
    segments = trail_segments(points)
    assert segments.shape == (2, 2, 2)
    assert np.allclose(segments[1], [[1.0, 0.0], [1.0, 1.0]])


def test_render_and_capture():
    engine = SimulationEngine()
    engine.load_scenario(3)
    for _ in range(5):
        engine.update(0.05)
    positions = [body.position.copy() for body in engine.bodies]

    renderer = Renderer2D(figsize=(4, 4), dpi=50, interactive=False)
    try:
        renderer.render(engine)
        frame = renderer.capture_frame()
        assert frame.shape == (200, 200, 3)
        assert frame.dtype == np.uint8
    finally:
        renderer.close()

    # Rendering only reads engine state
    for body, position in zip(engine.bodies, positions):
        assert np.array_equal(body.position, position)
    assert renderer.fig is None


def test_render_empty_engine():
    engine = SimulationEngine()
    renderer = Renderer2D(figsize=(2, 2), dpi=50, interactive=False)
    try:
        renderer.render(engine)
        assert renderer.capture_frame().shape == (100, 100, 3)
    finally:
        renderer.close()


def test_capture_before_render_fails():
    with pytest.raises(RuntimeError):
        Renderer2D(interactive=False).capture_frame()
