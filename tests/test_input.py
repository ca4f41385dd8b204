import pygame
import pytest

from mandelbrot.config import ExplorerConfig
from mandelbrot.input import InputController
from mandelbrot.viewport import RenderState, ViewportController


@pytest.fixture
def controller():
    controller = ViewportController(ExplorerConfig(), 100, 100)
    controller.refresh()
    return controller


@pytest.fixture
def inputs(controller):
    return InputController(controller)


def test_left_click_zooms_then_recenters(inputs, controller):
    event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(75, 25))
    assert inputs.handle_event(event)
    vp = controller.viewport
    assert vp.zoom_level == 1
    assert (vp.center_x, vp.center_y) == pytest.approx((0.5, 0.5))
    assert controller.state is RenderState.CALCULATING


def test_right_click_zooms_out_without_moving(inputs, controller):
    event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=(75, 25))
    assert inputs.handle_event(event)
    vp = controller.viewport
    assert vp.zoom_level == -1
    assert (vp.center_x, vp.center_y) == (0.0, 0.0)


def test_mouse_motion_updates_cursor_only(inputs, controller):
    event = pygame.event.Event(pygame.MOUSEMOTION, pos=(50, 50), rel=(1, 1), buttons=(0, 0, 0))
    assert inputs.handle_event(event)
    assert controller.cursor == pytest.approx((0.0, 0.0))
    assert controller.state is RenderState.DISPLAYING


@pytest.mark.parametrize("event", [
    pygame.event.Event(pygame.QUIT),
    pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE),
])
def test_quit_events(inputs, event):
    assert inputs.handle_events([event]) is False
    assert inputs.quit_requested


@pytest.mark.parametrize("event", [
    pygame.event.Event(pygame.KEYDOWN, key=pygame.K_r),
    pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=2, pos=(10, 10)),
    pygame.event.Event(pygame.MOUSEBUTTONUP, button=1, pos=(10, 10)),
])
def test_other_events_are_ignored(inputs, controller, event):
    before = controller.viewport
    assert inputs.handle_event(event) is False
    assert controller.viewport == before
    assert controller.state is RenderState.DISPLAYING
    assert not inputs.quit_requested


def test_batch_keeps_running(inputs, controller):
    events = [
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(50, 50)),
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(50, 50)),
    ]
    assert inputs.handle_events(events) is True
    assert controller.viewport.zoom_level == 2
