import pytest

from litegame.camera import CameraComponent
from litegame.interfaces import Renderer, Window
from litegame.scene import Scene, SceneManager
from litegame.systems import MainCameraTag, RenderComponent
from litegame.types import Model


class FakeWindow(Window):
    def make_context_current(self):
        pass

    def swap_buffers(self):
        pass

    def should_close(self):
        return False

    def poll_events(self):
        pass

    def shutdown(self):
        pass

    def get_size(self):
        return (800, 600)


class FakeRenderer(Renderer):
    def __init__(self):
        self.calls = []
        self.view = None

    def begin_frame(self):
        self.calls.append("begin")

    def end_frame(self):
        self.calls.append("end")

    def draw(self, model, texture=None):
        self.calls.append(("draw", model.name))

    def set_view_matrix(self, view, projection):
        self.view = (view, projection)

    def initialize(self):
        return True

    def shutdown(self):
        pass


def test_scene_world_before_init_raises():
    with pytest.raises(RuntimeError):
        _ = Scene().world


def test_scene_render_draws_models():
    renderer = FakeRenderer()
    scene = Scene()
    scene.init(FakeWindow(), renderer)
    entity = scene.world.entity_manager.create_entity()
    scene.world.add_component(entity, RenderComponent(model=Model(name="teapot")))
    scene.render(0.5)
    assert renderer.calls == ["begin", ("draw", "teapot"), "end"]


def test_scene_update_sets_camera_on_renderer():
    renderer = FakeRenderer()
    scene = Scene()
    scene.init(FakeWindow(), renderer)
    entity = scene.world.entity_manager.create_entity()
    camera = CameraComponent()
    scene.world.add_component(entity, camera)
    scene.world.add_component(entity, MainCameraTag())
    scene.update(0.016)
    assert renderer.view is not None
    assert renderer.view[0] is camera.view_matrix
    assert camera.aspect == pytest.approx(800 / 600)


def test_scene_init_uses_fresh_world():
    scene = Scene()
    scene.init(FakeWindow(), FakeRenderer())
    first = scene.world
    scene.init(FakeWindow(), FakeRenderer())
    assert scene.world is not first


def test_manager_without_scene_world_raises():
    with pytest.raises(RuntimeError):
        _ = SceneManager().world


def test_manager_without_scene_ignores_update_and_render():
    manager = SceneManager()
    manager.update(0.1)
    manager.render(0.5)
    assert manager.current_scene is None


def test_manager_forwards_render_to_loaded_scene():
    renderer = FakeRenderer()
    manager = SceneManager()
    manager.load_initial_scene(FakeWindow(), renderer)
    manager.render(0.0)
    assert renderer.calls == ["begin", "end"]
    assert manager.world is manager.current_scene.world