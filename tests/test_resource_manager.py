import pytest

from litegame.resource_manager import ResourceManager
from litegame.types import Model, Texture


class CountingModelLoader:
    def __init__(self):
        self.calls = []

    def load_from_obj(self, path):
        self.calls.append(path)
        return Model(name=path)


class FailingModelLoader:
    def __init__(self):
        self.calls = 0

    def load_from_obj(self, path):
        self.calls += 1
        raise OSError("boom")


class CountingTextureLoader:
    def __init__(self):
        self.calls = []

    def load_from_file(self, path):
        self.calls.append(path)
        return Texture(width=1, height=1, channels=4, pixels=b"\xff" * 4, name=path)


class FailingTextureLoader:
    def load_from_file(self, path):
        raise ValueError("bad image")


def test_load_model_caches_by_path():
    loader = CountingModelLoader()
    manager = ResourceManager(model_loader=loader)
    first = manager.load_model("a.obj")
    second = manager.load_model("a.obj")
    assert first is second
    assert loader.calls == ["a.obj"]


def test_get_model_only_returns_loaded():
    manager = ResourceManager(model_loader=CountingModelLoader())
    assert manager.get_model("a.obj") is None
    loaded = manager.load_model("a.obj")
    assert manager.get_model("a.obj") is loaded


def test_failed_model_load_returns_none_and_is_not_cached():
    loader = FailingModelLoader()
    manager = ResourceManager(model_loader=loader)
    assert manager.load_model("x.obj") is None
    assert manager.load_model("x.obj") is None
    assert loader.calls == 2
    assert manager.get_model("x.obj") is None


def test_load_texture_caches_by_path():
    loader = CountingTextureLoader()
    manager = ResourceManager(texture_loader=loader)
    first = manager.load_texture("t.png")
    assert manager.load_texture("t.png") is first
    assert manager.get_texture("t.png") is first
    assert loader.calls == ["t.png"]


def test_failed_texture_load_returns_none():
    manager = ResourceManager(texture_loader=FailingTextureLoader())
    assert manager.load_texture("t.png") is None
    assert manager.get_texture("t.png") is None


def test_shutdown_clears_caches_and_loaders():
    manager = ResourceManager(CountingModelLoader(), CountingTextureLoader())
    manager.load_model("a.obj")
    manager.load_texture("t.png")
    manager.shutdown()
    assert manager.get_model("a.obj") is None
    assert manager.get_texture("t.png") is None
    assert manager.model_loader is None
    assert manager.texture_loader is None


def test_missing_loader_raises():
    manager = ResourceManager()
    with pytest.raises(RuntimeError):
        manager.load_model("a.obj")
    with pytest.raises(RuntimeError):
        manager.load_texture("t.png")


def test_set_loaders_replace_previous():
    manager = ResourceManager(model_loader=FailingModelLoader())
    replacement = CountingModelLoader()
    manager.set_model_loader(replacement)
    model = manager.load_model("b.obj")
    assert model.name == "b.obj"
    assert replacement.calls == ["b.obj"]


def test_init_installs_default_loaders(tmp_path):
    obj_path = tmp_path / "tri.obj"
    obj_path.write_text("v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 3\n")
    manager = ResourceManager()
    assert manager.init() is True
    model = manager.load_model(str(obj_path))
    assert model.name == str(obj_path)
    assert len(model.meshes[0].indices) == 3
    assert manager.load_texture(str(tmp_path / "missing.png")) is None