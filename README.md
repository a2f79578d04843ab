# litegame

A small game framework built around an entity-component system, written so that it
can be driven entirely without a window. It provides:

- **Resources** (`litegame.types`, `litegame.filesystem`, `litegame.model_loader`,
  `litegame.texture_loader`, `litegame.resource_manager`): `Vertex`, `Mesh`, `Model`,
  `Texture` and `AudioClip` data types, a `FileSystem` that resolves paths against an
  optional base directory, a Wavefront OBJ loader (`ModelLoader`, `parse_obj`), an
  image loader (`TextureLoader`, using Pillow) and a caching `ResourceManager`.
- **Entities and components** (`litegame.ecs`): frozen `Entity` handles and an
  `EntityManager` that keeps one component map per component type.
- **Camera maths** (`litegame.camera`): `CameraComponent` and the `look_at` and
  `perspective` helpers that build 4×4 numpy view and projection matrices.
- **Systems** (`litegame.systems`): a `CameraSystem` that keeps camera matrices in step
  with the window size and hands the main camera's matrices to the renderer, and a
  `RenderSystem` that draws every entity carrying a `RenderComponent` with a model.
- **Core** (`litegame.world`, `litegame.scene`, `litegame.game_loop`, `litegame.game`):
  `ECSWorld`, `Scene`, `SceneManager`, a fixed-step `GameLoop` at 60 updates per second,
  and a `Game` that wires everything together from a JSON `Config` (`litegame.config`).

Windowing, timing and drawing are abstract base classes in `litegame.interfaces`
(`Window`, `Platform`, `Clock`, `Renderer`), bundled together in a `PlatformEnv`.

## Loading resources

```python
from litegame.filesystem import FileSystem
from litegame.model_loader import ModelLoader
from litegame.texture_loader import TextureLoader
from litegame.resource_manager import ResourceManager

files = FileSystem("assets")
resources = ResourceManager(ModelLoader(files), TextureLoader())

teapot = resources.load_model("models/teapot.obj")   # parsed once, then cached
same = resources.get_model("models/teapot.obj")       # cache lookup only
missing = resources.load_model("models/nowhere.obj")  # None; the failure is logged
```

`ResourceManager.init()` installs a default `ModelLoader` and `TextureLoader`;
`shutdown()` clears both caches and drops the loaders. Calling `load_model` or
`load_texture` with no loader set raises `RuntimeError`.

`FileSystem` joins relative paths onto its base path with `/`; with an empty base path
they are used as given. Its read methods raise `FileSystemError` (an `OSError`) when a
file cannot be opened.

OBJ parsing keeps `v`, `vt`, `vn` and `f` lines and ignores the rest. Faces with more
than three vertices are split into a triangle fan, faces with fewer than three are
skipped, and identical face elements (`1/2/3`, `1//3`, `1`) share one vertex. The whole
file becomes a single `Mesh` in a `Model` named after the path. An index that cannot be
parsed or is out of range raises `ValueError`.

`TextureLoader.load_from_file` returns a `Texture` with 1 to 4 byte channels per pixel
(grey, grey+alpha, RGB or RGBA), rows flipped so the first row is the bottom of the
image. Unreadable images raise `TextureLoadError`.

## Entities and components

```python
from litegame.ecs import EntityManager
from litegame.camera import CameraComponent
from litegame.systems import MainCameraTag, RenderComponent

entities = EntityManager()

teapot_entity = entities.create_entity()
entities.add_component(teapot_entity, RenderComponent(model=teapot))

camera_entity = entities.create_entity()
entities.add_component(camera_entity, CameraComponent())
entities.add_component(camera_entity, MainCameraTag())

camera = entities.get_component(camera_entity, CameraComponent)
camera.update_matrices()
```

Entity ids start at 1 and increase with each `create_entity` call. Components are
stored by their type; adding a second component of the same type replaces the first.
`get_component` raises `KeyError` when the entity has no component of that type, and
`component_map(type)` returns the live `{entity_id: component}` dictionary.

`CameraComponent.fov` is in degrees; matrices transform column vectors in a
right-handed system with clip-space depth from -1 to 1.

## Running a game

`Game` takes a factory, called as `env_factory(platform_type, width, height, title)`,
that returns a `PlatformEnv` holding a platform, a clock and a renderer you provide,
plus an optional `ResourceManager`:

```python
from litegame.game import Game

game = Game(env_factory, resources)
if game.init("config.json"):
    game.world.add_component(game.world.entity_manager.create_entity(), CameraComponent())
    game.run()
game.shutdown()
```

`init` returns `False` if the environment is incomplete or the renderer fails to
initialise. It then creates the initial scene (with its `RenderSystem` and
`CameraSystem`), the loop, and calls `resources.init()`. `config_path` defaults to
`../config.json`.

The configuration file is JSON:

```json
{
  "window": {"width": 1280, "height": 720, "title": "Game"},
  "platform": "OpenGL"
}
```

Defaults are a 1280×720 window titled "Game" on `PlatformType.OPENGL`. A missing file
or invalid JSON leaves all defaults. Fields are read in the order width, height,
title, platform; a missing or mistyped field stops reading there, keeping the values
already read. Any platform string other than `"OpenGL"` gives `PlatformType.UNKNOWN`.

The loop runs until `Platform.should_exit()` is true. Each frame it adds the elapsed
clock time to an accumulator, runs `update` once per whole 1/60 s step in it, then calls
`render` with the leftover fraction of a step and polls the platform's events.

Progress and warnings are reported through the standard `logging` module.

## What the package does not do

There is no concrete window, clock or renderer: nothing opens a window or draws on
screen, and no GPU back end is included. The `PlatformEnv` passed to `Game` must be
supplied by the caller, built from your own subclasses of `Window`, `Platform`, `Clock`
and `Renderer`. `AudioClip` is a data type only; there is no audio loading or playback.
There is no command-line program.

## Tests

The test suite uses pytest and is installed with the `test` extra.