from litegame.types import AudioClip, Mesh, Model, Texture, Vertex


def test_vertex_defaults_are_zero():
    vertex = Vertex()
    assert vertex.position == (0.0, 0.0, 0.0)
    assert vertex.normal == (0.0, 0.0, 0.0)
    assert vertex.tex_coord == (0.0, 0.0)


def test_vertex_keeps_given_values():
    vertex = Vertex(position=(1.0, 2.0, 3.0), normal=(0.0, 1.0, 0.0), tex_coord=(0.5, 0.25))
    assert vertex.position == (1.0, 2.0, 3.0)
    assert vertex.normal == (0.0, 1.0, 0.0)
    assert vertex.tex_coord == (0.5, 0.25)


def test_mesh_lists_are_not_shared():
    first = Mesh()
    second = Mesh()
    first.vertices.append(Vertex())
    first.indices.append(0)
    assert second.vertices == []
    assert second.indices == []
    assert len(first.vertices) == 1


def test_model_equality_follows_contents():
    mesh = Mesh(vertices=[Vertex(position=(1.0, 0.0, 0.0))], indices=[0])
    model_a = Model(name="box", meshes=[mesh])
    model_b = Model(name="box", meshes=[Mesh(vertices=[Vertex(position=(1.0, 0.0, 0.0))], indices=[0])])
    assert model_a == model_b
    model_b.meshes[0].indices.append(0)
    assert model_a != model_b
    assert model_a.meshes[0].indices == [0]


def test_texture_keeps_fields():
    pixels = bytes(range(12))
    texture = Texture(width=2, height=2, channels=3, pixels=pixels, name="tile.png")
    assert (texture.width, texture.height, texture.channels) == (2, 2, 3)
    assert texture.pixels == pixels
    assert texture.name == "tile.png"


def test_audio_clip_defaults():
    clip = AudioClip()
    assert clip.buffer_id == 0
    assert clip.duration == 0.0
    assert clip.path == ""