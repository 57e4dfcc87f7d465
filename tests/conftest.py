import pytest


SAMPLE_SCENE = """[
  { "type": "camera", "width": 2.0, "height": 2.0 },
  { "type": "sphere", "color": [255, 0, 0], "position": [0, 1, -5], "radius": 2 },
  { "type": "plane", "color": [0, 0, 255], "position": [0, 0, -10], "normal": [0, 0, 1] },
  { "type": "light", "color": [255, 255, 255], "position": [1, 3, 2],
    "radial-a0": 1.0, "radial-a1": 0.5, "radial-a2": 0.25 }
]
"""


@pytest.fixture
def sample_scene_text():
    return SAMPLE_SCENE


@pytest.fixture
def scene_path(tmp_path):
    """Write scene text to a temporary file and return its path."""
    def write(text=SAMPLE_SCENE, name="scene.json"):
        path = tmp_path / name
        path.write_text(text, encoding="latin-1")
        return path
    return write
