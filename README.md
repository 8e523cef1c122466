# vibevj

Data models and numeric building blocks for audio-reactive visuals, in plain
Python on top of numpy.

## What is in the package

- **`vibevj.analyzer`** – `hann_window(size)` and `AudioAnalyzer(fft_size=2048)`.
  `analyze(samples)` windows the first `fft_size` samples (zero-padding short
  blocks), runs an FFT and returns a `FrequencyData` holding the magnitudes of
  the first `fft_size // 2` bins. `analyze_bands(samples, sample_rate)` turns
  that into `FrequencyBands`.
- **`vibevj.frequency`** – `FrequencyData` (`magnitude_at`, `peak_bin`,
  `average`) and `FrequencyBands`, the average magnitude in seven ranges:
  sub-bass (20–60 Hz), bass (60–250), low-mid (250–500), mid (500–2000),
  high-mid (2000–4000), presence (4000–6000) and brilliance (6000–20000).
  `energy()`, `bass_energy()` and `treble_energy()` average groups of bands.
- **`vibevj.types`** – `Color` (with `WHITE`, `BLACK`, `RED`, `GREEN`, `BLUE`),
  `Transform`, `Rect` and `TimeInfo`.
- **`vibevj.linalg`** – 4x4 numpy matrices: `identity`, `translation`,
  `scaling`, `euler_xyz`, `scale_rotation_translation`, `look_at_rh`,
  `perspective_rh` (depth in [0, 1]) and `to_cols_array_2d`.
- **`vibevj.camera`** – `Camera` (view, projection and view-projection
  matrices) and `CameraUniform`, whose `to_bytes()` gives 64 bytes of
  little-endian f32 in column-major order.
- **`vibevj.mesh`** and **`vibevj.mesh_gen`** – `Vertex` (position, normal,
  uv, colour; 44 bytes packed) and `Mesh` (`cube`, `quad`, `vertex_bytes`,
  `index_bytes`, `copy`); generators `create_cube`, `create_sphere`,
  `create_plane` and `create_cylinder`.
- **`vibevj.material`** – `ShaderType`, `Material` (`unlit`,
  `emissive_material`, `to_dict`, `from_dict`) and `MaterialUniform` with a
  48-byte `to_bytes()`.
- **`vibevj.render_object`** – `RenderObject`, `ModelUniform`, the mesh specs
  `CubeMesh`, `SphereMesh`, `PlaneMesh`, `CylinderMesh` (dimensions in
  hundredths of a unit) and `RenderObjectDescriptor`, which serialises to and
  from plain dicts and builds a `RenderObject` with a
  translation · rotation · scale transform.
- **`vibevj.nodes`** – the scene-editor node graph: `Node`, `Socket`,
  `SocketType`, `Connection` and `NodeGraph`. Connections only go from an
  output to an input, and a new connection into an input replaces the old
  one. Pointer handling (`press_pointer`, `release_pointer`, `drag_node`)
  and `connection_curves` return Bézier polylines in screen space.
- **`vibevj.scene_editor`** – `SceneEditor` with three example nodes, panning,
  zoom clamped to 25 %–200 %, coordinate conversion and `grid_lines`.
- **`vibevj.panels`** and **`vibevj.app`** – `LeftPanel` (FPS),
  `CenterPanel` (preview, scene editor or sequencer), `RightPanel` (resource
  list with search) and `GuiApp`, which routes the render texture to the
  center panel in preview mode and to the left panel otherwise, tracks the
  chosen audio device and splits the window width 25 % / 60 % / 15 %.

Errors are subclasses of `vibevj.errors.VibeVJError`, for example
`SerializationError` for malformed dictionaries.

## What it does not do

The package holds state and computes data; it does not open windows, draw a
user interface, talk to a GPU or capture audio from a device. Texture ids
passed to the panels are opaque values, and byte buffers from `to_bytes()`
and `vertex_bytes()` are for whatever renderer you connect. There is no
command-line program.

## Installation

```
pip install vibevj
```

## Examples

```python
import numpy as np

from vibevj.analyzer import AudioAnalyzer

sample_rate = 44100
t = np.arange(2048) / sample_rate
samples = np.sin(2 * np.pi * 100 * t)

analyzer = AudioAnalyzer(2048)
bands = analyzer.analyze_bands(samples, sample_rate)
print(bands.bass_energy(), bands.treble_energy())
```

```python
from vibevj.mesh_gen import create_sphere

sphere = create_sphere(1.0, 16, 8)
print(len(sphere.vertices), len(sphere.indices))  # 153 768
```

```python
from vibevj.render_object import CubeMesh, RenderObjectDescriptor

descriptor = RenderObjectDescriptor(CubeMesh(size=100), position=(0.0, 1.0, 0.0))
obj = descriptor.create_object()
same = RenderObjectDescriptor.from_dict(descriptor.to_dict())
```

## Running the tests

```
pip install -e ".[test]"
pytest
```