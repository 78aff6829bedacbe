# filmvert

Building blocks for a tool that inverts scanned film negatives. Images are
NumPy arrays; the package provides:

- **Resizing** (`filmvert.lancir`): a Lanczos-3 resizer for images of 1 to 4
  channels, shaped height x width or height x width x channels. Inputs and
  outputs may be `uint8`, `uint16`, `uint32` (treated as 16-bit), `float32`
  or `float64`. Integer values are scaled by their full range and float
  values use 0 to 1; integer output is rounded and clamped, float output is
  not. `LancirResizer.resize_image` keeps its filter banks between calls and
  accepts explicit steps (`kx`, `ky`) and offsets (`ox`, `oy`); `resize` is a
  one-call shortcut with automatic, centred steps.
  The lower-level pieces are `filmvert.lancir_filters` (`ResizeFilters`,
  `SineGenerator`) and `filmvert.lancir_scanline` (`ResizeScanline`,
  `ResizePosition`, `pad_scanline`, `resize_scanline`).
- **Grading parameters** (`filmvert.render_params.RenderParams`): image size,
  bypass flags, temperature, tint, base colour, black and white points, and
  lift, gain, multiplier, offset and gamma, each colour value a 4-tuple.
  Negative sizes and vectors without four components raise `ValueError`.
- **Shader support** (`filmvert.shader_builder`): the vertex shader
  (`VERTEX_SOURCE`), the grading fragment shader with a display function of
  your choosing (`fragment_source`), the value of every uniform for a
  `RenderParams` (`uniform_values`), the size of a scaled proxy texture
  (`proxy_size`) and a full-screen quad (`quad_geometry`).
- **Render status** (`filmvert.gpu_status`): `GpuStatus` holds the first error
  reported since the last `clear()`; `RenderTimer` records a render time in
  milliseconds and the matching frames per second.
- **File dialogs** (`filmvert.dialogs`): `show_file_open_dialog` and
  `show_folder_selection_dialog` run `zenity` and return the chosen paths as a
  list; the list is empty if the dialog is cancelled or `zenity` cannot be
  started. `parse_dialog_output` and `split_selection` turn dialog output into
  paths.

## Installation

```
pip install .
```

## Examples

```python
import numpy as np
from filmvert.lancir import resize

image = np.random.default_rng(0).random((400, 600, 4), dtype=np.float32)
small = resize(image, 150, 100)               # new width, new height
print(small.shape, small.dtype)               # (100, 150, 4) float32

as_bytes = resize(image, 150, 100, output_dtype=np.uint8)
print(as_bytes.dtype)                         # uint8
```

```python
from filmvert.render_params import RenderParams
from filmvert.shader_builder import fragment_source, proxy_size, uniform_values

params = RenderParams(width=6000, height=4000, temp=0.2)
source = fragment_source("displayTransform")  # shader calls displayTransform(pixel)
uniforms = uniform_values(params)
print(uniforms["G_temp"], uniforms["bypass"])  # 0.2 0
print(proxy_size(6000, 4000, 0.25))            # (1500, 1000)
```

```python
from filmvert.gpu_status import GpuStatus, RenderTimer

status = GpuStatus()
status.record("Render", 0x502, "invalid operation")
print(status.message)                          # Error with Render: invalid operation

timer = RenderTimer()
timer.record(40)
print(timer.fps)                               # 25.0
```

## What the package does not do

- It does not run the shaders. There is no OpenGL context, texture handling
  or drawing; `filmvert.shader_builder` only produces sources, uniform
  values and geometry for a renderer you supply.
- It has no colour-management transform of its own: the display function
  named in `fragment_source` must come from elsewhere.
- It does not apply the grade to NumPy pixels, compute image histograms, or
  queue render jobs.
- It has no command-line program and no graphical interface, and it does not
  read or write image files.

## Tests

```
pip install .[test]
pytest
```