# crtscene

An interactive 3D scene drawn with OpenGL 3.3 through pyglet. The scene holds a
unit sphere at the origin and a floor quad just below it. Each frame goes
through three passes:

1. a depth-only pass from a directional light renders into a 1024×1024 shadow
   map, using the `shadow` shader;
2. the scene is drawn into an off-screen colour texture with the `scene`
   shader, which is given the camera matrices and position, light direction
   and colours (`u_light.*`), the light-space and biased light-space matrices,
   fog settings (`u_fog.*`) and the shadow map on texture unit 1;
3. that texture is drawn to the window on a full-screen quad with the `crt`
   shader, which is given brightness, vignette, curvature, resolution and
   scanline settings.

## Installing

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Running

```
crtscene
```

The command takes no options apart from `--help`. It opens a resizable
1280×720 window and runs until the window is closed or Escape is pressed.

Shaders are read from `resources/shaders/`, relative to the working directory.
Every file below that directory, in subdirectories too, is taken as part of a
pair that shares a name: `<name>.vert` and `<name>.frag`. The shader is
registered under `<name>`. Rendering needs three of them: `shadow`, `scene`
and `crt`. Asking for a shader that was not loaded logs an error and raises
`KeyError`. Compile and link errors are logged.

Log entries are printed to the terminal in colour. Each entry is also written,
with all earlier entries of the run, as a JSON array to
`.cache/logs/<day-month-year_hour-minute-second>.log`. The directory is not
created for you: if `.cache/logs` does not exist, nothing is written to disk.
Debug entries are skipped when Python runs with `-O`.

## Controls

| Input              | Action                                  |
|--------------------|-----------------------------------------|
| `W` / `S`          | move forward / backward                 |
| `A` / `D`          | move left / right                       |
| `Space`            | move up                                 |
| `Left Shift`       | move down                               |
| mouse              | look around                             |
| scroll wheel       | zoom (field of view between 1° and 90°) |
| `E`                | capture or release the mouse cursor     |
| `Escape`           | quit                                    |

## Using the pieces

The building blocks can also be used on their own, without a window:

```python
from crtscene.colour import ansi_foreground_from_hex, high_precision_rgb
from crtscene.aabb import AABB
from crtscene.sphere import Sphere
from crtscene.logger import info

print(ansi_foreground_from_hex("#89b4fa") + "hello\033[0m")
print(high_precision_rgb((178.0, 178.0, 178.0)))

box = AABB(0.0, 0.0, 0.0, 2.0)
print(box.collide(Sphere(3.0, 1.0, 1.0)))  # True: the sphere touches the box

info("Loaded {} shaders", 3)
```

- `crtscene.linalg`: `perspective`, `look_at`, `ortho`, `translate`, `scale`
  and `normalize`, returning numpy 4×4 matrices in row-major layout.
- `crtscene.transform`: `Transform`, `angle_axis`, `quaternion_multiply` and
  `quaternion_to_matrix`, with quaternions ordered `(w, x, y, z)`.
- `crtscene.mesh`: `Mesh`, `Vertex` and `Topology`; vertices and indices can
  be built without a GL context, while `upload` and `render` need one.
- `crtscene.camera`: `Camera` and `Direction`.
- `crtscene.shader`: `Shader`; made without paths it builds no program but
  still records the uniforms set on it in `uniforms`.
- `crtscene.files`, `crtscene.clock` and `crtscene.randomness`: small file,
  date and random-number helpers.

## What it does not include

No shader sources ship with the package. The `shadow`, `scene` and `crt`
vertex and fragment shaders have to be supplied in `resources/shaders/`; the
lighting, shadowing, fog and CRT effects are whatever those shaders do with
the uniforms listed above. Without them the window opens but the first frame
fails with `KeyError`.

## Tests

```
pytest
```