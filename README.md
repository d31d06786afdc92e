# thorkit

Small, independent building blocks for 2D games and interactive programs.
The package is pure Python and has no third-party dependencies.

## Modules

- `thorkit.random`: `MultiplyWithCarry`, a seedable 32-bit generator, and
  the module-level helpers that use a global engine seeded from the current
  time. `random_int(low, high)` returns an integer in the closed range
  `[low, high]`. `random_float(low, high)` returns a float in `[low, high)`.
  `random_dev(middle, deviation)` returns a float within `deviation` of
  `middle`. `set_random_seed(seed)` reseeds the global engine. Invalid ranges
  raise `ValueError`.
- `thorkit.stopwatch`: `StopWatch` and `Timer`. Both can be paused and
  resumed. Each takes an optional clock callable and uses `time.monotonic` if
  none is given. A `StopWatch` exposes `elapsed` and `running`. A `Timer`
  exposes `remaining`, `running` and `expired`. `Timer.reset(limit)` and
  `Timer.restart(limit)` require a positive limit.
- `thorkit.algorithms`: `equivalent`, `binary_search` (returns an index or
  `None`), `erase_unordered`, `remove`, `remove_if`, and the hashing helpers
  `hash_value`, `hash_combine`, `hash_range` and `pair_hash`.
- `thorkit.graphics`: the immutable value types `Color` (RGBA, 0–255 per
  channel), `Vector2` and `IntRect`, plus `to_string`, which formats any of
  them as text, for example `(255,255,255,255)`.
- `thorkit.input_names`: the enums `Key`, `MouseButton` and `JoystickAxis`.
  The functions `key_to_string`, `mouse_button_to_string` and
  `joystick_axis_to_string` turn a value into its name. The functions
  `to_keyboard_key`, `to_mouse_button` and `to_joystick_axis` turn a name
  back into a value. Unknown values or names raise `StringConversionError`.
- `thorkit.joystick`: a fluent builder for joystick conditions, for example
  `joystick(0).button(3)` or `joystick(0).axis(JoystickAxis.X).above(30.0)`.
- `thorkit.connection`: `ListenerSequence`, `ListenerMap` and `EventSystem`
  store listeners. Each returns a `Connection` when a listener is added.
  `Connection.disconnect()` removes that listener again, and
  `Connection.is_connected()` reports whether it is still registered.
  `id_connection` builds a connection that removes an item by its `id` from a
  list.
- `thorkit.loaders`: `ResourceLoader` pairs a loading function with an
  identifying string. `make_resource_loader` and the factories `from_file`,
  `from_memory`, `from_stream`, `from_samples`, `from_pixels`, `from_color`
  and `from_image` each create an object with a factory you supply, then call
  the matching method on it (`load_from_file`, `load_from_memory`,
  `load_from_stream`, `load_from_samples`, `create` or `load_from_image`).
- `thorkit.resource_holder`: `ResourceHolder` stores loaded resources under
  IDs.
  - `KnownIdStrategy` decides what `acquire` does with an ID that is already
    in use: `ASSUME_NEW`, `REUSE` or `RELOAD`.
  - `Ownership.CENTRAL_OWNER` keeps resources until they are released.
  - `Ownership.REF_COUNTED` keeps only weak references. A resource is dropped
    once nothing else refers to it.
- `thorkit.animations`:
  - `FadeAnimation(in_ratio, out_ratio)` sets the alpha of an object. The
    object must have either a `set_alpha` method or a `color` attribute.
  - `FrameAnimation` collects frames with relative durations and returns them
    normalised so that the durations sum to one.
- `thorkit.particles`:
  - `Particle`, with the lifetime helpers `elapsed_lifetime`,
    `total_lifetime`, `remaining_lifetime`, `elapsed_ratio`,
    `remaining_ratio` and `abandon_particle`.
  - `UniversalEmitter`, whose `particle_*` attributes each hold a constant or
    a zero-argument callable.
  - `ParticleSystem`, which runs emitters and affectors (either may have a
    limited lifetime) and computes the `Vertex` quads of its particles.
- `thorkit.shapes`: `ConvexShape` and the factories `line`, `rounded_rect`,
  `polygon` and `star`.

All errors specific to the package derive from `thorkit.exceptions.ThorError`.
These are `FunctionCallError`, `ResourceLoadingError`, `ResourceAccessError`
and `StringConversionError`.

## Installation

```
pip install thorkit
```

## Examples

Timers and events:

```python
from thorkit.stopwatch import Timer
from thorkit.connection import EventSystem

timer = Timer()
timer.restart(2.0)          # counts down from two seconds

events = EventSystem()
connection = events.connect("jump", lambda event: print("jumped"))
events.trigger_event("jump")  # prints "jumped"
connection.disconnect()
events.trigger_event("jump")  # nothing happens
```

Resources:

```python
from thorkit.loaders import ResourceLoader
from thorkit.resource_holder import ResourceHolder, KnownIdStrategy

holder = ResourceHolder()
stats = ResourceLoader(lambda: {"hp": 10}, "stats")
holder.acquire("player", stats)
holder.acquire("player", stats, KnownIdStrategy.REUSE)  # returns the stored dict
holder["player"]["hp"]                                  # 10
holder.release("player")
```

Particles:

```python
from thorkit.graphics import Vector2
from thorkit.particles import ParticleSystem, UniversalEmitter
from thorkit.random import random_float

system = ParticleSystem()
system.set_texture((32, 32))

emitter = UniversalEmitter()
emitter.emission_rate = 30.0
emitter.particle_lifetime = 2.0
emitter.particle_velocity = lambda: Vector2(random_float(-50.0, 50.0), -100.0)
system.add_emitter(emitter)

system.update(0.1)
vertices = system.vertices()   # four vertices per living particle
```

## What the package does not do

The package opens no windows and draws nothing. `ParticleSystem.vertices()`
and the shape factories return plain data for you to hand to whatever
renderer you use. It does not read keyboard, mouse or joystick state or poll
events. `thorkit.input_names` and `thorkit.joystick` only name and describe
inputs. The `from_*` loaders do not read files themselves. They call the
loading methods of the objects your factory creates.

## Running the tests

```
pip install thorkit[test]
pytest
```