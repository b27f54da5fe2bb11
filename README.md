# steelmc

Building blocks for a block-game server, usable on their own as a library.
The package has no dependencies outside the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `steelmc.vector`

- `Vector2(x, y)` and `Vector3(x, y, z)` are frozen dataclasses with
  `add`, `add_raw`, `sub`, `multiply` and `length_squared`.
- `Vector3` also has `sub_raw`, `horizontal_length_squared`, `lerp`, `sign`
  (each component as -1, 0 or 1), `squared_distance_to`,
  `squared_distance_to_vec`, `is_within_bounds`, `length`,
  `horizontal_length`, `normalize` and the class method
  `rotation_vector(pitch, yaw)` (angles in degrees). `v + w` adds two vectors
  and `v * s` scales one.
- `Vector3.from_tuple` / `to_tuple` convert to and from 3-tuples;
  `Vector3.from_sequence` reads exactly three numbers and raises `ValueError`
  otherwise.
- `to_f64` converts components to floats; `to_i32` and `to_vec2_i32` round
  halves away from zero and clamp into the 32-bit signed range (NaN becomes 0).
- `Axis` is an enum of `X`, `Y`, `Z`; `as_str()` gives `"x"`, `"y"` or `"z"`.

### `steelmc.types`

- `BlockStateId(value)` — a 16-bit block state id; out-of-range values raise
  `ValueError`.
- `ChunkPos(pos)` wraps a `Vector2`, `BlockPos(pos)` wraps a `Vector3`;
  `to_block_pos(vector)` rounds a vector to a `BlockPos`.
- `ResourceLocation(namespace, path)` — `ResourceLocation.vanilla(path)` uses
  the `minecraft` namespace, `ResourceLocation.parse("ns:path")` validates and
  raises `ValueError` on bad input, and `str()` gives `namespace:path`. The
  static methods `validate`, `validate_namespace`, `validate_path`,
  `valid_namespace_char` and `valid_path_char` check the allowed characters.

### `steelmc.front_vec`

`FrontVec(reserve, capacity=0)` is a byte buffer with `reserve` free bytes at
the front. `push`, `extend` and `write` append; `set_in_front(data)` fills the
reserved space directly before the current content (raising `ValueError` with
"Not enough reserved space" if it does not fit). Each call to `set_in_front`
goes before the previous one. `bytes(fv)`, `len(fv)`, indexing, slicing and
item assignment all work on the visible content; `front_space` tells how much
reserve is left.

### `steelmc.locks`

`SteelRwLock(value)` is an asyncio readers-writer lock that owns its value.
`async with lock.read() as value:` gives shared access; `async with
lock.write() as guard:` gives exclusive access, and assigning `guard.value`
replaces the stored value. Waiting writers keep new readers out.

### `steelmc.text`

- `steelmc.text.color` — `RGBColor` (serialized as `#RRGGBB`), `ARGBColor`
  (serialized as a list of four bytes, read back with `ARGBColor.from_json`),
  the `NamedColor` enum with `NamedColor.from_name`, and `ResetColor.RESET`.
  `color_from_json` accepts `"reset"`, `"#RRGGBB"` or a colour name;
  `color_to_json` writes the reset colour as `None`.
- `steelmc.text.click` — `OpenUrl`, `OpenFile`, `RunCommand`,
  `SuggestCommand`, `ChangePage` and `CopyToClipboard`, converted with
  `click_event_to_json` / `click_event_from_json` as objects tagged by
  `action`.
- `steelmc.text.locale` — the `Locale` enum; `Locale.parse` is
  case-insensitive and falls back to `Locale.EN_US` for unknown codes.
- `steelmc.text.component` — `Style`, the content kinds `Text`, `Translate`,
  `EntityNames`, `Keybind` and `Custom`, the hover events `ShowText`,
  `ShowItem` and `ShowEntity` (with `show_text`, `show_entity`,
  `hover_event_to_json` and `hover_event_from_json`), `TextComponentBase` and
  `TextComponent`. `TextComponent.text(...)` and
  `TextComponent.translate(key, with_)` build components; `to_json` /
  `from_json` convert them to and from JSON-ready dicts. `Custom` content is
  server-side only and raises `ValueError` when serialized.

### `steelmc.section`

- `PalettedContainer(size, value)` is a `size`³ cube stored as one value while
  all cells agree and as a full cube with a counting palette once they differ.
  `get(x, y, z)`, `set(x, y, z, value)` (returns the old value),
  `from_cube(size, cube)` (indexed `cube[y][z][x]`), `is_homogeneous`,
  `palette`, `size` and `volume`. Coordinates outside the cube raise
  `IndexError`.
- `block_palette(value)` makes a 16×16×16 container.
- `SubChunk(block_states)` and `ChunkSections(sections, min_y)` with
  `get_relative_block` (returns `None` above the top section) and
  `set_relative_block` (raises `IndexError` there).

### `steelmc.level`

`Level` maps `ChunkPos` to `ChunkData`, each behind a `SteelRwLock`.
`insert_chunk` raises `KeyError` if the position is already loaded;
`get_chunk` returns the lock or `None`. `len()` and `in` are supported.

### `steelmc.auth`

- `is_valid_player_name(name)` — 3 to 16 ASCII letters, digits or underscores.
- `offline_uuid(username)` — a UUID from the first 16 bytes of the name's
  SHA-256.
- `server_hash(secret_key, public_key_der)` — SHA-1 of both, as a signed
  hexadecimal number.
- `authentication_url(username, server_hash)` — the session-server query URL.
- `AuthError` and its subclasses `FailedResponse`, `UnverifiedUsername`,
  `Banned`, `DisallowedAction`, `FailedParse`, `UnknownStatusCode(status)` and
  `TextureError(reason)` (with constructors such as
  `TextureError.invalid_url()`).

## Example

```python
from steelmc.types import ResourceLocation
from steelmc.text.component import TextComponent
from steelmc.section import PalettedContainer
from steelmc.auth import is_valid_player_name, offline_uuid

loc = ResourceLocation.parse("minecraft:stone")
print(str(loc))                       # minecraft:stone

msg = TextComponent.text("Hello")
print(msg.to_json())                  # {'text': 'Hello'}

palette = PalettedContainer(16, 0)
palette.set(1, 2, 3, 7)
print(palette.get(1, 2, 3))           # 7

print(is_valid_player_name("Steve"))  # True
print(offline_uuid("Steve"))
```

## What this package does not do

This is a library, not a running server. It has no command, opens no network
socket, does not read or write the packet protocol, loads no configuration
file and generates no encryption keys. `steelmc.auth` builds the
session-server URL and the server hash, but makes no HTTP request itself.
There is no block, item or data-component registry, and no world generation
or chunk storage on disk.