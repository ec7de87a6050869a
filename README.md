# traa

Pure-Python building blocks for screen capture tools: integer desktop
geometry, dirty-region bookkeeping, BGRA frame buffers, cursor pixel helpers,
BMP output and logging setup. No third-party dependencies.

## Modules

- `traa.errors` – `ErrorCode`, an `IntEnum` of the library's error codes, and
  `TraaError`, an exception carrying a `code` and a `message`.
- `traa.types` – plain data types: frozen `Size`, `Point` and `Rect`; the enums
  `DeviceType`, `DeviceSlot`, `DeviceOrientation`, `DeviceState`, `DeviceEvent`,
  `ScreenCapturerId` and `LogLevel`; the `ScreenSourceFlags` flag set;
  `DeviceInfo` and `ScreenSourceInfo`, whose text fields must stay under 256
  bytes in UTF-8 (a `ValueError` otherwise); and the configuration records
  `LogConfig`, `EventHandler` and `Config`.
- `traa.geometry` – `DesktopVector`, `DesktopSize` and `DesktopRect`. Rectangles
  have exclusive right and bottom edges and support `contains`,
  `intersect_with` (an empty result becomes all zeros), `union_with`,
  `translate`, `extend` and `scale`, plus conversion to the `traa.types` values.
- `traa.scaling` – `calc_scaled_size(source, dest)` shrinks `source`, keeping its
  aspect, until its area fits the area of `dest`; dimensions come out even.
  A source that already fits is returned as is; any zero dimension gives
  `DesktopSize(0, 0)`.
- `traa.region` – `DesktopRegion`, a set of pixels stored as rows of horizontal
  spans, with `add_rect`, `add_rects`, `add_region`, `intersect`,
  `intersect_with`, `subtract`, `translate`, `swap`, `copy` and `clear`.
  Iterating a region yields non-overlapping `DesktopRect`s that cover it.
- `traa.frame` – `DesktopFrame`, a 4-byte-per-pixel BGRA frame over a writable
  buffer, with pixel copies between buffers and frames
  (`copy_pixels_from`, `copy_pixels_from_frame`,
  `copy_intersecting_pixels_from`), frame-info copying, and black checks;
  `BasicDesktopFrame`, which owns a zero-filled `bytearray`; and
  `SharedMemory` / `SharedMemoryFactory` for externally supplied buffers.
- `traa.mouse_cursor` – `MouseCursor`, an optional image frame and a hotspot,
  with `MouseCursor.copy_of` for a deep copy.
- `traa.pixels` – helpers on 32-bit pixel lists: `rgba`, `combine_mask` (rebuilds
  transparency from a monochrome mask), `add_cursor_outline`, `alpha_mul`,
  `has_alpha_channel`; and `encode_bmp` / `dump_bmp` for writing tightly packed
  BGRA data as a top-down 32-bit BMP.
- `traa.folder` – path string helpers (`get_filename`, `get_directory`,
  `get_file_extension`, `is_directory`, `append_filename`) and folders
  (`get_current_folder` – the folder of the running Python executable,
  `get_config_folder`, `get_temp_folder`, `create_folder`).
- `traa.logger` – `set_log_file(filename, max_size, max_files)` sends the `traa`
  logger to stdout and to a rotating `traa.log` in the given folder (or the
  folder of a given file, or the user's config folder) and returns the log
  file's path; `set_level`, `get_level`, `to_logging_level` and `get_logger`
  map `LogLevel` onto the standard `logging` module.

## Install

```
pip install .
```

## Example

```python
from traa.frame import BasicDesktopFrame
from traa.geometry import DesktopRect, DesktopSize
from traa.pixels import dump_bmp
from traa.region import DesktopRegion
from traa.scaling import calc_scaled_size

region = DesktopRegion([DesktopRect.make_xywh(0, 0, 10, 10)])
region.add_rect(DesktopRect.make_xywh(5, 5, 10, 10))
for rect in region:
    print(rect)

frame = BasicDesktopFrame(DesktopSize(4, 4))
print(frame.frame_data_is_black())   # True
dump_bmp(frame.data, frame.size, "black.bmp")

print(calc_scaled_size(DesktopSize(1920, 1080), DesktopSize(320, 180)))
```

## What this package does not do

It does not capture the screen, enumerate screens, windows or devices, read
cursors or icons from the system, or produce thumbnails. `ScreenSourceInfo`,
`DeviceInfo`, `EventHandler` and `Config` are data records only; nothing in
the package fills them in or calls the callbacks. There is no command-line
program.

## Tests

```
pip install .[test]
pytest
```