# odatrek

A small game window, built on pygame. It opens a resizable 1280×720 window
titled "Test window" and redraws it continuously. Each frame fills the
window with a colour that cycles through the rainbow every two seconds. The
hue is taken in the Okhsv colour space at saturation 0.75 and value 1.0, so
the brightness looks even all the way round. Press Escape or close the
window to quit.

While it runs, each frame's rate is logged at INFO level. Logging goes to a
file in `./logs` under the current directory. The file is named from the
start time as `SSMMHH_DDMMYYYY.log`. When the game exits, that log is
compressed to `<name>.log.xz` and the plain file is removed. Older `.xz`
archives in the directory are pruned.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Running

```
odatrek
```

The command takes no options apart from `-h`/`--help`. It writes INFO and
above to the log file and prints ERROR and above to standard output. It
prints `Window Created` when the window opens, or `No windows sorry` if it
cannot open one. On a normal exit it prints `Exited`. If pygame raises an
error, the command prints that error and exits with status 1.

## Using the pieces

### The logger

`odatrek.logger.OdatrekLogger` is a `logging.Handler`. Creating one makes
the log directory if it is missing and opens the timestamped log file.

```python
import logging
from odatrek.logger import OdatrekLogger

handler = OdatrekLogger("./logs", logging.INFO, logging.ERROR)
logging.getLogger().addHandler(handler)
logging.getLogger().setLevel(logging.DEBUG)

logging.info("written to the file only")
logging.error("written to the file and printed to the console")

archive = handler.stow_log(None, None)   # defaults: keep 10 archives, xz preset 9
handler.close()
```

- `file_log_level` sets the lowest level written to the file. When it is
  `None`, every record is written.
- `console_log_level` sets the lowest level printed to standard output.
  When it is `None`, only errors and above are printed. Each printed record
  is followed by a blank line.
- `enabled(level)` tells whether a record of that level goes to the file.
- `path` and `archive_path` give the log file and the archive it will be
  stowed to.

`stow_log(max_xz_logs, compress_level)` does the following:

1. It flushes the log.
2. It deletes existing `.xz` files in the log directory, smallest name
   first, until at most `max_xz_logs` will remain with the new archive
   counted. The limit is at least 1.
3. It compresses the log to xz with a CRC32 check at preset
   `compress_level`, which must be from 0 to 9.
4. It deletes the plain log file and returns the archive's path.

Once the log is stowed, the handler writes no more records to a file.
Calling `stow_log` a second time raises `RuntimeError`.

### Colours

`odatrek.color` has no pygame dependency:

```python
from odatrek.color import okhsv_to_srgb, rainbow_hue

hue = rainbow_hue(500_000)          # 90.0 degrees, a quarter of the way round
red, green, blue = okhsv_to_srgb(hue, 0.75, 1.0)
```

`okhsv_to_srgb` takes the hue in degrees and the saturation and value in
0..1. It returns gamma-encoded sRGB components. A value of 0 or below gives
black.

### Graphics and the game loop

`odatrek.graphics.GraphicsState` wraps a pygame surface:

- `render()` fills the surface with the current rainbow colour, flips the
  display if one is open, and returns the microseconds since the previous
  frame.
- `resize(new_size)` records a new size.

`odatrek.graphics.frames_per_second(frame_time_us)` turns a frame time in
microseconds into the rate as it is logged. The rate is rounded to three
decimal places, and the result is infinite for a frame time of zero or
less.

`odatrek.game.OdatrekGame` handles the window's events, and its `run()`
drives the event loop. `odatrek.game.main` is the `odatrek` command.

## What it does not do

The window shows only the cycling clear colour. Nothing else is drawn, and
the only input handled is Escape and closing the window. There is no game
logic, no menu and no saved state.