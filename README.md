# babylon

A small game engine skeleton built on pygame. It opens a 640×480 window
titled "SDL2 Window" and fills it with black every frame until the window is
closed. The package also contains a thread-safe logger, per-user data paths,
typed configuration values and a way to list the connected displays.

## Installation

```
pip install .
```

To install the test dependencies as well, run `pip install .[test]`.

## Command line

```
babylon            # open the game window
babylon --help     # show usage
babylon --version  # show name, version and author
```

`-h` and `-v` are the short forms. If either option is given, the program
prints its text and exits with status 0 without opening a window.
`--version` prints:

```
Babylon v0.1.1
Written by: BabylonDev
```

Every run, including `--help` and `--version`, first creates the per-user
data directory (chosen by `platformdirs`), prints the root and config paths,
and points the logger at a `.log` file in that directory, which is opened for
appending. If the window cannot be created, the command prints
`Failed to initialize game` to standard error and exits with status 1.

## Library use

### `babylon.utilities`

```python
from babylon.utilities import argv_join, path_join

path_join("dir/", "/file", "/")     # "dir/file"
path_join("dir", "file", "/")       # "dir/file"
path_join("", "file", "/")          # "file"
argv_join(["a", "b", "c"], ",", 1)  # "b,c"
argv_join(["a"], ",", 5)            # ""
```

`path_join` raises `ValueError` when either part is `None` or the separator
is empty.

### `babylon.logger`

```python
from babylon.logger import LoggerLevel, get_logger, level_name

log = get_logger()
log.init(None, "game.log", LoggerLevel.DEBUG, None)
log.info("started %s\n", "babylon")
log.set_level(LoggerLevel.WARN)
log.set_format("%s %s %s %s")
log.destroy()

level_name(LoggerLevel.ERROR)  # "ERROR"
level_name(42)                 # "UNKNOWN"
```

`get_logger()` returns one logger shared by the whole process. It sets itself
up on first use, writing to standard output at level `INFO`. A line is built
from a `%`-style format that receives the time (`HH:MM:SS`), the level name,
the calling file and the message; the default format is
`"%s - [%s:%s]: %s"` and adds no newline, so messages carry their own `\n`.
The console stream must be `sys.stdout` or `sys.stderr`; anything else falls
back to standard output. An invalid level is reported on standard error and
does not raise. Lines of 1152 characters or more are truncated with a warning.
`is_fully_initialized()` is true only when a log file is open.

### `babylon.constants`

```python
from babylon.constants import GAME_NAME, GAME_VERSION, init_paths

paths = init_paths()          # or init_paths("/some/dir")
paths.root                    # root directory, ending with a separator
paths.config                  # root + "config"
```

`init_paths` creates the root directory if it is missing and prints both
paths.

### `babylon.config`

```python
from babylon.config import Config, ConfigEntry, ConfigType

entry = ConfigEntry("volume", Config(ConfigType.FLOAT, 0.1))
entry.config.value  # stored with single precision
```

`Config` checks its value against its type: `TypeError` for a value of the
wrong type, `ValueError` for an `INT` outside the 32-bit signed range.

### `babylon.monitor`

```python
from babylon.monitor import get_all_monitors

for monitor in get_all_monitors():
    print(monitor.id, monitor.name, monitor.size, monitor.has_bounds)
```

Displays are named `Monitor 0`, `Monitor 1`, and so on. If the video system
cannot start, the function prints the error and returns an empty list.

### `babylon.game`

```python
from babylon.game import Game, GameInitError

with Game() as game:
    game.run()
```

`Game.init` raises `GameInitError` when the video system or the window cannot
be set up. `Game.run` raises `RuntimeError` if the game was not initialized.

## What this package does not do

- There is no gameplay: the window only shows a black frame.
- Configuration values exist only in memory. There is no configuration file
  reading or writing and no lookup table of entries; nothing is stored at the
  `config` path that `init_paths` returns.
- Display names are generic; the system's own display names are not reported.

## Tests

```
pytest
```