# starlight

Building blocks for a story-driven terminal console game. The player sits
at a retro-futuristic system prompt, logs into accounts, discovers station
devices and opens a remote link to a mobile station. All game state is kept
in small files written in a typed, line-oriented JSON dialect. Each entry
sits on its own line, and a trailing comment names its type: `// string`,
`// int`, `// bool`, `// array-string`, `// array-object` or `// object`.

The package has no dependencies outside the standard library.

## Modules

- `starlight.document` holds `Document`, the in-memory form of a save file.
  It keeps separate dictionaries for strings, ints, bools, string arrays,
  object arrays and objects. Its typed accessors are `get_str`/`set_str`,
  `get_int`/`set_int`, `get_bool`/`set_bool` and
  `get_str_array`/`set_str_array`. `Document.from_template(kind)` builds
  one of the built-in templates: `"account"`, `"glv"` (global variables),
  `"ban_ip"`, `"devices"` and `"user_d"`. Any other name raises
  `UnknownTemplateError`. The module also defines the key names used by
  those templates, such as `GLV_USERNAME` and `ACC_IS_ADMIN`.
- `starlight.writer` flattens a document into `(key, value, kind)` entries
  with `gen_json_raw`, in the order strings, ints, bools, string arrays,
  object arrays, objects. `convert_json` renders those entries as lines,
  and `write_json` and `conandwrite` write them to a file. An entry with an
  unknown type tag raises `UnknownEntryTypeError`. Smaller helpers are
  `str_to_arr`, `str_to_obj`, `convert_arr_str`, `convert_arr_obj`,
  `convert_json_obj` and `gen_json`.
- `starlight.reader` parses the format back. `read_json_raw` reads a file
  up to its first empty line. `read_json_str` and `read_json` return a
  `Document`. The helpers are `find_key`, `find_val`, `rconvert_arr` and
  `read_obj_str`. Input it cannot parse raises `JsonReadError`.
- `starlight.paths` holds `ConfigPaths`, which resolves the directories
  under `Console_Config` and creates them on demand: `glv_path`,
  `temp_path`, `log_path`, `users_path` and `ensure_all`. Each time it has
  to create a directory, it prints a notice. Its root is the current
  directory unless you pass one. `load_globals` reads the global variables
  file.
- `starlight.log` covers the command log. `log_add` appends a
  `[LOG] <user> executed '<command>'` entry to the stored log. `log_end`
  writes the log to a dated file such as `log-3_7_2024.txt` (see
  `log_file_name`) and then resets the stored log.
- `starlight.prompts` reads input. `read_line` reads one line and logs it.
  `run_input_func` runs the `string(...)`, `file(...)`, `integer(...)` and
  `config(...)` input functions and returns an `InputResult`.
  `parse_file_input` turns `file(name)` into a path.
- `starlight.intro` prints the start-up banners. `intro(version)` chooses
  the banner for the version and returns the global variables with that
  version applied. `paradox()` prints a paradox notice.
- `starlight.devices` generates random device identifiers with `gen_o2`,
  `gen_factory`, `gen_control_panel`, `gen_power_plant` and `gen_cameras`.
  `gen_ids` prints the discovered devices and saves them to
  `devices.json`. Each function accepts a `random.Random` so that results
  can be reproduced.
- `starlight.login` runs the login dialogue: `login`, `new_acc`,
  `check_password` (which allows up to three retries), `do_user_input_login`
  and `re_enter_username`. Input comes through an `ask(prompt)` callable,
  which reads from standard input by default.
- `starlight.connect` holds `connecting`, which runs the remote-link
  dialogue. It offers the login dialogue when no user is logged in.

## Example

```python
from pathlib import Path

from starlight.document import Document
from starlight.reader import read_json
from starlight.writer import conandwrite

account = Document.from_template("account")
account.set_str("Username", "kikai_fan")
conandwrite(account, Path("kikai_fan.json"))

loaded = read_json(Path("kikai_fan.json"))
print(loaded.get_str("Username"))   # kikai_fan
print(loaded.get_bool("is_admin"))  # False
```

The file written above looks like this:

```
{
"Username": "kikai_fan", // string
"Password": "", // string
"status": "user", // string
"is_admin": 0, // bool
"locked": 0// bool
}
```

## What it does not do

The package provides the pieces of the game but not the game loop. It
installs no command to start the console. There is no interactive prompt
that reads commands and dispatches them to these functions. To play, you
call the functions from your own code.

## Running the tests

Install the package with its `test` extra. Then run `pytest` from the
project directory.