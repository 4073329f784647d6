# multilaunch

multilaunch models a working session made of several programs that are
started together. Each program is placed on a scene as a node, carries a
start priority, and may be linked to a work file and a configuration file.
When the session starts, the programs are launched from the highest priority
to the lowest, each with its options and linked files on its command line,
and the programs recorded this way can be stopped again at the end of the
session.

The package has no dependencies outside the standard library.

## What is in the package

- `multilaunch.structures`: the records the rest of the package shares:
  `Kind`, `Rectangle`, `Font`, `Colors`, `SurfaceStyle`, `Symbol`,
  `LineStyle`, `AnchorStyle`, `PriorityStyle`, `SoftwareRecord`,
  `ContextObject`, `ContextLink`. Text fields are cut to their fixed sizes
  with `truncate_field`, which keeps the UTF-8 form under the field size.
- `multilaunch.element`: `Element` and `Surface`, rectangles placed by their
  centre, with bounds, hit testing (`contains`), contact points, dragging
  (`move`) and shifting (`shift`), and a symbol style (`apply_symbol`,
  `to_symbol`, `equals_symbol`).
- `multilaunch.connection`: `Connection`, the line between two surfaces, and
  `choose_sides`, which picks the sides a line leaves and enters by
  (`(100, 100)` when the two objects overlap).
- `multilaunch.scene`: `Scene`, which holds the items in order, finds them by
  kind (`of_kind`, `first_of_kind`) or position (`find_at`), handles
  `press`, `drag` and `release`, selection (`select_at`,
  `selected_software`), removal (`remove`, `unlist`, `clear`), `resize` and
  `center`.
- `multilaunch.configuration`: `Configuration`, the program records,
  priorities, line styles, linked-file styles and anchor style in use, with
  lookups such as `priority_value`, `priority_labels`, `software_classes`,
  `software_of_class`, `select_software` and `select_software_by_name`.
- `multilaunch.nodes`: `ActiveNode`, a surface that owns connections
  (`connect`, `find_connection`, `drop_anchor`,
  `transfer_anchor_connection`, `remove_connections`); `Anchor`, the
  temporary end of a link being drawn; `LinkedFile`, a work or configuration
  file attached to a program.
- `multilaunch.software`: `Software`, a program on the scene drawn with the
  symbol of its priority. `Software.from_context` rebuilds one from a
  `ContextObject` (raising `LookupError` for an unknown program) and
  `to_context` describes it, with its linked files, for saving.
- `multilaunch.session`: `Session` and `SessionError`. A session knows its
  root folder (`<home>/MultiApp/`, created with a `fichierstandard`
  subfolder when missing), the project and context names and their folders,
  and an error code with `error_label`; `check` raises `SessionError` when
  the session is not usable. Its names can be saved and restored
  (`save_state`, `restore_state`, `reserve_state`, `recover_state`).
- `multilaunch.launcher`: `Launcher`, `StartResult`, `build_start_order` and
  `resolve_file_argument`.

## Start order

`build_start_order` takes the items of the scene and returns the programs in
the order they are launched: higher priority values first, and among equal
priorities the one added later first. The special "close automatically"
item, when present, always comes last. When the scene holds no program, the
order is empty.

## Starting and stopping

`Launcher(session, scene).start_session()` walks the start order and returns
a `StartResult`:

- `NOTHING_TO_START` when there is no program;
- `CLOSE_APPLICATION` when the "close automatically" item was reached, which
  tells the caller to close once everything has started;
- `STARTED` otherwise.

For each program, the command line is the program's folder and process name,
then its general options split on commas, then the configuration-file
arguments, then the work-file arguments. A program marked unique is not
launched again when it is already running, but is still recorded. After each
launch the launcher waits the program's delay divided by ten, in seconds.

`has_started` tells whether any program was recorded;
`stop_processes` stops each recorded program, together with the
comma-separated dependencies named in its record, for the session user.

By default processes are started with `subprocess.Popen`, looked up with
`pgrep -f` and stopped with `killall -I -u <user>`. The keyword arguments
`spawn`, `is_running`, `kill`, `sleep` and `substitute` replace these, and
`substitute` may rewrite the option list before it is used.

## Linked files

`resolve_file_argument(path, option, context_path)` turns a linked file into
command-line words. A bare file name is looked up in the context folder. A
`.txt` file whose first line is `nom-interne` stands for the name on its
second line. When the file exists and names something, the option (if any)
comes first, then the name; otherwise the result is empty.

## What the package does not do

- It draws nothing and has no window: the scene is a model of positions,
  selection and connections, to be shown by whatever interface uses it.
- It does not read or write configurations, projects or contexts on disk.
  `Configuration` is filled in by the caller, and `ContextObject` /
  `ContextLink` records are produced and consumed but not stored.
- It installs no command; it is used as a library.