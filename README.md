# timeping

`timeping` is a small task scheduler built around a hashed time wheel. Task
nodes come from a fixed-size pool allocated up front, free nodes are kept on
an intrusive circular doubly linked list, and each wheel position holds the
tasks due there, grouped by the lap of the wheel they fire on.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running the service

```
timeping
```

When it starts, the service:

1. opens (or creates) the log file `timeping.log` in the working directory;
2. reads its settings from `timecnf.yaml` in the working directory. If that
   file does not exist yet, it is written with defaults and the command exits
   with status 1 so that you can review it. Run the command again afterwards;
3. allocates a `TaskPool` of `TaskPoolSize` slots;
4. prints a start message and waits until it receives SIGINT or SIGTERM, then
   closes the log and exits.

### Settings

`timecnf.yaml` is a YAML mapping; key names are matched without regard to
case. The file written on first start holds the first four keys below, in
lower case.

| Key             | Default written | Meaning                                |
|-----------------|-----------------|----------------------------------------|
| `TaskPoolSize`  | 100             | number of task slots in the pool       |
| `TimeWheelSize` | 60              | number of positions on a time wheel    |
| `Timeinterval`  | 100             | seconds between two ticks of a wheel   |
| `Port`          | 9768            | TCP port on 127.0.0.1                  |
| `Timelevel`     | (not written)   | time level; 0 when absent              |

A missing key reads as 0. The first four values are kept to 16 bits.

### What the service does not do

The `timeping` command only loads settings, builds the task pool and waits
for a signal. It does not run a time wheel, does not fire tasks, and does not
listen on `Port`; `TimeWheelSize`, `Timeinterval`, `Port` and `Timelevel` are
read but not used by it. There is no protocol for clients to add or remove
tasks: `NetCore` accepts connections and closes them straight away. Tasks are
identified by integer ids only; what a task does is up to the executor you
pass to `TimeWheel`.

## Using it as a library

```python
from timeping.timewheel import TimeWheel, TaskRequest

fired = []
wheel = TimeWheel(size=60, pool_size=1000, executor=fired.append)

# task 7 at position 3, on the first lap of the wheel
wheel.add_task(TaskRequest(task_id=7, position=3, rounds=0))

for _ in range(4):
    wheel.tick()

assert fired == [7]
```

- `tick()` fires the tasks of the current position whose lap equals the
  current lap, returns their ids, and advances one position; after the last
  position it wraps to 0 and the lap count (`wheel`) goes up by one.
- `delete_task(request)` removes a scheduled task and returns `False` if it
  was not found.
- `pending(position)` lists the `TaskRequest`s waiting at a position.
- `run(interval, stop_event)` ticks every `interval` seconds until the given
  `threading.Event` is set.
- `free` is the number of task nodes still available; `add_task` raises
  `TlistError` when none are left, and positions outside the wheel raise
  `IndexError`.

Other building blocks:

- `timeping.tlist`: `Tlist` and `Node`, an intrusive circular doubly linked
  list with a sentinel node, and `TlistError`.
- `timeping.task`: `TaskPool`, a fixed pool of `TaskNode` slots handed out
  through `get_node()` and mapped back with `task_of(node)`.
- `timeping.config`: `Config`, `load_setting(path)`, `init_config(path)` and
  `ConfigError`.
- `timeping.netcore`: `NetCore(port)`, a TCP listener on `127.0.0.1` with
  `run(stop_event)` and `close()`.
- `timeping.tlog`: `common(message, *tags)` for console messages,
  `init_log(path)` / `exit_log()` for the log file, and `err_in(message)`,
  which writes an error line to the log file, or to stderr if none is open.
- `timeping.ostools`: `file_exists`, `open_file` and `create_file`.
- `timeping.engine`: `Engine`, which ties the pieces together, and `main()`.