# remotecache

Building blocks for a remote build cache server, the kind of service that
build clients talk to in order to share action results and content-addressed
blobs. The package depends on nothing outside the standard library.

## Modules

- `remotecache.request_url`: `parse_request_url(url, validate_ac)` turns a
  path such as `cas/<sha256>` or `team/ac/<sha256>` into a `ParsedRequest`.
  That object has a `kind` (an `EntryKind`: `CAS`, `AC` or `RAW`), a `hash` and
  an `instance`. An `ac/` path is `AC` when `validate_ac` is true and `RAW`
  when it is not. Malformed paths raise `RequestURLError`, and the message
  carries the path with HTML escaping. `blob_path(kind, hash_)` returns
  `/<kind>/<hash>`.
- `remotecache.validate`: the dataclasses `Digest`, `OutputFile`,
  `OutputDirectory`, `OutputSymlink` and `ActionResult`.
  - `validate_digest` accepts `None`. It rejects a negative size, and any hash
    that is not 64 lower-case hex digits (`HASH_KEY_REGEX`).
  - `validate_action_result` checks output files, output directories, the
    three symlink lists, and the stdout and stderr digests. It looks for
    missing entries, empty paths, empty targets, absolute paths and invalid
    digests. It returns the result unchanged, or raises `ValidationError`.
- `remotecache.tempfile_creator`: `TempFileCreator.create(base, legacy)`
  creates a new file named `<base>-<nine digits>`, or `<base>-<nine digits>.v1`
  when `legacy` is true.
  - The file is opened exclusively with mode `0664` plus the setgid bit, which
    marks it as incomplete. Chmod it to `FINAL_MODE` once it has been written.
  - `create` returns the open file and the random part of the name.
  - The random part comes from a linear congruential generator, which can be
    seeded.
  - `create` raises `TempFileError` on unexpected errors, and after 10,000
    name collisions.
- `remotecache.idle`: `IdleTimer(timeout, notify)` takes the timeout in
  seconds or as a `timedelta`.
  - After `start()`, a daemon thread checks once a second. It calls `notify()`
    once, when more than `timeout` has passed since the last `reset_timer()`.
  - `wrap_handler(handler)` returns a callable that resets the timer before
    each call to `handler`.
- `remotecache.uploaders`: `start_uploaders(uploader, num_uploaders,
  max_queued_uploads)` starts daemon threads. The threads take `UploadRequest`
  items from a bounded `queue.Queue` and pass them to `Uploader.upload_file`.
  - It returns the queue, or `None` if either count is not positive.
  - Exceptions raised by an upload are logged, and the worker carries on.
- `remotecache.annotate`: `annotate_error(prefix, err, cancelled_reason)`
  returns an `AnnotatedError` whose message is `prefix: err`. When a reason is
  given, ` (reason)` is appended to that message.
- `remotecache.rlimit`: `raise_open_file_limit()` sets the soft `RLIMIT_NOFILE`
  to the hard limit. On macOS it first caps the hard limit by
  `sysctl -n kern.maxfilesperproc`. It returns the new limit, or `None` on
  failure; failures are logged.
- `remotecache.usage`: help formatting for command-line options.
  - `Flag` describes an option, and `str(flag)` renders its help line.
  - `wrap_line` and `wrap` break text at word boundaries.
  - `console_width()` reads `COLUMNS` or runs `tput cols`. The result is never
    below 30, and defaults to 10000.
  - `format_help(app_name, flags, width)` renders a complete help page, with a
    `--help, -h` entry added at the end.
- `remotecache.testing_helpers`: `random_data_and_hash(size)` returns random
  bytes and their SHA-256 hex digest. `silent_logger()` returns a logger that
  discards its output.

## Example

```python
from remotecache.request_url import EntryKind, parse_request_url
from remotecache.validate import ActionResult, Digest, OutputFile, validate_action_result

parsed = parse_request_url("team/ac/" + "a" * 64, validate_ac=True)
assert parsed.kind is EntryKind.AC
assert parsed.instance == "team"

result = ActionResult(output_files=[OutputFile("out.txt", Digest("b" * 64, 12))])
validate_action_result(result)
```

## What this package does not do

It contains no HTTP or gRPC server, no disk cache storage, no proxy backends
and no command-line program. It supplies only the pieces listed above, to be
used by such a server.

## Installing and testing

```
pip install .
pip install .[test]
pytest
```