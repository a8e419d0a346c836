# shouldupdate

A small command-line tool that remembers which version of each application
you have installed and tells you when a newer release has been published on
GitHub.

## Installation

```
pip install .
```

## Usage

Applications are tracked under an `owner/repo` name so their latest release
can be looked up. Names without a slash are kept in the list but skipped when
checking.

```
shouldupdate add owner/repo 1.0.2      # start tracking, or record a new version
shouldupdate remove owner/repo         # stop tracking
shouldupdate list                      # show tracked applications, sorted by name
shouldupdate check                     # check every tracked application
shouldupdate check owner/repo          # check a single application
```

`shouldupdate <command> --help` (or `-h`) prints the usage of that command.

For each application, `check` fetches the tag of the latest release from
`https://api.github.com/repos/<owner>/<repo>/releases/latest` (a leading `v`
is dropped from the tag) and prints one of:

- **Up to date** – the latest tag equals the recorded version;
- **Update Available!** – the latest tag sorts after the recorded version;
- **Version discrepancy** – the latest tag sorts before the recorded version.

Versions are compared as plain strings, so `1.10.0` sorts before `1.9.0`.
When a lookup fails, the error is reported and the remaining applications are
still checked.

Running `shouldupdate` with no command, with an unknown command, or with
missing or surplus arguments prints usage text and exits with status 1.

## Configuration file

Tracked versions are stored as a flat TOML table in
`~/.config/shepherd/versions.toml` (or `versions.toml` in the current
directory when no home directory can be determined):

```toml
"owner/repo" = "1.0.2"
```

Every value must be a string. The file and its directory are created the first
time an application is added.

## Using it from Python

- `shouldupdate.checker.get_latest_version(app_identifier, api_base_url=None)`
  returns the latest release tag of `owner/repo`, raising
  `VersionLookupError` on bad identifiers, network failures, API errors,
  malformed JSON or a missing `tag_name`.
- `shouldupdate.config.load_config(path=None)` and
  `save_config(config, path=None)` read and write the versions file, raising
  `ConfigError` when it cannot be read, parsed or written.
- `shouldupdate.cli` holds `handle_add`, `handle_remove`, `handle_list`,
  `handle_check` and `check_app_version`; each takes an optional
  `config_path`, and the check functions an optional `fetch` callable in place
  of the GitHub lookup.

## What it does not do

- It does not install or download updates; it only reports them.
- It sends unauthenticated requests with no timeout, so GitHub's rate limits
  for anonymous clients apply.
- The command line has no option for choosing another configuration file.

## Output

Messages are coloured with 256-colour ANSI escape codes. Errors and usage text
go to standard error; everything else goes to standard output.

## Development

```
pip install -e ".[test]"
pytest
```