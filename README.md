# gitoci

`gitoci` is the groundwork for `git-remote-oci`, a Git remote helper for
keeping Git repositories in OCI registries. It holds:

- `gitoci.oci`: the data types and media types that describe how a
  repository's references are stored in an OCI artifact;
- `gitoci.config`: the YAML configuration file model, loading and
  environment-variable helpers;
- `gitoci.actions`: config file locations, the `Tool` that loads configuration
  and applies overrides, and the `Hello` action;
- `gitoci.cli`: the `git-remote-oci` command.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Command line

```
git-remote-oci hello
git-remote-oci --name Alice hello
git-remote-oci --config ./my-config.yaml hello
git-remote-oci version
```

Commands:

- `hello`: loads the configuration and prints `Hello <name>`.
- `version`: prints the installed package version.

Run with no command, `git-remote-oci` prints its help.

Options (accepted before or after the command):

- `--config PATH`: a config file search location. It may be given more than
  once; later files take priority over earlier ones. Without it, the locations
  come from the `GITOCI_CONFIG` environment variable split on `:`, or else from
  `gitoci.actions.default_search_path()`.
- `--name NAME`: overrides the name set in the configuration.

Environment variables:

- `GITOCI_NAME`: overrides the configured name (the `--name` flag wins over it).
- `GITOCI_EXAMPLE_OPTION`: overrides `exampleOption`; `1`, `t`, `T`, `TRUE`,
  `true`, `True` and `0`, `f`, `F`, `FALSE`, `false`, `False` are understood,
  anything else leaves the setting unchanged.
- `GITOCI_CONFIG`: config file search locations, separated by `:`.
- `GITOCI_VERBOSITY`: `1` logs at info level, `2` or more at debug level, to
  standard error.

If a config file cannot be read or parsed, the command prints `Error: ...` to
standard error and exits with status 1.

## Configuration file

The configuration is YAML, with `apiVersion: gitoci.act3-ai.io/v1alpha1` and
`kind: Configuration`:

```yaml
apiVersion: gitoci.act3-ai.io/v1alpha1
kind: Configuration
name: Alice
exampleOption: true
```

`load_config(paths)` reads the files in order, skipping any that do not exist;
fields in later files replace those from earlier ones. A different `apiVersion`
or `kind`, a non-string `name` or a non-boolean `exampleOption` raises
`ConfigError`. After loading, `name` defaults to `None` when unset.

By default the search path is `$XDG_CONFIG_DIRS/gitoci/config.yaml` (default
`/etc/xdg`) followed by `$XDG_CONFIG_HOME/gitoci/config.yaml` (default
`~/.config`). `default_config_path()` gives the preferred location to save to:
`GITOCI_CONFIG` if set, else the file under the user's config home.

## Library use

```python
from gitoci.config import Configuration, load_config
from gitoci.oci import ConfigGit, ReferenceInfo

conf = load_config(["/etc/gitoci/config.yaml"])
print(conf.to_documented_yaml())   # YAML with a comment above each field
conf.write("config.yaml")
print(conf.redacted())             # name replaced by [REDACTED]

manifest_config = ConfigGit.from_json('{"heads": {}, "tags": {}}')
manifest_config.heads["refs/heads/main"] = ReferenceInfo(
    commit="0123456789abcdef0123456789abcdef01234567",
    layer="sha256:abc123",
)
print(manifest_config.to_json())
```

`ReferenceInfo` checks that `commit` is a 40- or 64-digit hex hash (stored in
lower case) and that `layer` is a digest of the form `algorithm:hex`, and
raises `ValueError` otherwise.

`gitoci.actions.Tool` loads the configuration and applies, in order, the
override functions given to `add_config_override`. `gitoci.actions.Hello`
writes a greeting for the configured name to a text stream.

## What it does not do

The package does not yet speak the Git remote helper protocol: it cannot push
to or fetch from an OCI registry, and it neither builds packfiles nor uploads
manifests or layers. `gitoci.oci` only defines the types and media types such
an artifact would use. There is also no command to generate JSON Schema files
or documentation for the configuration format.