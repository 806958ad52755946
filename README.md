# ddotelmap

Tools for turning OpenTelemetry resource attributes into what a Datadog
backend expects: tags, a telemetry source (hostname or serverless task),
and the pieces of a host metadata payload for the infrastructure list.

Resource attributes are plain Python dictionaries mapping attribute names
to values (strings, integers, floats, booleans, lists, mappings, bytes or
`None`).

## Installation

```
pip install ddotelmap
```

For running the test suite:

```
pip install "ddotelmap[test]"
pytest
```

## What is inside

### `ddotelmap.values`

- `value_type(value)` classifies a value as a `ValueType` (`Str`, `Int`,
  `Double`, `Bool`, `Map`, `Slice`, `Bytes`, `Empty`) and raises
  `TypeError` for anything an attribute cannot hold.
- `as_string(value)` renders any attribute value as a string;
  `str_value(value)` returns the value if it is a string, else `""`.
- `MismatchedTypeError` reports an attribute of an unexpected type, e.g.
  `"os.description" has type "Bool", expected type "Str" instead`.

### `ddotelmap.source`

`Source(kind, identifier)` with `Kind.HOSTNAME` (`host`) or
`Kind.AWS_ECS_FARGATE` (`task_arn`); `Source.tag()` gives `kind:identifier`.

### `ddotelmap.attributes`

- `tags.tags_from_attributes(attrs)` builds a tag list such as
  `env:prod`, `service:checkout`, `kube_namespace:default` or
  `process.executable.name:otelcol` from a resource's attributes.
- `tags.container_tags_from_resource_attributes(attrs)` extracts container
  tags, including custom ones under `datadog.container.tag.*`; semantic
  conventions win over custom keys, and non-string or empty values are
  ignored. `tags.container_tag_from_attributes(attr)` does the same for a
  plain string mapping, using the conventions only.
- `tags.origin_id_from_attributes(attrs)` gives `container_id://...` or
  `kubernetes_pod_uid://...`, or an empty string.
- `hostname.source_from_attrs(attrs)` resolves the telemetry source, or
  returns `None`. It looks, in order, at ECS Fargate task ARNs, then the
  literal `host` attribute, `datadog.host.name`, the cloud provider (AWS,
  GCP, Azure), the Kubernetes node and cluster name, `host.id` and
  `host.name`. Localhost names are rejected.
- `translator.Translator` wraps source resolution and counts, per attribute
  set, the resources that had no source (`missing_source_count`).
- `azure`, `ec2` and `gcp` hold the cloud-specific hostname, host info and
  cluster name rules; `process.ProcessAttributes` and
  `system.SystemAttributes` produce the process and OS type tags.

```python
from ddotelmap.attributes.tags import tags_from_attributes

attrs = {
    "deployment.environment": "prod",
    "container.name": "web",
    "os.type": "linux",
}
print(sorted(tags_from_attributes(attrs)))
# ['container_name:web', 'env:prod', 'os.type:linux']
```

### `ddotelmap.inframetadata`

- `payload.HostMetadata`, `payload.Meta` and `payload.HostTags` describe
  the host metadata payload; `payload.new_empty()` builds one with empty
  sections, and `HostMetadata.to_json()` produces the wire form, in which
  the `gohai` field is itself a JSON-encoded string.
- `gohai.GohaiPayload` holds the system inventory (`platform()`, `cpu()`,
  `network()` create their section when missing) and converts to and from
  its wire form with `to_dict()` and `from_dict()`;
  `gohai.ProcessesPayload` holds the process inventory.
- `host_tags.get_host_tags(attrs)` returns the sorted host tags taken from
  `datadog.host.tag.*` attributes and well-known attributes such as
  `cloud.provider` or `deployment.environment`; it raises `HostTagsError`
  listing every attribute that could not be used.
- `constants` holds the attribute names, payload field names and metric
  names that relate resource attributes to the payload's platform, CPU and
  network sections.

### `ddotelmap.sketchtest`

Quantile functions and CDFs for uniform, U-quadratic, exponential and
normal distributions, and helpers to truncate them to an interval; handy
for generating test points from a known distribution.

## What this package does not do

It keeps no store of host metadata and sends nothing anywhere. There is no
per-host map that merges resources and metrics into payloads over time,
and no reporter that pushes payloads to an endpoint on a schedule. The
package gives you the payload types, the tags and the hostname rules;
filling payloads from resources and delivering them is up to the caller.

## Third-party licence listing

```
ddotelmap-licenses [--output LICENSE-3rdparty.csv] [--overrides .copyright-overrides.yml]
```

Run from the root of a checkout of the multi-module repository it lists.
For every module it vendors dependencies with `go mod vendor`, lists their
licences with `wwhrd list --no-color`, collects copyright notices from
licence, notice, README and authors files under `vendor/` (or from the
overrides file, a YAML mapping of glob patterns to notices), and writes a
CSV with the columns Component, Origin, License and Copyright. It exits
with status 1 and a message on standard error if the overrides cannot be
loaded, a command fails, or a dependency has no copyright notice. Both
`go` and `wwhrd` must be on the `PATH`.