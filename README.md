# fdb-exporter

Turns a FoundationDB status document into Prometheus gauges and serves them
over HTTP.

The status JSON is decoded into typed dataclasses (`fdb_exporter.models`)
and handed to a set of metric groups: coordinators, database status, fault
tolerance, lock state, latency probe, data distribution, cluster messages,
QoS, backup, workload (bytes, keys, operations, transactions) and
per-process statistics. Each group records gauges such as
`fdb_client_coordinator_quorum`, `fdb_cluster_data_total_kv_size_bytes`,
`fdb_cluster_workload_transactions_started_count` or
`fdb_cluster_processes_cpu_cores`, and the whole set is rendered in the
Prometheus text exposition format.

## Installation

```
pip install .
```

There are no runtime dependencies beyond the standard library.

## Running

```
fdb-exporter --status-file status.json
```

Options:

| Option | Meaning |
| --- | --- |
| `--status-file PATH` | File holding the status JSON; defaults to `$FDB_STATUS_FILE`. Required. |
| `--listen ADDRESS` | Address to bind, e.g. `:8080` or `127.0.0.1:9100`; defaults to `$FDB_EXPORTER_HTTP_LISTEN_ADDR`, then `:8080` |
| `--interval SECONDS` | Seconds between collections, `4` by default |

The command collects once at start-up, then re-reads the file every
interval and swaps in the fresh set of gauges. Any GET request is answered
with the current page. Ctrl-C stops it.

## Environment

| Variable | Effect |
| --- | --- |
| `FDB_STATUS_FILE` | Default for `--status-file` |
| `FDB_EXPORTER_HTTP_LISTEN_ADDR` | Default listen address |
| `FDB_EXPORTER_NO_BACKUP_REPORTING` | When set, the backup metric group is left out |
| `FDB_DEPLOYMENT_NO_K8S` | When set, processes are tagged with `fdb_pod_name` instead of `machine_id` and `address` |
| `DEBUG_LOG_INCOMPLETE_STATUS` | `true` rejects and logs status documents missing cluster sections |
| `ENVIRONMENT`, `SERVICE`, `FDB_VERSION`, `FDB_CLUSTER_NAME`, `CLUSTER_NAME` | Values of the `env`, `service`, `version`, `fdb_cluster` and `cluster` tags carried by every metric |

## Using the library

```python
from fdb_exporter.provider import MetricProvider, file_status_fetcher

provider = MetricProvider(fetch=file_status_fetcher("status.json"))
provider.refresh()
print(provider.render())
provider.close()
```

`fetch` is any callable that takes the status key (`fdb_exporter.db.status_key()`,
`b"\xff\xff/status/json"`) and returns the raw JSON bytes, so a status source
other than a file can be plugged in. `MetricProvider.serve_http(address)`
serves the current page until `close()` is called, and
`MetricProvider.collect(interval, stop)` keeps refreshing until the `stop`
event is set.

Lower-level pieces:

- `fdb_exporter.models.status.get_status_from_file(path)` and
  `FullStatus.from_json(text)` decode a status document; a file that cannot
  be read or decoded raises `StatusFileError`.
- `fdb_exporter.db.get_status(fetch, environ, retry_delay)` fetches and
  decodes the status, retrying once; failure raises `StatusUnavailableError`.
- `fdb_exporter.metrics.reporter.MetricReporter` runs every metric group
  over one status (`collect`, `collect_once`, `collect_once_from_file`) and
  renders the result (`render`).
- `fdb_exporter.metrics.exposition.parse_metrics(text)` reads a rendered
  page back into `FetchedMetric` records.

## What it does not do

The package contains no database client. It never connects to a cluster
itself: the status document has to come from a file or from a `fetch`
callable you supply. `fdb_exporter.db.ClusterSettings.from_env()` reads
`FDB_CLUSTER_FILE`, `FDB_API_VERSION` and the `FDB_TLS_*` variables, and
`is_tls_mode()` detects a `:tls` address in a cluster file, but nothing in
the package uses these settings to open a connection.

## Tests

```
pip install .[test]
pytest
```