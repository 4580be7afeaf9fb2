# webspider

Building blocks for a web crawler. The package gives you the pieces a crawl
loop needs:

- **Crawl queues** (`webspider.queue`): `Queue` hands out items breadth-first
  (a `PriorityQueue`, lower priority values first) or depth-first (a `Stack`),
  chosen by name: `"breadth-first"` or `"depth-first"`. `Queue.pop()` is a
  generator that waits for new items and stops once the queue has stayed empty
  longer than the timeout.
- **Extension rules** (`webspider.extensions`): `Validator` allows only the
  extensions you ask for, or otherwise rejects a default deny list (images,
  archives, media, fonts, documents and so on) plus any extensions you add.
- **Deduplication** (`webspider.filters`): `SimpleFilter` remembers URLs and
  MD5 digests of content it has seen, and `is_cycle` flags overlong URLs and
  URLs built from a long substring repeated many times.
- **Scope rules** (`webspider.scope`, `webspider.domains`): `ScopeManager`
  keeps a crawl on the root host by domain name (`dn`), registered domain
  (`rdn`) or exact host (`fqdn`), combined with optional in-scope and
  out-of-scope regular expressions.
- **Link and endpoint extraction** (`webspider.urlutils`,
  `webspider.endpoints`, `webspider.formfields`): parse `Link`, `Refresh` and
  `srcset` values, find endpoints in page bodies and JavaScript, and read HTML
  forms with their actions resolved against the page URL.
- **Options** (`webspider.options`, `webspider.crawler_options`): the
  `Options` dataclass, and `create_crawler_options` which builds the
  validator, scope manager, filter, output writer and an optional
  `RateLimiter` from it.
- **Output** (`webspider.result`, `webspider.fields`,
  `webspider.custom_fields`, `webspider.output`): results as plain lines or
  JSON, field selection (`url`, `path`, `fqdn`, `rdn`, `rurl`, `qurl`,
  `qpath`, `file`, `ufile`, `key`, `value`, `kv`, `dir`, `udir`), custom regex
  fields read from a YAML file, per-host field files and stored responses.

## Installation

```
pip install webspider
```

Python 3.10 or newer is required.

## Examples

A depth-first queue:

```python
from webspider.queue import Queue

queue = Queue("depth-first", 5)
queue.push("https://example.com/", 0)
queue.push("https://example.com/about", 1)
print(len(queue))  # 2
```

Extension filtering:

```python
from webspider.extensions import Validator

only_go = Validator([".go"], None)
only_go.validate_path("main.go")   # True
only_go.validate_path("main.php")  # False

default = Validator(None, [".php"])
default.validate_path("logo.png")  # False: on the default deny list
```

Scope checks:

```python
from urllib.parse import urlsplit
from webspider.scope import ScopeManager

manager = ScopeManager(None, None, "rdn", False)
manager.validate(urlsplit("https://sub.example.com/a"), "example.com")  # True
```

Deduplication:

```python
from webspider.filters import SimpleFilter

seen = SimpleFilter()
seen.unique_url("https://example.com")  # True
seen.unique_url("https://example.com")  # False
```

Finding endpoints and forms:

```python
from webspider.endpoints import extract_relative_endpoints
from webspider.formfields import parse_form_fields
from webspider.urlutils import parse_link_tag

extract_relative_endpoints('fetch("/api/v1/users")')
parse_link_tag('<https://example.com/page/2>; rel="next"')
forms = parse_form_fields('<form action="/login"><input name="user"></form>',
                          "https://example.com/path")
forms[0].action  # "https://example.com/login"
```

Writing results:

```python
from webspider.output import OutputOptions, StandardWriter
from webspider.result import Request, Result

options = OutputOptions(fields="url,fqdn", output_file="results.txt")
with StandardWriter(options) as writer:
    writer.write(Result(request=Request(url="https://example.com/a")))
```

## Custom fields

Custom output fields are defined in a YAML list of entries with `name`,
`type`, `part` (`header`, `body` or `response`, default `response`), `group`
and `regex`. When `OutputOptions.field_config` is empty, `StandardWriter`
uses `~/.config/webspider/field-config.yaml`, writing a default one that
defines an `email` field if it does not exist yet. Custom field names must
match `[A-Za-z0-9_-]+`, must be unique, and must not reuse a built-in field
name; otherwise `CustomFieldError` is raised.

## What the package does not do

There is no crawl loop, no HTTP client, no headless browser and no command
line program: the package supplies queues, rules, extraction and output for a
crawler you write yourself. Public suffix lookups in `webspider.domains` use a
built-in subset of the public suffix list, so unusual suffixes fall back to
the last label of the host.