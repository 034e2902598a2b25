# beaconexplorer

Helpers that shape the pages of a lightweight beacon chain explorer. The
package works on plain Python values: it computes pagination windows, lays
out the fork tree shown beside a list of slots, turns validator states into
display labels, and builds the navigation menu, title, version and language
that every page carries. It has no dependencies outside the standard library.

## Installation

```
pip install .
```

Tests need the `test` extra:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `beaconexplorer.pagination` | `PageWindow`, `epochs_page`, `slots_page`, `epochs_cache_timeout`, `slots_cache_timeout` |
| `beaconexplorer.validators` | `describe_status`, `withdraw_address`, `ValidatorsWindow`, `validators_page`, `OffsetWindow`, `offset_page` |
| `beaconexplorer.forkgraph` | `ForkGraph`, `GraphSlot`, `ForkTreeBuilder` |
| `beaconexplorer.pagedata` | `NavigationLink`, `NavigationGroup`, `MainMenuItem`, `create_menu_items`, `page_title`, `version_string`, `detect_language` |
| `beaconexplorer.routing` | `clean_request_path`, `file_error_status` |

### Pagination

Epoch and slot listings run from the newest entry down to 0, with pages
numbered from 1 at the newest end. Page sizes are capped at 100; a start
past the newest entry gives the default page.

```python
from beaconexplorer.pagination import epochs_page, slots_page, slots_cache_timeout

window = epochs_page(first_epoch=120, page_size=50, current_epoch=130)
print(window.first, window.last, window.count, window.total_pages)

# The slot listing reaches up to eight slots ahead of the current slot,
# but not past the end of the current epoch.
window = slots_page(first_slot=2**64 - 1, page_size=32, current_slot=1000, slots_per_epoch=32)
print(window.is_default_page, window.first)

print(slots_cache_timeout(True, False, first_epoch=30, current_epoch=31))
```

A non-positive page size, a negative start, a negative current slot or a
non-positive `slots_per_epoch` raises `ValueError`.

### Validators

```python
from beaconexplorer.validators import describe_status, withdraw_address, validators_page, offset_page

describe_status("active_exiting")   # ("Exiting", True)
describe_status("pending_queued")   # ("Pending", False)

withdraw_address(bytes([1]) + bytes(11) + bytes(range(20)))  # the last 20 bytes
withdraw_address(bytes(32))                                  # None (not 0x01 credentials)

page = validators_page(first_index=100, page_size=50, total_count=1000)
print(list(page.indices)[:3], page.prev_page_val_idx, page.next_page_val_idx)

# Listings of unknown length, addressed by page number:
offset_page(page_idx=2, page_size=50, have_more=True).has_next  # True
```

### Fork tree

Feed slots newest first; each cell of `GraphSlot.fork_graph` then carries
its column position and the tiles (`vline`, `bline`, `fork`, ...) to draw.

```python
from beaconexplorer.forkgraph import ForkTreeBuilder, GraphSlot

builder = ForkTreeBuilder()
head = GraphSlot(block_root=b"\x02", parent_root=b"\x01", status=1)
parent = GraphSlot(block_root=b"\x01", parent_root=b"\x00", status=1)
builder.add_slot(head)
builder.add_slot(parent, page_slots=[head])
print(head.fork_graph[0].tiles, parent.fork_graph[0].block, builder.width())
```

`add_slot` takes `child_count`, the number of known blocks built on the
slot's block, for pages other than the first.

### Page data and static files

```python
from beaconexplorer.pagedata import create_menu_items, page_title, version_string, detect_language
from beaconexplorer.routing import clean_request_path, file_error_status

page_title("Epochs", "Explorer", 2024)        # "Epochs - Explorer - 2024"
page_title("", "Explorer", 2024)              # "Explorer - 2024"
version_string("abc123", "v1.0")              # "v1.0 (git-abc123)"
detect_language("ru-RU,en;q=0.8")             # "ru-RU"
detect_language("en", {"language": "de-DE"})  # "de-DE"
create_menu_items("login")                    # []

clean_request_path("a/../b//./c")             # "/b/c"
file_error_status(FileNotFoundError())        # HTTPStatus.NOT_FOUND
file_error_status(PermissionError())          # HTTPStatus.FORBIDDEN
```

## What this package does not do

It stores nothing and caches nothing: there is no database layer, no
in-process or Redis cache and no indexer talking to beacon nodes. It also
has no web server, routes, templates or command to run. It supplies the
values a web frontend would compute while rendering explorer pages; fetching
the blocks, epochs and validators and serving the HTML is left to the
application that uses it.