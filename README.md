# wsikit

Building blocks for window-system integration code: DRM fourcc format
tables, a buffer layout planner and allocator front end, present-mode
compatibility queries, extension-name lists, structure chains and a few
small utilities (levelled logging, a bounded FIFO, a timed semaphore, a
file-descriptor owner). It has no dependencies outside the standard library.

## Installation

```
pip install wsikit
```

To run the test suite:

```
pip install "wsikit[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `wsikit.log` | `log_error`, `log_warning`, `log_info` (tagged with the caller's file and line), `log_message`, `current_log_level`, `level_tag`. |
| `wsikit.ring_buffer` | `RingBuffer`, a fixed-capacity FIFO: `push_back` returns `False` when full; `front`, `back` and `pop_front` return `None` when empty. |
| `wsikit.platform_set` | `WsiPlatform` and `WsiPlatformSet`, a set of platforms kept as a 64-bit mask (`add`, `in`, `empty`). |
| `wsikit.timed_semaphore` | `TimedSemaphore` with `wait(timeout)` in nanoseconds and `post()`; `WAIT_FOREVER`; exceptions `SemaphoreNotReady` and `SemaphoreTimeout`. |
| `wsikit.chain` | `ChainedStruct` (a dataclass with `s_type` and `p_next`), `find_extension`, `shallow_copy_extension`. |
| `wsikit.extension_list` | `ExtensionList`: `add`, `add_unique`, `add_intersection`, `extend`, `names`, `contains`, `contains_all`, `remove`. |
| `wsikit.present_modes` | `PresentMode`, `PresentModeCompatibility`, `CompatiblePresentModes` (`query`, `is_compatible`). |
| `wsikit.drm_formats` | `fourcc_code`, the `DRM_FORMAT_*` codes, `VkFormat`, `FormatSpec`, the format tables and `vk_to_drm_format`, `drm_to_vk_format`, `drm_to_vk_srgb_format`, `drm_fourcc_format_get_num_planes`, `find_format_spec`. |
| `wsikit.fd_owner` | `FdOwner`: `fileno`, `is_valid`, `close`, `release`; a context manager that closes the descriptor on exit. |
| `wsikit.wsialloc` | `WsiAllocator`, `HeapBackend`, `WsiallocFormat`, `AllocateInfo`, `AllocateResult`, `FormatFlag`, `AllocateFlag`, `WsiallocError`, `round_size_up_to_align`, `calculate_format_properties`, `validate_info`. |

## Examples

Format conversions:

```python
from wsikit.drm_formats import VkFormat, drm_to_vk_format, vk_to_drm_format

fourcc = vk_to_drm_format(VkFormat.B8G8R8A8_UNORM)
assert drm_to_vk_format(fourcc) is VkFormat.B8G8R8A8_UNORM
```

A bounded queue:

```python
from wsikit.ring_buffer import RingBuffer

queue = RingBuffer(2)
queue.push_back("a")
queue.push_back("b")
assert not queue.push_back("c")
assert queue.pop_front() == "a"
```

Waiting with a timeout in nanoseconds. A timeout of 0 never blocks and
raises `SemaphoreNotReady` when the count is zero; `WAIT_FOREVER` or `None`
blocks until `post()` is called:

```python
from wsikit.timed_semaphore import SemaphoreTimeout, TimedSemaphore

sem = TimedSemaphore(0)
try:
    sem.wait(1_000_000)
except SemaphoreTimeout:
    pass
```

Planning a buffer layout. Strides are the row size rounded up to 64 bytes;
only the linear modifier and single-plane formats are accepted, anything
else raises `WsiallocError` with code `NOT_SUPPORTED`:

```python
from wsikit.drm_formats import fourcc_code, find_format_spec
from wsikit.wsialloc import WsiallocFormat, calculate_format_properties

argb = fourcc_code("A", "R", "2", "4")
strides, offsets = calculate_format_properties(
    WsiallocFormat(fourcc=argb), find_format_spec(argb), width=100, height=10
)
assert strides == (448,) and offsets == (0,)
```

Allocating through a backend. `WsiAllocator.allocate` validates the request
(at least one format, width and height in 1..128000), picks the first format
it can lay out, and asks the backend for a buffer of the computed size. With
`AllocateFlag.NO_MEMORY` only the layout is returned and `buffer_fds` is
empty. `AllocateFlag.PROTECTED` uses the protected heap, and fails with
`NO_RESOURCE` if the allocator was given none.

```python
import os

from wsikit.drm_formats import DRM_FORMAT_ARGB8888
from wsikit.wsialloc import AllocateInfo, WsiAllocator, WsiallocFormat


class MemfdBackend:
    def allocate(self, size, heap_id):
        fd = os.memfd_create("buffer")
        os.ftruncate(fd, size)
        return fd


allocator = WsiAllocator(MemfdBackend(), heap_id=0)
result = allocator.allocate(
    AllocateInfo(formats=[WsiallocFormat(DRM_FORMAT_ARGB8888)], width=64, height=64)
)
os.close(result.buffer_fds[0])
```

## Logging

`log_message(level, file, line, message, *args)` writes
`<TAG>(<file>:<line>): <message % args>` plus a newline to stderr when
`level` is at or below the level read from the `VULKAN_WSI_DEBUG_LEVEL`
environment variable (default 1), and returns whether it printed. Tags are
`ERROR` (1), `WARNING` (2), `INFO` (3), empty for 0 and `LEVEL_<n>` for
anything else.

## What this package does not do

It is a library only: there is no command-line program. It does not talk to
a graphics driver, a display server or a kernel memory heap. `WsiAllocator`
hands every allocation to a `HeapBackend` that you supply; no backend for a
real heap device is included.