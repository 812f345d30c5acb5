# nxdnkit

A library of building blocks for NXDN digital voice network services on
amateur radio: the UDP framing used between repeaters and a reflector,
the ICOM framing used towards an NXCore server, a callsign lookup table,
an `.ini` configuration reader, levelled logging and a few timing helpers.

Only the Python standard library is needed.

## Installation

```
pip install .
```

## What is in the package

| Module | Contents |
| --- | --- |
| `nxdnkit.timer` | `Timer`, a countdown that advances only when `clock(ticks)` is called |
| `nxdnkit.stopwatch` | `StopWatch`, elapsed milliseconds on the monotonic clock |
| `nxdnkit.ringbuffer` | `RingBuffer` and `RingBufferError`, a fixed-size FIFO |
| `nxdnkit.log` | `LogLevel`, `initialise`, `log`, `finalise`, `format_line` |
| `nxdnkit.utils` | `hex_dump_lines`, `dump`, `dump_bits` and bit/byte packing helpers |
| `nxdnkit.conf` | `Config`, `load_config`, `ConfigError` |
| `nxdnkit.udpsocket` | `UDPSocket`, `UDPSocketError`, `lookup` |
| `nxdnkit.network` | `NXDNNetwork` and `build_frame` for the repeater side |
| `nxdnkit.nxcore` | `NXCoreNetwork`, `build_icom_packet`, `parse_icom_packet` |
| `nxdnkit.lookup` | `NXDNLookup`, radio id to callsign table |
| `nxdnkit.parrot_network` | `ParrotNetwork`, the UDP side of an echo service |

### Timers

```python
from nxdnkit.timer import Timer

timer = Timer(1000, 2)      # 1000 ticks per second, 2 second timeout
timer.start()
timer.clock(2001)
assert timer.has_expired()
```

A timeout of zero disables a timer. `timeout`, `timer` and `remaining`
are reported in whole seconds.

### Frames

`build_frame(data, src_id, dst_id, grp)` wraps a 33-byte NXDN payload in a
43-byte `NXDND` network frame, setting the flag byte from the payload
(group call, data, start and end of transmission).
`build_icom_packet(frame)` turns such a frame into the 102-byte ICOM packet
sent to NXCore, and `parse_icom_packet(packet)` extracts the 33-byte payload
again, or returns `None` for anything else.

```python
from nxdnkit.network import build_frame
from nxdnkit.nxcore import build_icom_packet, parse_icom_packet

payload = bytes([0x83, 0, 0, 0, 0, 0x08]) + bytes(27)   # a voice trailer
frame = build_frame(payload, src_id=1234, dst_id=9999, grp=True)
assert len(frame) == 43 and frame[9] == 0x09

packet = build_icom_packet(frame)
assert parse_icom_packet(packet) == payload
```

### Networking

All sockets are IPv4 UDP and never block on read.

- `NXDNNetwork(port, debug)` reads `NXDN` packets of 17 bytes (polls) or
  43 bytes (data), returning `(data, host, port)`; `write` sends bytes as
  they are and `write_frame` wraps a payload with `build_frame` first.
- `NXCoreNetwork(address, debug)` talks to an NXCore server on UDP port
  41300 and only accepts packets from that address and port.
- `ParrotNetwork(port)` echoes `NXDNP` polls straight back, returns 43-byte
  `NXDND` frames, and writes to whoever sent the latest packet until
  `end()` is called.

With `debug` set, every packet sent or received is hex-dumped to the log
at debug level.

### Configuration

`load_config(path)` reads an `.ini` file laid out in sections and returns a
`Config`; keys that are absent keep their defaults. A file that cannot be
opened raises `ConfigError`.

```
[General]
TG=9999
Daemon=0

[Id Lookup]
Name=NXDN.csv
Time=24

[Log]
DisplayLevel=1
FileLevel=1
FilePath=.
FileRoot=NXDNReflector

[Network]
Port=41400
Debug=0

[NXCore]
Enabled=0
Address=192.0.2.10
TGEnable=1000
TGDisable=2000
Debug=0
```

### Callsign lookup

`NXDNLookup(filename, reload_time)` reads lines of `id,callsign` (comma or
tab separated; lines starting with `#` are skipped) and upper-cases the
callsigns. `find(id_)` returns the callsign, `"ALL"` for id 65535, or the id
as text when it is unknown. With a non-zero `reload_time`, `read()` starts a
background thread that reloads the file every `reload_time` hours until
`stop()` is called.

### Logging

`initialise(file_path, file_root, file_level, display_level)` sets where
and what is logged. Levels run from 1 (debug) to 6 (fatal); a threshold of
0 turns that output off. Log files are written per UTC day as
`<file_root>-YYYY-MM-DD.log` under `file_path`. A fatal message closes the
log and raises `SystemExit(1)`.

## What the package does not do

The package provides no command-line programs. It has no reflector loop
that registers repeaters, relays transmissions between them or switches
the NXCore link on talk-group commands, and no recording store or playback
loop for an echo service: `ParrotNetwork` handles only the network side.
Those have to be assembled from the pieces above.

## Tests

```
pip install ".[test]"
pytest
```