# mspot

Python building blocks for an M17-only hotspot or repeater that talks to an
MMDVM-style modem. The package needs nothing beyond the standard library.
The serial ports use `termios` and `fcntl`, so they work on POSIX systems only.

## What is inside

- `mspot.defines` holds the enumerations `Mode`, `Tag`, `HardwareType`,
  `RfState`, `NetState`, `DmrOvcm` and `DstarAck`. It also holds the M17
  framing constants (frame, LSF, LICH, payload and sync lengths, silence
  frames, data and encryption types) and `JsonKeys`, the configuration
  section and key names. `JsonKeys.sections()` returns every section, and
  each section's `keys()` returns its key names. The three sync-word helpers
  `add_link_setup_sync`, `add_stream_sync` and `add_eot_sync` return a copy
  of the data with its first two bytes replaced by the matching sync word.
- `mspot.packet` covers the wire formats:
  - `IPFrame` is the 54-byte M17 stream frame.
  - `Lsd` is its 28-byte link setup data.
  - `RefPacket` is the reflector control packet of 4, 10 or 11 bytes.

  Each has `from_bytes` and `to_bytes`. Multi-byte fields are big-endian, and
  lengths and 16-bit ranges are checked with `ValueError`.
- `mspot.packet_queue` provides `SafePacketQueue`, a thread-safe FIFO:
  - `push(item)` adds an item.
  - `pop()` returns the oldest item, or `None` when the queue is empty.
  - `pop_wait()` blocks until an item arrives.
  - `pop_wait_for(ms)` waits with a timeout.
  - `is_empty()` and `len()` report the contents.

  `HOST_TO_GATE` and `GATE_TO_HOST` are two shared queues.
- `mspot.ring_buffer` provides `RingBuffer(length, name)`, a byte FIFO that
  holds at most `length - 1` bytes. It raises `RingBufferError` on overflow
  and underflow. Its methods are `add_data`, `get_data`, `peek`, `clear`,
  `free_space`, `data_size`, `has_space`, `has_data` and `is_empty`.
- `mspot.rssi` provides `RssiInterpolator`:
  - `load(filename)` reads `raw rssi` lines. Lines starting with `#` are
    skipped, and an unreadable file raises `OSError`.
  - `interpolate(raw)` interpolates linearly between points. It clamps
    outside the table and returns 0 when the table is empty.
- `mspot.timers` provides three timers:
  - `SteadyTimer` measures seconds since `start()` with `time()`.
  - `StopWatch` counts milliseconds with `start()` and `elapsed()`, and
    `time()` gives wall-clock milliseconds.
  - `Timer(ticks_per_sec, secs, msecs)` is a tick-driven timeout. It has the
    methods `start`, `stop`, `clock` and `set_timeout`, and the properties
    `timeout`, `timer`, `remaining`, `running` and `expired`.
- `mspot.gate_state` provides `GateState`, a lock-protected `GateStatus`
  (`IDLE`, `GATEIN`, `MODEMIN`, `MESSAGEIN`). It has the methods `idle`,
  `set_state`, `set_state_only_if_idle` and `try_state`, and the `state`
  property.
- `mspot.version` provides `Version(major, minor, revision)`, a frozen,
  ordered triple. `str()` gives `"1.2.3"` and `value` gives the packed
  integer.
- `mspot.utils` has bit and byte helpers:
  - `hexdump_lines` and `dump` produce and log hex dumps, and `dump_bits`
    does the same for bit sequences.
  - `byte_to_bits_be`, `byte_to_bits_le`, `bits_to_byte_be` and
    `bits_to_byte_le` convert between bytes and bits.
  - `count_bits` counts the set bits.
  - `remove_char` drops a character from text.
- `mspot.sock_address` provides `SockAddress`, an IPv4 or IPv6 address with
  a port.
  - Build one with `from_host`, `from_family` or `from_sockaddr`.
    `from_family` also accepts `"loc..."` and `"any..."` shorthands.
  - Equality compares the family and address but not the port.
  - Failures raise `AddressError`.
- `mspot.udp` provides `UdpSocket`, a bound non-blocking UDP socket, and
  `UdpController`, a modem port over UDP. The controller buffers only
  datagrams that come from the modem's address and port.
- `mspot.serial_ports` provides `UartController`, a serial device in raw 8N1
  mode. Supported speeds run from 1200 to 500000 baud, and RTS can optionally
  be asserted. It also provides `PseudoTtyController`, a pseudo terminal whose
  far end is published through a symbolic link. Failures raise
  `SerialPortError`.

All modem ports share the `BasePort` interface from `mspot.base_port`:
`open()`, `read(length)`, `write(data)` and `close()`. A port can be used as
a context manager, which opens it on entry and closes it on exit.

## What it does not do

This is a library of parts, not a running hotspot. It has:

- no command-line program or daemon,
- no modem protocol handling (no MMDVM command framing),
- no gateway or reflector linking logic,
- no reader for configuration files.

`JsonKeys` only names the keys.

## Installing

    pip install .

To install and run the tests:

    pip install ".[test]"
    pytest

## Example

    from mspot.ring_buffer import RingBuffer
    from mspot.timers import Timer
    from mspot.packet import IPFrame

    buf = RingBuffer(16, "modem rx")
    buf.add_data(b"\x55\xf7")
    assert buf.get_data(2) == b"\x55\xf7"

    timer = Timer(1000, 2)      # 1000 ticks per second, 2 second timeout
    timer.start()
    timer.clock(2001)
    assert timer.expired

    frame = IPFrame(magic=b"M17 ", stream_id=0x1234, frame_number=1)
    assert IPFrame.from_bytes(frame.to_bytes()) == frame