# minitalk

minitalk sends a text message from one process to another using only the
POSIX signals `SIGUSR1` and `SIGUSR2`. The message is sent one bit at a time.
A server collects the bits into bytes and prints each finished message on its
own line.

It needs a POSIX system, because it relies on `SIGUSR1`, `SIGUSR2` and
`signal.pause()`.

## Installation

```
pip install .
```

## Usage

Start the server. It prints its process id and then waits for messages until
it is interrupted:

```
$ minitalk-server
Server PID is : 4242
```

In a second terminal, send a message to that PID:

```
$ minitalk-client 4242 "hello there"
```

The server then prints:

```
hello there
```

The client takes exactly two arguments, the server's PID and the message.

- With a different number of arguments it writes `Wrong number of arguments`
  to standard error and exits with status 0.
- If the PID is not made of decimal digits only, or is not positive, it writes
  `Wrong PID` to standard error and exits with status 0.
- If a signal cannot be delivered, for example because no process runs under
  that PID, it writes `Failure when trying to send signal` and
  `Check PID or if target server is running` to standard error and exits with
  status 1.

If the server cannot register its signal handlers it writes
`Error when setting sigaction` to standard error and exits with status 1.
Received bytes are decoded as UTF-8; bytes that are not valid UTF-8 are shown
as replacement characters.

## Wire format

Each byte of the message (the text encoded as UTF-8) is sent most significant
bit first. A `0` bit is `SIGUSR1` and a `1` bit is `SIGUSR2`. Eight `0` bits,
one NUL byte, end the message. The client waits 0.1 ms after each signal so
that the server can keep up.

There is no acknowledgement from the server: signals that arrive faster than
the server handles them can be lost, and the client does not know whether a
message arrived intact.

## Library use

The encoding and decoding live in `minitalk.protocol`:

```python
from minitalk.protocol import MessageDecoder, encode_bits

decoder = MessageDecoder()
for bit in encode_bits(b"hi"):
    message = decoder.feed(bit)
    if message is not None:
        print(message)  # b'hi'
```

- `encode_bits(data)` yields the bits of a `str`, `bytes` or `bytearray`
  followed by the terminating zero byte.
- `bit_to_signal(bit)` and `signal_to_bit(signum)` map between bits and
  signals, raising `ValueError` for anything else.
- `MessageDecoder.feed(bit)` and `MessageDecoder.feed_signal(signum)` return
  the complete message as `bytes` once its terminator arrives, and `None`
  before that; `MessageDecoder.pending` holds the bytes received so far.

`minitalk.client` has `parse_pid(text)`, which raises `ValueError` for an
invalid PID, and `send_message(pid, text, delay)`, which raises
`minitalk.client.SendError` when a signal cannot be sent.

`minitalk.server.Server(output)` writes received messages to any text stream
(standard output by default). `Server.handle(signum, frame)` is the signal
handler, `Server.install()` registers it for both signals and
`Server.serve_forever()` prints the PID line and waits for signals.

The package also has some small helpers:

- `minitalk.textutils`: `atoi` and `atol` parse a leading decimal integer
  (after whitespace and one optional sign) and wrap it to 32 or 64 bits;
  `itoa` formats a 32-bit integer and raises `OverflowError` outside that
  range; `split(text, sep)` drops empty words; `trim(text, chars)`;
  `substr(text, start, length)`; `bounded_find(haystack, needle, size)`
  returns the index of a match lying wholly within the first `size`
  characters, 0 for an empty needle, or -1.
- `minitalk.printf`: `render(fmt, *args)` returns the formatted text and
  `printf(fmt, *args)` writes it to standard output and returns its length.
  The conversions are `%c %s %p %d %i %u %x %X %%`; `%s` of `None` gives
  `(null)`, `%p` of `None` or 0 gives `(nil)`, an unknown conversion prints
  its own letter, a missing argument raises `TypeError` and a format ending
  in a lone `%` raises `ValueError`.
- `minitalk.linereader.LineReader(stream, buffer_size)`: reads a text or
  binary stream line by line through reads of `buffer_size` (default 10).
  `readline()` returns the next line with its newline, or `None` at the end;
  iterating over the reader yields every line.

## Running the tests

```
pip install ".[test]"
pytest
```