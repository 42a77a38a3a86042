# sigtalk

A small messaging pair for POSIX systems. A server process waits for text.
A client process sends it using nothing but the user signals `SIGUSR1` and
`SIGUSR2`, one bit per signal, with the server acknowledging every bit.

The server waits with `signal.sigwaitinfo`, which Python offers on Linux
but not on every POSIX system (macOS lacks it). The client only needs
`signal.sigwait` and `signal.pthread_sigmask`.

## Installing

```
pip install .
```

## Using it

Start the server in one terminal. It prints its process id:

```
$ sigtalk-server
PID : 41234
```

In another terminal, send a message to that process id:

```
$ sigtalk-client 41234 "hello there"
Signal received:
Server received message successfuly.
```

The server prints every complete message on its own line, decoding it as
UTF-8 (undecodable bytes are replaced). An empty message prints as
`(null)`. The server ignores its command-line arguments and stops on
Ctrl-C.

The client needs exactly two arguments: the server's process id and the
message. With any other number of arguments, or a process id that does not
read as a positive number, it prints `Invalid arguments.` and exits with
status 1.

### How the transfer works

- Each byte of the UTF-8 encoded message goes out most significant bit
  first. `SIGUSR1` stands for a 0 bit and `SIGUSR2` for a 1 bit. A message
  containing a NUL character is cut short at it.
- After each bit the server answers with `SIGUSR1`, and only then does the
  client send the next bit.
- A message ends with eight 0 bits, a NUL byte. The server then prints the
  text it has collected and starts over.
- If the server cannot signal the client, or the client cannot signal the
  server, the side that notices tries to send `SIGUSR2` to the other side,
  prints `Unexpected error.` and exits with status 1. A client that
  receives `SIGUSR2` prints `Signal received:` / `Server ended
  unexpectedly.` and exits with status 1.

## Library

- `sigtalk.protocol`: `encode_bits(message)` yields the `Bit` values of a
  message and its NUL terminator; `Decoder.feed(bit)` returns the message
  bytes once a NUL byte completes; `Transmission.next_bit()` hands out a
  message's bits one at a time and returns `None` when they are all out;
  `parse_pid(text)` reads a process id and raises `ValueError` unless it is
  positive; `TransmissionError` is raised when a peer cannot be signalled.
- `sigtalk.server`: `Server` (with `handle_signal(signum, frame)` and
  `run()`), `format_message(message)` and `main(argv=None)`.
- `sigtalk.client`: `Client(pid, message)` (with `start()`,
  `handle_signal(signum, frame)` and `run()`) and `main(argv=None)`.
  Both `Server` and `Client` take an `out` stream and a `kill` function,
  so they can be driven without real signals.
- `sigtalk.formatting`: `format_printf(fmt, *args)` and
  `printf(fmt, *args, file=None)`, supporting `%c %s %p %d %i %u %x %X %%`.
- `sigtalk.lines`: `LineReader(stream, buffer_size=5)` and
  `read_lines(stream, buffer_size=5)`, reading text or binary streams one
  line at a time through a fixed-size read.
- `sigtalk.strings`: `atoi`, `itoa`, `split`, `strchr`, `strrchr`,
  `strnstr`, `strncmp`, `strlcpy`, `strlcat`, `substr`, `strtrim`,
  `strmapi`, `striteri`.
- `sigtalk.memory`: `calloc`, `memset`, `bzero`, `memcpy`, `memmove`,
  `memchr`, `memcmp` on bytes and bytearrays.
- `sigtalk.chartype`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_upper`, `to_lower` on character codes or one-character
  strings.
- `sigtalk.linkedlist`: `Node` and `LinkedList`, a singly linked list with
  `push_front`, `push_back`, `last`, `for_each`, `map`, `clear`, `len()`
  and iteration.
- `sigtalk.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`, writing
  to a stream (standard output by default).

## Running the tests

```
pip install ".[test]"
pytest
```