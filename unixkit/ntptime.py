"""Query an NTP server for the current, exact time."""

from __future__ import annotations

import argparse
import socket
import struct
import sys
import time
from datetime import datetime, timezone

DEFAULT_SERVER = "pool.ntp.org"
NTP_PORT = 123
_NTP_EPOCH_OFFSET = 2208988800  # seconds between 1900-01-01 and 1970-01-01
_PACKET_SIZE = 48
_CLIENT_HEADER = 0x23  # leap 0, version 4, mode 3 (client)
_MODE_SERVER = 4
_MODE_BROADCAST = 5
_LEAP_NOT_IN_SYNC = 3


class NTPError(Exception):
    """Raised when the time cannot be obtained from an NTP server."""


def _split_server(server: str) -> tuple[str, int]:
    """Split ``host``, ``host:port`` or ``[ipv6]:port`` into host and port."""
    port_text = ""
    if server.startswith("["):
        host, _, rest = server[1:].partition("]")
        if rest.startswith(":"):
            port_text = rest[1:]
    elif server.count(":") == 1:
        host, _, port_text = server.partition(":")
    else:
        host = server
    if not host:
        raise NTPError(f"invalid server address: {server!r}")
    if not port_text:
        return host, NTP_PORT
    try:
        return host, int(port_text)
    except ValueError:
        raise NTPError(f"invalid port in server address: {server!r}") from None


def _to_ntp(timestamp: float) -> bytes:
    seconds = int(timestamp)
    fraction = int((timestamp - seconds) * 2**32)
    return struct.pack("!II", seconds + _NTP_EPOCH_OFFSET, fraction)


def _from_ntp(raw: bytes) -> float:
    seconds, fraction = struct.unpack("!II", raw)
    return seconds - _NTP_EPOCH_OFFSET + fraction / 2**32


def _validate(response: bytes, origin: bytes) -> None:
    if len(response) < _PACKET_SIZE:
        raise NTPError("invalid response: packet too short")
    leap = response[0] >> 6
    mode = response[0] & 0x07
    stratum = response[1]
    if mode not in (_MODE_SERVER, _MODE_BROADCAST):
        raise NTPError(f"invalid mode in response: {mode}")
    if stratum == 0:
        code = response[12:16].decode("ascii", "replace").rstrip("\x00")
        raise NTPError(f"kiss of death received: {code}")
    if leap == _LEAP_NOT_IN_SYNC:
        raise NTPError("invalid leap second")
    if response[24:32] != origin:
        raise NTPError("server response mismatch")
    if response[40:48] == bytes(8):
        raise NTPError("invalid transmit time in response")


def get_time(server: str = DEFAULT_SERVER, timeout: float = 5.0) -> datetime:
    """Return the current UTC time as reported by ``server``, corrected for delay."""
    host, port = _split_server(server)
    request = bytearray(_PACKET_SIZE)
    request[0] = _CLIENT_HEADER
    sent_at = time.time()
    origin = _to_ntp(sent_at)
    request[40:48] = origin

    try:
        family, kind, proto, _, address = socket.getaddrinfo(
            host, port, type=socket.SOCK_DGRAM
        )[0]
        with socket.socket(family, kind, proto) as sock:
            sock.settimeout(timeout)
            sock.sendto(bytes(request), address)
            response, _ = sock.recvfrom(512)
            received_at = time.time()
    except OSError as exc:
        raise NTPError(f"{exc}") from exc

    _validate(response, origin)
    server_received = _from_ntp(response[32:40])
    server_sent = _from_ntp(response[40:48])
    offset = ((server_received - sent_at) + (server_sent - received_at)) / 2
    return datetime.fromtimestamp(time.time() + offset, tz=timezone.utc)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Print the exact time from an NTP server.")
    parser.add_argument("server", nargs="?", default=DEFAULT_SERVER)
    parser.add_argument("--timeout", type=float, default=5.0)
    args = parser.parse_args(argv)
    try:
        current = get_time(args.server, args.timeout)
    except NTPError as exc:
        print(f"Can't take current time: {exc}", file=sys.stderr)
        return 1
    print("Current time:", current.astimezone())
    return 0


if __name__ == "__main__":
    sys.exit(main())