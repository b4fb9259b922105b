"""Command entry points for the message client and server.

The client checks its arguments and reports how many bytes of the message
it would send. The server announces its process id.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

from ftkit.output import put_char, put_nbr, put_str

__all__ = ["client_main", "server_main"]


def client_main(argv: Sequence[str] | None = None) -> int:
    """Run the client with ``argv`` (server pid, message).

    Returns 1 without output unless exactly two arguments are given and
    the message is not empty. Otherwise prints the byte length of the
    message and returns 0.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2 or not args[1]:
        return 1
    message = os.fsencode(args[1])
    put_str("Info sent: ")
    put_nbr(len(message))
    put_char("\n")
    return 0


def server_main(argv: Sequence[str] | None = None) -> int:
    """Run the server: print its process id and return 0.

    Arguments are accepted and ignored.
    """
    put_str("Server PID: " + str(os.getpid()))
    put_char("\n")
    return 0