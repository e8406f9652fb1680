import os
import sys
from typing import Dict, Optional, TextIO
from maze_game.core.session import Token

# Raw key -> token. Letters are matched case-insensitively.
KEYMAP: Dict[str, Token] = {
    "w": Token.UP,
    "s": Token.DOWN,
    "a": Token.LEFT,
    "d": Token.RIGHT,
    "r": Token.RESET,
    "q": Token.QUIT,
    # ANSI arrow sequences (normal and application cursor mode)
    "\x1b[A": Token.UP,
    "\x1b[B": Token.DOWN,
    "\x1b[D": Token.LEFT,
    "\x1b[C": Token.RIGHT,
    "\x1bOA": Token.UP,
    "\x1bOB": Token.DOWN,
    "\x1bOD": Token.LEFT,
    "\x1bOC": Token.RIGHT,
    # Windows console: prefix byte + scan code
    "\xe0H": Token.UP,
    "\xe0P": Token.DOWN,
    "\xe0K": Token.LEFT,
    "\xe0M": Token.RIGHT,
    "\x00H": Token.UP,
    "\x00P": Token.DOWN,
    "\x00K": Token.LEFT,
    "\x00M": Token.RIGHT,
}

def classify_key(key: Optional[str]) -> Token:
    if not key:
        return Token.NONE
    token = KEYMAP.get(key)
    if token is None and len(key) == 1:
        token = KEYMAP.get(key.lower())
    return token if token is not None else Token.NONE

class KeyReader:
    """
    Blocking single-key reader for an interactive terminal.

    Use as a context manager: the terminal is put in raw mode on entry and
    restored on exit. read_key() returns one key, with arrow keys returned as
    their full escape sequence.
    """

    ESCAPE_TIMEOUT = 0.05
    MAX_SEQUENCE = 16

    def __init__(self, stream: TextIO = None):
        self.stream = stream or sys.stdin
        self._saved_attrs = None

    def __enter__(self):
        if os.name != "nt":
            import termios
            import tty
            fd = self.stream.fileno()
            self._saved_attrs = termios.tcgetattr(fd)
            tty.setcbreak(fd)
        return self

    def __exit__(self, exc_type, exc, tb):
        if self._saved_attrs is not None:
            import termios
            termios.tcsetattr(self.stream.fileno(), termios.TCSADRAIN, self._saved_attrs)
            self._saved_attrs = None
        return False

    def read_key(self) -> str:
        if os.name == "nt":
            return self._read_windows()
        return self._read_posix()

    def read_token(self) -> Token:
        return classify_key(self.read_key())

    def _read_windows(self) -> str:
        import msvcrt
        ch = msvcrt.getwch()
        if ch in ("\x00", "\xe0"):
            # Extended key: a second call yields the scan code
            return ch + msvcrt.getwch()
        return ch

    def _read_posix(self) -> str:
        fd = self.stream.fileno()
        ch = os.read(fd, 1)
        if not ch:
            raise EOFError("Input stream closed")
        if ch != b"\x1b":
            return ch.decode("utf-8", errors="ignore")

        # A lone ESC has nothing following it
        introducer = self._read_pending(fd)
        seq = ch + introducer
        if introducer not in (b"[", b"O"):
            return seq.decode("utf-8", errors="ignore")

        # ESC O takes one more byte. ESC [ runs through parameter bytes up to
        # a final byte in 0x40-0x7E (arrows, Ctrl+arrows, PageUp, ...)
        while len(seq) < self.MAX_SEQUENCE:
            b = self._read_pending(fd)
            if not b:
                break
            seq += b
            if introducer == b"O" or 0x40 <= b[0] <= 0x7E:
                break
        return seq.decode("utf-8", errors="ignore")

    def _read_pending(self, fd: int) -> bytes:
        import select
        ready, _, _ = select.select([fd], [], [], self.ESCAPE_TIMEOUT)
        if not ready:
            return b""
        return os.read(fd, 1)
