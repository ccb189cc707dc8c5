#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
#  Copyright 2012 Unknown <diogo@arch>
#
#  This program is free software; you can redistribute it and/or modify
#  it under the terms of the GNU General Public License as published by
#  the Free Software Foundation; either version 2 of the License, or
#  (at your option) any later version.
#
#  This program is distributed in the hope that it will be useful,
#  but WITHOUT ANY WARRANTY; without even the implied warranty of
#  MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#  GNU General Public License for more details.
#
#  You should have received a copy of the GNU General Public License
#  along with this program; if not, write to the Free Software
#  Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston,
#  MA 02110-1301, USA.

"""
Lexical scanner of the partition definition language.

The :class:`Scanner` reads one character at a time from a character source
and groups them into tokens. It never fails: any unexpected character ends
up inside an identifier or a punctuation token and is left for the
:class:`~alnpart.process.parser.Parser` to reject.
"""

import io
import codecs

from alnpart.process.tokens import EOF, CR, NL, PUNCTUATION, IDENTIFIER, \
    DECIMAL, END_OF_LINE, END_OF_INPUT, is_end_of_line, is_white_space, \
    is_ident, is_decimal


def open_source(source):
    """Returns a text stream for the provided character source.

    Strings are wrapped in a `StringIO` and binary streams are decoded as
    UTF-8. In both cases line endings are preserved as they are, so that the
    scanner sees the original "\\r" and "\\r\\n" characters.

    Open streams are only wrapped, never closed, so they stay usable by the
    caller after parsing.

    Parameters
    ----------
    source : str or file-like
        Partition definition text or an open stream.

    Returns
    -------
    stream : file-like
        Text stream with a `read` method.
    """

    if isinstance(source, str):
        return io.StringIO(source, newline="")

    if isinstance(source, (bytes, bytearray)):
        return io.StringIO(bytes(source).decode("utf-8", "replace"),
                           newline="")

    if isinstance(source, (io.RawIOBase, io.BufferedIOBase)):
        return BinarySource(source)

    return source


class BinarySource(object):
    """Decodes a binary stream as UTF-8, one character at a time.

    The wrapped stream is not owned: it is never closed, not even when the
    `BinarySource` is garbage collected. Invalid bytes are replaced by the
    Unicode replacement character.

    Parameters
    ----------
    stream : file-like
        Open binary stream.
    """

    def __init__(self, stream):

        self.stream = stream
        self._decoder = codecs.getincrementaldecoder("utf-8")(
            errors="replace")

    def read(self, size=1):
        """Returns up to `size` characters, or an empty string at the end of
        the stream."""

        chars = []

        while len(chars) < size:
            byte = self.stream.read(1)

            if not byte:
                # Flush an incomplete multi-byte sequence
                tail = self._decoder.decode(b"", final=True)
                if tail:
                    chars.append(tail)
                break

            ch = self._decoder.decode(byte)
            if ch:
                chars.append(ch)

        return "".join(chars)


class Scanner(object):
    """Lexical scanner of partition definitions.

    Parameters
    ----------
    source : str or file-like
        Character source. See :func:`open_source`.

    Attributes
    ----------
    stream : file-like
        Text stream from where the characters are read.
    """

    def __init__(self, source):

        self.stream = open_source(source)

        self._pending = None
        """
        Character pushed back by `_unread`. Only one character can be
        pushed back at a time.
        """

        self._exhausted = False
        """
        Set to True once the end of the stream is reached. From then on
        every read returns the EOF sentinel.
        """

    def _read(self):
        """Reads the next character, or EOF when the stream is exhausted."""

        if self._pending is not None:
            ch, self._pending = self._pending, None
            return ch

        if self._exhausted:
            return EOF

        ch = self.stream.read(1)
        if not ch:
            self._exhausted = True
            return EOF

        return ch

    def _unread(self, ch):
        """Pushes `ch` back so that the next `_read` returns it again."""

        # The end of input needs no pushback, since the stream stays
        # exhausted
        if ch is not EOF:
            self._pending = ch

    def scan(self):
        """Returns the next token kind and its literal.

        Returns
        -------
        tok : int
            Token kind, as defined in :mod:`alnpart.process.tokens`.
        lit : str
            Literal of the token. Empty for line ends and end of input.
        """

        ch = self._read()

        # Skip the leading spaces
        while is_white_space(ch):
            ch = self._read()

        if is_end_of_line(ch):
            # A "\r\n" pair is a single line end
            if ch == CR:
                nxt = self._read()
                if nxt != NL:
                    self._unread(nxt)
            return END_OF_LINE, ""

        if ch is EOF:
            return END_OF_INPUT, ""

        if ch in PUNCTUATION:
            return PUNCTUATION[ch], ch

        self._unread(ch)
        ident = self._scan_ident()

        if is_decimal(ident):
            return DECIMAL, ident

        return IDENTIFIER, ident

    def _scan_ident(self):
        """Consumes the current character and all contiguous identifier
        characters.
        """

        buf = [self._read()]

        while True:
            ch = self._read()
            if not is_ident(ch):
                self._unread(ch)
                break
            buf.append(ch)

        return "".join(buf)

    def __iter__(self):
        """Iterates over the `(tok, lit)` pairs up to, and including, the end
        of input.
        """

        while True:
            tok, lit = self.scan()
            yield tok, lit
            if tok == END_OF_INPUT:
                return
