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
Token kinds and character classes of the partition definition language.

Token kinds are plain integer constants. `TOKEN_NAMES` maps each kind to a
readable name that is used when reporting grammar errors.

The end of the input is represented by the `EOF` sentinel, which is never
a valid character of the input.
"""

import re

# Token kinds
ILLEGAL, IDENTIFIER, SEPARATOR, EQUAL, RANGE, MODULO, DECIMAL, \
    END_OF_LINE, END_OF_INPUT = range(9)

TOKEN_NAMES = {ILLEGAL: "illegal token",
               IDENTIFIER: "identifier",
               SEPARATOR: "separator",
               EQUAL: "'='",
               RANGE: "'-'",
               MODULO: "'/'",
               DECIMAL: "decimal number",
               END_OF_LINE: "end of line",
               END_OF_INPUT: "end of input"}

# End of input sentinel returned when the character source is exhausted
EOF = None

CR = "\r"
NL = "\n"
SPACE = " "

# Single character tokens
PUNCTUATION = {",": SEPARATOR,
               "=": EQUAL,
               "-": RANGE,
               "/": MODULO}

decimal_pat = re.compile(r"[+-]?[0-9]+\Z")

# Decimals are 64-bit signed integers
MIN_DECIMAL = -2 ** 63
MAX_DECIMAL = 2 ** 63 - 1


def is_end_of_line(ch):
    return ch == NL or ch == CR


def is_white_space(ch):
    return ch == SPACE


def is_ident(ch):
    """Returns whether `ch` can be part of an identifier.

    Every character is accepted except the end of input, line ends, the
    space and the four punctuation characters of the language.
    """
    return ch is not EOF and not is_end_of_line(ch) and \
        not is_white_space(ch) and ch not in PUNCTUATION


def is_decimal(literal):
    """Returns whether an identifier literal is a base-10 integer that fits
    in 64 bits. Larger numerals remain identifiers."""

    if decimal_pat.match(literal) is None:
        return False

    return MIN_DECIMAL <= int(literal) <= MAX_DECIMAL
