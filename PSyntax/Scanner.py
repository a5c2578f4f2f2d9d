# -*- coding: utf-8 -*-
# 
# Copyright 2026 PSyntax Contributors (see CONTRIBUTORS for details). All rights reserved.
# 
# Redistribution and use in source and binary forms, with or without modification, are
# permitted provided that the following conditions are met:
# 
#    1. Redistributions of source code must retain the above copyright notice, this list of
#       conditions and the following disclaimer.
# 
#    2. Redistributions in binary form must reproduce the above copyright notice, this list
#       of conditions and the following disclaimer in the documentation and/or other materials
#       provided with the distribution.
# 
# THIS SOFTWARE IS PROVIDED BY PSYNTAX CONTRIBUTORS ``AS IS'' AND ANY EXPRESS OR IMPLIED
# WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE IMPLIED WARRANTIES OF MERCHANTABILITY AND
# FITNESS FOR A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO EVENT SHALL PSYNTAX CONTRIBUTORS
# BE LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR
# CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR
# SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER CAUSED AND ON
# ANY THEORY OF LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING
# NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF
# ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.
# 
# The views and conclusions contained in the software and documentation are those of the
# authors and should not be interpreted as representing official policies, either expressed
# or implied, of PSyntax Contributors.

"""
Lexical scanner.

The whole lexical grammar is one regular expression, compiled once at import
time. Each alternative carries a named group; the group that matched decides
what kind of token was found. Numbers, symbols, booleans and the dot must be
followed by a delimiter, which is part of the pattern but is not consumed.
"""

import logging
import re
from enum import Enum

from .Errors import UnexpectedEndOfFile, UnknownToken

log = logging.getLogger(__name__)

# flags for the scanner; letters and spaces are ASCII only
flags = re.ASCII

defaultFileName = '<string>'

comment = r'(?:;.*)'
whitespace = r'(?:\s|' + comment + r')'
delimiter = r'(?:' + whitespace + r'|[()";]|\Z)'

specialInitial = r'[!$%&*/:<=>?^_~]'
specialSubsequent = r'[+.@\-]'
initial = r'(?:[a-zA-Z]|' + specialInitial + r')'
subsequent = r'(?:[0-9]|' + initial + r'|' + specialSubsequent + r')'
normalSymbol = r'(?:' + initial + subsequent + r'*)'
oddSymbol = r'(?:[+\-]|\.\.\.)'
symbol = r'(?:(?P<symbol>' + normalSymbol + r'|' + oddSymbol + r')' + delimiter + r')'

def stringBody(name):
    return r'(?P<' + name + r'>(?:[^"\\\n]|\\.)*)'

string = r'(?:"' + stringBody('string') + r'")'
brokenString = r'(?:"' + stringBody('brokenString') + r'\\?\Z)'
number = r'(?:(?P<number>[+\-]?[0-9]+)' + delimiter + r')'
block = r'(?P<block>[()])'
boolean = r'(?:(?P<boolean>#[tf])' + delimiter + r')'
dot = r'(?:(?P<dot>\.)' + delimiter + r')'
quote = r"(?P<quote>')"
# multi-character tokens cut short by the end of the input
clipped = r'(?P<clipped>(?:\.\.|#)\Z)'

tokens = ('(?:' + number + '|' + symbol + '|' + string + '|' + block
          + '|(?P<whitespace>' + whitespace + '+)|' + brokenString + '|' + clipped
          + '|' + boolean + '|' + dot + '|' + quote + ')')

ptokens = re.compile(tokens, flags)

# extent of the text reported by an unknown token error
punknown = re.compile(r'[^\s()";]*', flags)

class TokenKind(Enum):
    BLOCK_START = 'block-start'
    BLOCK_END = 'block-end'
    STRING = 'string'
    SYMBOL = 'symbol'
    NUMBER = 'number'
    BOOLEAN = 'boolean'
    DOT = 'dot'
    QUOTE = 'quote'

class Fragment(object):
    """
    A piece of source text together with its position (file name, line
    containing the text, line and column numbers).
    """
    __slots__ = ['text', 'meta']
    def __init__(self, text, meta):
        self.text = text
        self.meta = meta

    def __str__(self):
        return self.text

    def __repr__(self):
        return '<Fragment ' + str(self) + '>'

class Token(Fragment):
    """
    A lexical token. ``text`` is the raw spelling; for strings it is the body
    between the quotes with escape sequences left as written.
    """
    __slots__ = ['kind']
    def __init__(self, kind, text, meta=None):
        Fragment.__init__(self, text, meta)
        self.kind = kind

    @property
    def value(self):
        if self.kind is TokenKind.BOOLEAN:
            return self.text == '#t'
        return self.text

    def __eq__(self, other):
        return (other is self) or (type(other) == type(self)
                                   and other.kind is self.kind and other.text == self.text)

    def __ne__(self, other):
        return not (self == other)

    def __hash__(self):
        return hash((self.kind, self.text))

    def __repr__(self):
        return '<Token %s %s>' % (self.kind.value, self.text)

# returned by Scanner.scanToken for whitespace and comments
SKIP = object()

class Scanner(object):
    """
    Splits a source text into tokens. Iterating over a scanner yields tokens
    lazily and stops at the end of the input; scanning failures are raised
    and end the iteration.
    """
    def __init__(self, text, fileName=defaultFileName):
        self.text = text
        self.fileName = fileName
        self.pos = 0
        self.lineNo = 1
        self.lineStart = 0
        self.error = None

    def currentLine(self):
        end = self.text.find('\n', self.lineStart)
        if end < 0:
            end = len(self.text)
        return self.text[self.lineStart:end]

    def makeMeta(self, start, end):
        return {
            'fileName': self.fileName,
            'line': self.currentLine(),
            'lineNo': self.lineNo,
            'colStart': start - self.lineStart + 1,
            'colEnd': end - self.lineStart + 1,
            'offset': start,
            }

    def advance(self, end):
        newlines = self.text.count('\n', self.pos, end)
        if newlines:
            self.lineNo += newlines
            self.lineStart = self.text.rfind('\n', self.pos, end) + 1
        self.pos = end

    def fail(self, cls, msg, end):
        fragment = Fragment(self.text[self.pos:end], self.makeMeta(self.pos, end))
        self.error = cls(fragment, msg)
        log.debug('%s:%d: %s', self.fileName, self.lineNo, msg)
        return self.error

    def scanToken(self):
        """
        Scans one step of the input. Returns a token, ``SKIP`` for a run of
        whitespace and comments, or ``None`` at the end of the input.
        """
        if self.error is not None:
            raise self.error
        if self.pos >= len(self.text):
            return None

        match = ptokens.match(self.text, self.pos)
        if match is None:
            end = max(punknown.match(self.text, self.pos).end(), self.pos + 1)
            raise self.fail(UnknownToken, 'Unknown token "%s"' % self.text[self.pos:end], end)

        name = match.lastgroup
        if name == 'whitespace':
            self.advance(match.end())
            return SKIP
        if name == 'brokenString':
            raise self.fail(UnexpectedEndOfFile, 'Unterminated string', match.end())
        if name == 'clipped':
            raise self.fail(UnexpectedEndOfFile, 'Unexpected end of input', match.end())

        if name == 'block':
            kind = TokenKind.BLOCK_START if match.group(name) == '(' else TokenKind.BLOCK_END
        else:
            kind = TokenKind(name)
        if name == 'string':
            # the closing quote belongs to the token
            end = match.end()
        else:
            end = match.end(name)
        token = Token(kind, match.group(name), self.makeMeta(self.pos, end))
        self.advance(end)
        return token

    def __iter__(self):
        while True:
            token = self.scanToken()
            if token is None:
                return
            if token is not SKIP:
                yield token

def tokenize(text, fileName=defaultFileName):
    "Scans the whole ``text`` and returns its tokens as a list."
    return list(Scanner(text, fileName))
