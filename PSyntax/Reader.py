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
Reads syntax trees from source text.

The reader pulls tokens from a :class:`Scanner` and builds nodes bottom-up.
Lists are collected with :class:`AstListBuilder`, so a dotted tail that is
itself a list is spliced in: ``(1 2 . (3 4))`` reads as ``(1 2 3 4)``.
"""

import logging
import re

from .Errors import ReadError, TailError
from .Scanner import Scanner, TokenKind, defaultFileName, flags
from .Symbols import AstSymbol, CoreSymbol
from .Syntax import AstList, AstListBuilder, BooleanNode, NumberNode, StringNode, SymbolNode

log = logging.getLogger(__name__)

name2char = {
    r'\a':     '\a',
    r'\b':     '\b',
    r'\t':     '\t',
    r'\n':     '\n',
    r'\r':     '\r',
    r'\"':     '\"',
    r'\\':    '\\',
    }

pcharcode = re.compile(r'\\[xX]([0-9a-fA-F]{1,6});', flags)
pchar = re.compile(r'(\\a|\\b|\\t|\\n|\\r|\\"|\\\\|(?:\\[xX][0-9a-zA-Z]+;)|(?:.))', flags | re.DOTALL)

def parseString(token):
    "Resolves the escape sequences of a string token."
    string = ''
    for charMatch in pchar.finditer(token.text):
        charName = charMatch.group(0)
        charCode = pcharcode.match(charName)
        if charName in name2char:
            string += name2char[charName]
        elif charCode != None:
            code = int(charCode.group(1), 16)
            try:
                string += chr(code)
            except ValueError:
                raise ReadError(token, 'Invalid character code in: %s.' % charName)
        elif len(charName) == 1:
            string += charName
        else:
            raise ReadError(token, 'Unknown character name: %s.' % charName)
    return string

def parseSymbol(token):
    core = CoreSymbol.lookup(token.text)
    if core is not None:
        return SymbolNode.make(core)
    return SymbolNode.make(AstSymbol.make(token.text))

class Reader(object):
    def __init__(self, text, fileName=defaultFileName):
        self.fileName = fileName
        self.tokens = iter(Scanner(text, fileName))

    def nextToken(self, opening, msg):
        try:
            return next(self.tokens)
        except StopIteration:
            raise ReadError(opening, msg)

    def parseToken(self, token):
        kind = token.kind
        if kind is TokenKind.BLOCK_START:
            return self.parseList(token)
        if kind is TokenKind.NUMBER:
            return NumberNode.make(int(token.text))
        if kind is TokenKind.SYMBOL:
            return parseSymbol(token)
        if kind is TokenKind.STRING:
            return StringNode.make(parseString(token))
        if kind is TokenKind.BOOLEAN:
            return BooleanNode.make(token.value)
        if kind is TokenKind.QUOTE:
            datum = self.parseToken(self.nextToken(token, 'Nothing to quote.'))
            return AstList.fromNodes([SymbolNode.make(CoreSymbol.QUOTE), datum])
        if kind is TokenKind.BLOCK_END:
            raise ReadError(token, 'Unexpected ")".')
        raise ReadError(token, 'Unexpected "." outside of a list.')

    def parseList(self, opening):
        builder = AstListBuilder()
        for token in self.tokens:
            if token.kind is TokenKind.BLOCK_END:
                return builder.build()
            if token.kind is not TokenKind.DOT:
                builder.push(self.parseToken(token))
                continue
            tailToken = self.nextToken(opening, 'Unterminated list.')
            if tailToken.kind in (TokenKind.BLOCK_END, TokenKind.DOT):
                raise ReadError(tailToken, 'Wrong pair format.')
            tail = self.parseToken(tailToken)
            closing = self.nextToken(opening, 'Unterminated list.')
            if closing.kind is not TokenKind.BLOCK_END:
                raise ReadError(closing, 'Wrong pair format.')
            try:
                return builder.buildWithTail(tail)
            except TailError:
                raise ReadError(token, 'Wrong pair format.')
        raise ReadError(opening, 'Unterminated list.')

    def read(self):
        "Yields the top-level forms of the text, one at a time."
        for token in self.tokens:
            node = self.parseToken(token)
            log.debug('%s: read %s', self.fileName, node.getName())
            yield node

    def readProgram(self):
        "All top-level forms wrapped as ``($begin-program form ...)``."
        builder = AstListBuilder()
        builder.push(SymbolNode.make(CoreSymbol.BEGIN_PROGRAM))
        for node in self.read():
            builder.push(node)
        return builder.build()

def read(text, fileName=defaultFileName):
    return list(Reader(text, fileName).read())

def readProgram(text, fileName=defaultFileName):
    return Reader(text, fileName).readProgram()
