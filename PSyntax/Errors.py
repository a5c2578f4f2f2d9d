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
Exceptions raised by the scanner, the reader and the syntax tree.

Every error keeps the object it complains about in ``expr``. Tokens carry a
``meta`` dictionary with their source position, which is used to point at
the offending text when the error is printed.
"""

class SchemeError(Exception):
    """
    Base class of all PSyntax errors.
    """
    def __init__(self, expr, msg=''):
        "``expr`` is the token or node the error is about. It may contain a ``meta`` attribute."
        Exception.__init__(self, msg)
        self.expr = expr
        self.msg = msg

    def __str__(self):
        meta = getattr(self.expr, 'meta', None)
        if not meta:
            return 'Error: ' + self.msg
        fileName = meta['fileName']
        line = meta['line'].rstrip()
        lineNo = str(meta['lineNo'])
        start = meta['colStart']
        span = max(meta['colEnd'] - start, 1)
        return ('Error: ' + self.msg + '\n' + fileName + ':' + lineNo + ', ' + line + '\n'
                + (' ' * (start+len(fileName)+len(lineNo)+2)) + ('-' * span))

class ScanError(SchemeError):
    "Input text could not be split into tokens."

class UnexpectedEndOfFile(ScanError):
    "The input ends inside a string or in the middle of a multi-character token."

class UnknownToken(ScanError):
    "No token starts at the current position."

class ReadError(SchemeError):
    "Tokens do not form a well-shaped datum."

class NodeCastError(SchemeError):
    """
    A downcast did not match the node's shape. The original node is kept,
    untouched, in ``node``.
    """
    def __init__(self, node, expected):
        SchemeError.__init__(self, node, 'expected %s, got %s' % (expected, node.getName()))
        self.node = node
        self.expected = expected

class TailError(SchemeError):
    """
    An improper list was given as the dotted tail of an empty list builder.
    The rejected node is kept in ``node``.
    """
    def __init__(self, node):
        SchemeError.__init__(self, node, 'an improper list cannot be the only tail of a list')
        self.node = node

class SyntaxContractError(SchemeError):
    "A syntax node was built in a way that breaks the tree's invariants."
