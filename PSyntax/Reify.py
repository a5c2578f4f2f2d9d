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
Turns syntax into the runtime data a quoted literal stands for.

This is the only place where syntax nodes meet runtime values.
"""

from . import Datum
from .Errors import SyntaxContractError

def leafToDatum(node):
    if node.isNumber():
        return Datum.Number.make(node.value)
    if node.isString():
        return Datum.String.make(node.value)
    if node.isBoolean():
        return Datum.makeBoolean(node.value)
    if node.isSymbol():
        # generated symbols are interned by their printed name as well
        return Datum.intern(node.value.getName())
    raise SyntaxContractError(node, 'cannot quote ' + node.getName())

def toDatum(node):
    """
    Returns the datum ``node`` denotes when quoted. Lists become chains of
    pairs ending in the empty list, or in the quoted tail for improper lists.
    """
    if not node.isList():
        return leafToDatum(node)
    if node.isProperList():
        datum = Datum.emptyList()
    else:
        datum = leafToDatum(node.tail)
    for child in reversed(node.nodes):
        datum = Datum.cons(toDatum(child), datum)
    return datum
