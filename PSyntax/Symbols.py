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
Identity of symbols appearing in the syntax tree.

A symbol comes from one of three places and symbols of different origins
never compare equal:

* core symbols, the fixed set of names the compiler recognizes structurally,
* generated symbols, numbered by a process-wide counter and used for
  bindings the compiler introduces when it rewrites core forms,
* user-defined symbols, spelled in the source text.
"""

import logging
import threading
from enum import Enum

log = logging.getLogger(__name__)

# printed names of generated symbols are this prefix followed by the counter value
generatedPrefix = '$temp$id'

class CoreSymbol(Enum):
    AND = 'and'
    BEGIN = 'begin'
    OR = 'or'
    LET = 'let'
    LETREC = 'letrec'
    LET_STAR = 'let*'
    LAMBDA = 'lambda'
    IF = 'if'
    SET = 'set'
    ERROR = 'error'
    QUOTE = 'quote'
    BEGIN_PROGRAM = '$begin-program'
    GEN_UNSPECIFIED = '$gen_unspecified'

    def getName(self):
        return self.value

    def isInternal(self):
        return self.value.startswith('$')

    @classmethod
    def lookup(cls, name):
        """
        Returns the core symbol spelled ``name``, or ``None``. Internal names
        (program entry, unspecified value) are never returned.
        """
        try:
            core = cls(name)
        except ValueError:
            return None
        if core.isInternal():
            return None
        return core

class SymbolCounter(object):
    """
    Source of generated symbol ids. ``take`` may be called from several
    threads; every call returns a value no other call returned.
    """
    __slots__ = ['_next', '_lock']
    def __init__(self, start=0):
        self._next = start
        self._lock = threading.Lock()

    def take(self):
        with self._lock:
            value = self._next
            self._next += 1
        return value

    def peek(self):
        with self._lock:
            return self._next

defaultCounter = SymbolCounter()

class SymbolOrigin(Enum):
    CORE = 'core'
    GENERATED = 'generated'
    DEFINED = 'defined'

class AstSymbol(object):
    __slots__ = ['origin', 'payload']
    typeName = 'a symbol'

    def __init__(self, origin, payload):
        object.__setattr__(self, 'origin', origin)
        object.__setattr__(self, 'payload', payload)

    @classmethod
    def make(cls, name):
        "User-defined symbol spelled ``name``."
        return cls(SymbolOrigin.DEFINED, str(name))

    @classmethod
    def fromCore(cls, core):
        return cls(SymbolOrigin.CORE, CoreSymbol(core))

    @classmethod
    def fresh(cls, counter=None):
        "Generated symbol distinct from every other generated symbol sharing ``counter``."
        if counter is None:
            counter = defaultCounter
        self = cls(SymbolOrigin.GENERATED, counter.take())
        log.debug('generated symbol %s', self.getName())
        return self

    def isCore(self):
        return self.origin is SymbolOrigin.CORE

    def isGenerated(self):
        return self.origin is SymbolOrigin.GENERATED

    def isDefined(self):
        return self.origin is SymbolOrigin.DEFINED

    def getCore(self):
        if self.isCore():
            return self.payload
        return None

    def getName(self):
        if self.origin is SymbolOrigin.CORE:
            return self.payload.getName()
        if self.origin is SymbolOrigin.GENERATED:
            return generatedPrefix + str(self.payload)
        return self.payload

    def __setattr__(self, name, value):
        raise AttributeError('symbols are immutable')

    def __eq__(self, other):
        return (other is self) or (type(other) == type(self) and other.origin is self.origin
                                   and other.payload == self.payload)

    def __ne__(self, other):
        return not (self == other)

    def __hash__(self):
        return hash((self.origin, self.payload))

    def __str__(self):
        return self.getName()

    def __repr__(self):
        return '<AstSymbol %s %s>' % (self.origin.value, self.getName())

def fresh(counter=None):
    return AstSymbol.fresh(counter)
