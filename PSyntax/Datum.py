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
Runtime data produced by quoting syntax.

These are the values a ``quote`` form evaluates to: numbers, strings,
booleans, interned symbols, pairs and the empty list. Booleans and the empty
list are singletons and symbols are interned by name, so they can be compared
with ``is``.
"""

import threading

class Datum(object):
    __slots__ = []
    typeName = 'a datum'

    def __ne__(self, other):
        return not (self == other)

    def __str__(self):
        return repr(self)

    def __repr__(self):
        return '#<unknown-datum 0x%x>' % id(self)

    def isBoolean(self):
        return False

    def isSymbol(self):
        return False

    def isNull(self):
        return False

    def isPair(self):
        return False

    def isNumber(self):
        return False

    def isString(self):
        return False

    def isList(self):
        return False

class Null(Datum):
    __slots__ = []
    cache = None
    typeName = 'a null list'

    @classmethod
    def make(cls):
        if cls.cache:
            return cls.cache
        self = cls()
        cls.cache = self
        return self

    def isNull(self):
        return True

    def isList(self):
        return True

    def __len__(self):
        return 0

    def __bool__(self):
        return True

    def __iter__(self):
        return iter([])

    def __repr__(self):
        return '()'

    def __eq__(self, other):
        return other is self

    __hash__ = object.__hash__

class Boolean(Datum):
    __slots__ = ['value']
    cache = {}
    typeName = 'a boolean value'

    @classmethod
    def make(cls, value):
        value = bool(value)
        if value in cls.cache:
            return cls.cache[value]
        self = cls()
        self.value = value
        cls.cache[value] = self
        return self

    def isBoolean(self):
        return True

    def __repr__(self):
        if self.value:
            return '#t'
        else:
            return '#f'

    def __eq__(self, other):
        return other is self

    __hash__ = object.__hash__

class Number(Datum):
    __slots__ = ['value']
    cache = [None]*256
    typeName = 'an integer number'

    @classmethod
    def make(cls, value):
        "Construct a ``Number`` object. Cache some of them for efficiency."
        if 0 <= value < 256:
            cached = cls.cache[value]
            if cached:
                return cached
            self = cls()
            self.value = value
            cls.cache[value] = self
            return self
        self = cls()
        self.value = value
        return self

    def isNumber(self):
        return True

    def __repr__(self):
        return str(self.value)

    def __eq__(self, other):
        #because caching is partial full comparison is still needed
        return (other is self) or (type(other) == type(self) and other.value == self.value)

    def __hash__(self):
        return hash(self.value)

class String(Datum):
    __slots__ = ['value']
    typeName = 'a string'

    char2name = {
        '\a': r'\a',
        '\b': r'\b',
        '\t': r'\t',
        '\n': r'\n',
        '\r': r'\r',
        '"':  r'\"',
        '\\': r'\\',
        }

    @classmethod
    def make(cls, string):
        self = cls()
        self.value = string
        return self

    def isString(self):
        return True

    def __repr__(self):
        string = '\"'
        for char in self.value:
            if char in self.char2name:
                string += self.char2name[char]
            elif 32 <= ord(char) < 127:
                string += char
            elif ord(char) < 256:
                string += '\\x%02x;' % ord(char)
            elif ord(char) < 256*256:
                string += '\\x%04x;' % ord(char)
            else:
                string += '\\x%06x;' % ord(char)
        string += '\"'
        return string

    def __eq__(self, other):
        return (other is self) or (type(other) == type(self) and other.value == self.value)

    def __hash__(self):
        return hash(self.value)

class Symbol(Datum):
    __slots__ = ['name']
    typeName = 'a symbol'

    cache = {}
    lock = threading.Lock()

    @classmethod
    def make(cls, name):
        with cls.lock:
            if name in cls.cache:
                return cls.cache[name]
            self = cls()
            self.name = name
            cls.cache[name] = self
            return self

    def isSymbol(self):
        return True

    def __repr__(self):
        return self.name

    def __eq__(self, other):
        return other is self

    __hash__ = object.__hash__

class Pair(Datum):
    __slots__ = ['car', 'cdr']
    typeName = 'a pair'

    @classmethod
    def make(cls, car, cdr):
        self = cls()
        self.car = car
        self.cdr = cdr
        return self

    @classmethod
    def makeFromList(cls, lst, proper = True):
        """
        Chains the elements of ``lst``. When ``proper`` is false the last
        element becomes the ``cdr`` of the last pair.
        """
        if len(lst) == 0:
            return Null.make()
        if proper:
            tail = Null.make()
            elements = lst
        else:
            tail = lst[-1]
            elements = lst[:-1]
        for e in reversed(elements):
            tail = cls.make(e, tail)
        return tail

    def toList(self):
        lst = [self.car]
        cdr = self.cdr
        while cdr.isPair():
            lst.append(cdr.car)
            cdr = cdr.cdr
        if cdr.isNull():
            return lst
        return lst + [cdr]

    def isPair(self):
        return True

    def isList(self):
        cdr = self.cdr
        while cdr.isPair():
            cdr = cdr.cdr
        return cdr.isNull()

    def __len__(self):
        len = 1
        cdr = self.cdr
        while cdr.isPair():
            cdr = cdr.cdr
            len += 1
        if cdr.isNull():
            return len
        else:
            return len + 1

    def __iter__(self):
        yield self.car
        cdr = self.cdr
        while cdr.isPair():
            yield cdr.car
            cdr = cdr.cdr
        if not cdr.isNull():
            yield cdr

    def __repr__(self):
        if self.car.isSymbol() and self.cdr.isPair() and self.cdr.cdr.isNull():
            if self.car.name == 'quote':
                return '\'' + repr(self.cdr.car)
        string = '(' + repr(self.car)
        cdr = self.cdr
        while cdr.isPair():
            string += (' ' + repr(cdr.car))
            cdr = cdr.cdr
        if cdr.isNull():
            return (string + ')')
        else:
            return (string + ' . ' + repr(cdr) + ')')

    def __eq__(self, other):
        if other is self:
            return True
        if (type(other) != type(self)) or (other.car != self.car):
            return False
        sCdr = self.cdr
        oCdr = other.cdr
        while True:
            if not sCdr.isPair() or not oCdr.isPair():
                return sCdr == oCdr
            if sCdr.car != oCdr.car:
                return False
            sCdr = sCdr.cdr
            oCdr = oCdr.cdr

def emptyList():
    return Null.make()

def intern(name):
    "The one symbol datum printed as ``name``."
    return Symbol.make(name)

def makeBoolean(value):
    return Boolean.make(value)

def cons(car, cdr):
    return Pair.make(car, cdr)
