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
Syntax tree.

A node is either a leaf (number, symbol, string, boolean) or a list. A list
holds its children and, when it is improper, the leaf that ends the dotted
chain. Nodes are immutable and compare structurally, so the same tree can be
pattern-matched by the compiler and reified as quoted data.

Nodes know nothing about runtime values; see :mod:`PSyntax.Reify`.
"""

from .Errors import NodeCastError, SyntaxContractError, TailError
from .Symbols import AstSymbol, CoreSymbol

class AstNode(object):
    __slots__ = []
    kindName = 'syntax node'

    def __setattr__(self, name, value):
        raise AttributeError('syntax nodes are immutable')

    def __delattr__(self, name):
        raise AttributeError('syntax nodes are immutable')

    def getName(self):
        "Name of the node's kind, for messages."
        return self.kindName

    def isList(self):
        return False

    def isProperList(self):
        return False

    def isImproperList(self):
        return False

    def isEmptyList(self):
        return False

    def isNumber(self):
        return False

    def isSymbol(self):
        return False

    def isString(self):
        return False

    def isBoolean(self):
        return False

    def asList(self):
        return None

    def asProperList(self):
        return None

    def asSymbol(self):
        return None

    def intoSymbol(self):
        symbol = self.asSymbol()
        if symbol is None:
            raise NodeCastError(self, 'a symbol')
        return symbol

    def intoList(self):
        lst = self.asList()
        if lst is None:
            raise NodeCastError(self, 'a list')
        return lst

    def intoProperList(self):
        "Children of a proper list, as a python list."
        nodes = self.asProperList()
        if nodes is None:
            raise NodeCastError(self, 'a proper list')
        return list(nodes)

    def __ne__(self, other):
        return not (self == other)

    def __str__(self):
        return repr(self)

class AstLeaf(AstNode):
    __slots__ = ['value']

    def __init__(self, value):
        object.__setattr__(self, 'value', value)

    def __eq__(self, other):
        return (other is self) or (type(other) == type(self) and other.value == self.value)

    def __hash__(self):
        return hash((type(self).__name__, self.value))

class NumberNode(AstLeaf):
    __slots__ = []
    kindName = 'number'

    @classmethod
    def make(cls, value):
        if isinstance(value, bool) or not isinstance(value, int):
            raise SyntaxContractError(value, 'a number node holds an integer')
        return cls(value)

    def isNumber(self):
        return True

    def __repr__(self):
        return str(self.value)

class SymbolNode(AstLeaf):
    __slots__ = []
    kindName = 'symbol'

    @classmethod
    def make(cls, symbol):
        "``symbol`` is an :class:`AstSymbol` or a :class:`CoreSymbol`."
        if isinstance(symbol, CoreSymbol):
            symbol = AstSymbol.fromCore(symbol)
        if not isinstance(symbol, AstSymbol):
            raise SyntaxContractError(symbol, 'a symbol node holds a symbol')
        return cls(symbol)

    def isSymbol(self):
        return True

    def asSymbol(self):
        return self.value

    def __repr__(self):
        return self.value.getName()

class StringNode(AstLeaf):
    __slots__ = []
    kindName = 'string'

    @classmethod
    def make(cls, value):
        if not isinstance(value, str):
            raise SyntaxContractError(value, 'a string node holds text')
        return cls(value)

    def isString(self):
        return True

    def __repr__(self):
        return '"' + self.value.replace('\\', '\\\\').replace('"', '\\"') + '"'

class BooleanNode(AstLeaf):
    __slots__ = []
    kindName = 'boolean'

    @classmethod
    def make(cls, value):
        return cls(bool(value))

    def isBoolean(self):
        return True

    def __repr__(self):
        if self.value:
            return '#t'
        return '#f'

class AstList(AstNode):
    """
    A list of nodes. ``tail`` is ``None`` for a proper list; for an improper
    list it is the leaf closing the dotted chain.
    """
    __slots__ = ['nodes', 'tail']

    def __init__(self, nodes, tail=None):
        nodes = tuple(nodes)
        for node in nodes:
            if not isinstance(node, AstNode):
                raise SyntaxContractError(node, 'list elements must be syntax nodes')
        if tail is not None and (not isinstance(tail, AstLeaf)):
            raise SyntaxContractError(tail, 'the tail of an improper list must be a leaf')
        object.__setattr__(self, 'nodes', nodes)
        object.__setattr__(self, 'tail', tail)

    @classmethod
    def none(cls):
        return cls(())

    @classmethod
    def one(cls, node):
        return cls((node,))

    @classmethod
    def fromNodes(cls, nodes):
        return cls(nodes)

    @property
    def kindName(self):
        if self.isImproperList():
            return 'improper list'
        return 'proper list'

    def isList(self):
        return True

    def isProperList(self):
        return self.tail is None

    def isImproperList(self):
        return self.tail is not None

    def isEmptyList(self):
        return self.tail is None and not self.nodes

    def asList(self):
        return self

    def asProperList(self):
        if self.isProperList():
            return self.nodes
        return None

    def asNodes(self):
        return self.nodes

    def intoInner(self):
        """
        Splits the list into its children and the node ending it: the tail
        leaf of an improper list, or the empty list.
        """
        if self.tail is None:
            return list(self.nodes), AstList.none()
        return list(self.nodes), self.tail

    def __len__(self):
        return len(self.nodes)

    def __iter__(self):
        return iter(self.nodes)

    def __getitem__(self, index):
        return self.nodes[index]

    def __eq__(self, other):
        return (other is self) or (type(other) == type(self) and other.tail == self.tail
                                   and other.nodes == self.nodes)

    def __hash__(self):
        return hash((self.nodes, self.tail))

    def __repr__(self):
        if (len(self.nodes) == 2 and self.tail is None and self.nodes[0].isSymbol()
            and self.nodes[0].value == AstSymbol.fromCore(CoreSymbol.QUOTE)):
            return '\'' + repr(self.nodes[1])
        string = '(' + ' '.join(repr(node) for node in self.nodes)
        if self.tail is None:
            return string + ')'
        if not self.nodes:
            return '( . ' + repr(self.tail) + ')'
        return string + ' . ' + repr(self.tail) + ')'

class AstListBuilder(object):
    """
    Collects list elements in order. Used by the reader, which does not know
    whether a list is proper until it sees the closing parenthesis.
    """
    __slots__ = ['nodes']

    def __init__(self):
        self.nodes = []

    def push(self, node):
        if not isinstance(node, AstNode):
            raise SyntaxContractError(node, 'list elements must be syntax nodes')
        self.nodes.append(node)

    def isEmpty(self):
        return not self.nodes

    def __len__(self):
        return len(self.nodes)

    def build(self):
        return AstList(self.nodes)

    def buildWithTail(self, node):
        """
        Ends the list with ``node`` as its dotted tail. A list tail has its
        children appended and its own ending kept; a leaf tail makes the
        result improper. Raises :class:`TailError`, keeping ``node``, when
        nothing was pushed and ``node`` is an improper list.
        """
        if node.isList():
            if self.isEmpty() and node.isImproperList():
                raise TailError(node)
            return AstList(self.nodes + list(node.nodes), node.tail)
        return AstList(self.nodes, node)
