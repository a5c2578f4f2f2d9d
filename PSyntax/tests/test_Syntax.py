import unittest

from ..Syntax import *
from ..Symbols import AstSymbol, CoreSymbol
from ..Errors import NodeCastError, SyntaxContractError, TailError

def n(value):
    return NumberNode.make(value)

def sym(name):
    return SymbolNode.make(AstSymbol.make(name))

def build(nodes, tail=None):
    builder = AstListBuilder()
    for node in nodes:
        builder.push(node)
    if tail is None:
        return builder.build()
    return builder.buildWithTail(tail)

class SyntaxTest(unittest.TestCase):
    def test_010_leaves(self):
        self.assertTrue(n(1).isNumber())
        self.assertTrue(sym('a').isSymbol())
        self.assertTrue(StringNode.make('s').isString())
        self.assertTrue(BooleanNode.make(False).isBoolean())
        self.assertFalse(n(1).isList())
        self.assertEqual(n(1), n(1))
        self.assertNotEqual(n(1), n(2))
        self.assertNotEqual(n(1), BooleanNode.make(True))
        self.assertEqual(SymbolNode.make(CoreSymbol.IF), SymbolNode.make(AstSymbol.fromCore(CoreSymbol.IF)))
        self.assertNotEqual(SymbolNode.make(CoreSymbol.IF), sym('if'))
        self.assertRaises(SyntaxContractError, NumberNode.make, True)
        self.assertRaises(SyntaxContractError, NumberNode.make, '1')
        self.assertRaises(SyntaxContractError, SymbolNode.make, 'a')

    def test_020_lists(self):
        proper = build([n(1), n(2)])
        improper = build([n(1)], n(2))
        self.assertTrue(proper.isList() and proper.isProperList())
        self.assertFalse(proper.isImproperList())
        self.assertTrue(improper.isImproperList())
        self.assertFalse(improper.isProperList())
        self.assertTrue(AstList.none().isEmptyList())
        self.assertFalse(improper.isEmptyList())
        self.assertEqual(AstList.one(n(1)), AstList.fromNodes([n(1)]))
        self.assertEqual(proper.getName(), 'proper list')
        self.assertEqual(improper.getName(), 'improper list')
        self.assertEqual(n(1).getName(), 'number')
        self.assertEqual(repr(proper), '(1 2)')
        self.assertEqual(repr(improper), '(1 . 2)')
        self.assertEqual(repr(AstList.fromNodes([SymbolNode.make(CoreSymbol.QUOTE), sym('x')])), "'x")
        self.assertEqual(repr(AstList.fromNodes([StringNode.make('a"b'), BooleanNode.make(True)])),
                         '("a\\"b" #t)')

    def test_030_builderSplicesListTail(self):
        a, b, c, d = sym('a'), sym('b'), sym('c'), sym('d')
        self.assertEqual(build([a, b], build([c, d])), build([a, b, c, d]))
        self.assertEqual(build([a, b], build([c], d)), build([a, b, c], d))
        self.assertEqual(build([a], AstList.none()), build([a]))
        self.assertEqual(len(build([a, b], build([c, d]))), 4)

    def test_031_builderEmpty(self):
        tail = build([n(1)], n(2))
        builder = AstListBuilder()
        try:
            builder.buildWithTail(tail)
        except TailError as e:
            self.assertTrue(e.node is tail)
        else:
            self.fail('improper tail accepted by an empty builder')
        proper = build([n(1), n(2)])
        self.assertEqual(AstListBuilder().buildWithTail(proper), proper)
        leafOnly = AstListBuilder().buildWithTail(n(5))
        self.assertTrue(leafOnly.isImproperList())
        self.assertEqual(len(leafOnly), 0)
        self.assertEqual(leafOnly.tail, n(5))

    def test_040_tailIsNeverAList(self):
        self.assertRaises(SyntaxContractError, AstList, [n(1)], AstList.none())
        self.assertRaises(SyntaxContractError, AstList, [1, 2])
        self.assertRaises(SyntaxContractError, AstListBuilder().push, 1)

    def test_050_downcasts(self):
        number = n(1)
        try:
            number.intoSymbol()
        except NodeCastError as e:
            self.assertTrue(e.node is number)
        else:
            self.fail('number cast to symbol')
        improper = build([n(1)], n(2))
        try:
            improper.intoProperList()
        except NodeCastError as e:
            self.assertTrue(e.node is improper)
            self.assertTrue('improper list' in str(e))
        else:
            self.fail('improper list cast to proper list')
        self.assertRaises(NodeCastError, number.intoList)
        self.assertTrue(improper.intoList() is improper)
        self.assertEqual(build([n(1), n(2)]).intoProperList(), [n(1), n(2)])
        self.assertEqual(sym('a').intoSymbol(), AstSymbol.make('a'))
        self.assertEqual(improper.asProperList(), None)
        self.assertEqual(number.asList(), None)
        self.assertEqual(number.asSymbol(), None)

    def test_060_intoInner(self):
        nodes, tail = build([n(1), n(2)]).intoInner()
        self.assertEqual(nodes, [n(1), n(2)])
        self.assertTrue(tail.isEmptyList())
        nodes, tail = build([n(1)], n(2)).intoInner()
        self.assertEqual(nodes, [n(1)])
        self.assertEqual(tail, n(2))

    def test_070_immutableAndHashable(self):
        lst = build([n(1), sym('a')])
        with self.assertRaises(AttributeError):
            lst.tail = n(3)
        with self.assertRaises(AttributeError):
            n(1).value = 2
        self.assertEqual(hash(lst), hash(build([n(1), sym('a')])))
        self.assertEqual(len(set([lst, build([n(1), sym('a')]), build([n(1)], sym('a'))])), 2)

    def test_080_nestedEquality(self):
        inner = build([sym('b')], sym('c'))
        self.assertEqual(build([sym('a'), inner]), build([sym('a'), build([sym('b')], sym('c'))]))
        self.assertNotEqual(build([sym('a'), inner]), build([sym('a'), build([sym('b'), sym('c')])]))
