import unittest

from ..Reader import *
from ..Errors import ReadError, UnexpectedEndOfFile, UnknownToken
from ..Symbols import AstSymbol, CoreSymbol
from ..Syntax import *

def n(value):
    return NumberNode.make(value)

def sym(name):
    return SymbolNode.make(AstSymbol.make(name))

class ReaderTest(unittest.TestCase):
    def r(self, txt):
        "Read"
        return read(txt, 'tests')

    def s(self, lst):
        "convert a list of nodes into a list of strings"
        return [str(element) for element in lst]

    def test_010_atoms(self):
        self.assertEqual(self.r('-12 +3 4'), [n(-12), n(3), n(4)])
        self.assertEqual(self.r('#t #f'), [BooleanNode.make(True), BooleanNode.make(False)])
        self.assertEqual(self.r('foo'), [sym('foo')])
        self.assertEqual(self.r('if let* lambda'),
                         [SymbolNode.make(CoreSymbol.IF), SymbolNode.make(CoreSymbol.LET_STAR),
                          SymbolNode.make(CoreSymbol.LAMBDA)])
        self.assertEqual(self.r('$begin-program'), [sym('$begin-program')])
        self.assertEqual(self.r(''), [])

    def test_020_strings(self):
        self.assertEqual(self.r('"asd" "asd\\"dsa"'), [StringNode.make('asd'), StringNode.make('asd"dsa')])
        self.assertEqual(self.r('"a\\nb\\x41;\\"q\\""'), [StringNode.make('a\nbA"q"')])
        self.assertEqual(self.r('"\\\\"'), [StringNode.make('\\')])
        self.assertEqual(self.r('"\\q"'), [StringNode.make('\\q')])
        self.assertRaises(ReadError, self.r, '"\\x110000;"')
        self.assertRaises(ReadError, self.r, '"\\xZZ;"')

    def test_030_lists(self):
        self.assertEqual(self.r('(if #t 1 2)'),
                         [AstList.fromNodes([SymbolNode.make(CoreSymbol.IF), BooleanNode.make(True),
                                             n(1), n(2)])])
        self.assertEqual(self.r('()'), [AstList.none()])
        self.assertEqual(self.s(self.r('(1 . 2)')), ['(1 . 2)'])
        self.assertEqual(self.r('(1 2 . (3 4))'), self.r('(1 2 3 4)'))
        self.assertEqual(self.r('(1 2 . ())'), self.r('(1 2)'))
        self.assertEqual(self.r('(1 . (2 . 3))'), self.r('(1 2 . 3)'))
        self.assertEqual(self.r('( . (1 2))'), self.r('(1 2)'))
        self.assertEqual(self.s(self.r('(a (b c) . d)')), ['(a (b c) . d)'])

    def test_031_badLists(self):
        for txt in ['(1 2 . )', '(1 2 .)', '( . )', '(1 . 2 3)', '(1 . . 2)',
                    '( . (1 . 2))', ')', '.', '(1 2', '(1 . 2']:
            self.assertRaises(ReadError, self.r, txt)

    def test_040_quote(self):
        self.assertEqual(self.r("'x"),
                         [AstList.fromNodes([SymbolNode.make(CoreSymbol.QUOTE), sym('x')])])
        self.assertEqual(self.r("'x"), self.r('(quote x)'))
        self.assertEqual(self.s(self.r("'(1 'b)")), ["'(1 'b)"])
        self.assertRaises(ReadError, self.r, "'")
        self.assertRaises(ReadError, self.r, "(a ')")

    def test_050_scanErrorsPropagate(self):
        self.assertRaises(UnexpectedEndOfFile, self.r, '(a "abc')
        self.assertRaises(UnknownToken, self.r, '(a #x)')

    def test_060_lazy(self):
        forms = Reader('1 (2').read()
        self.assertEqual(next(forms), n(1))
        self.assertRaises(ReadError, next, forms)

    def test_070_program(self):
        self.assertEqual(readProgram('; program\n(define x 1)\nx'),
                         AstList.fromNodes([SymbolNode.make(CoreSymbol.BEGIN_PROGRAM),
                                            AstList.fromNodes([sym('define'), sym('x'), n(1)]),
                                            sym('x')]))
        self.assertEqual(readProgram(''), AstList.one(SymbolNode.make(CoreSymbol.BEGIN_PROGRAM)))

    def test_080_errorPosition(self):
        try:
            self.r('(a\n  . b c)')
        except ReadError as e:
            self.assertEqual(e.expr.text, 'c')
            self.assertEqual(e.expr.meta['lineNo'], 2)
            self.assertTrue('Wrong pair format' in str(e))
        else:
            self.fail('no error raised')
