from simplisp.types.symbol import Symbol, SymbolTable
from simplisp.types.nil import Nil, NilType, T, TrueType, truth
from simplisp.types.expressions import Number, String, Pair, Function, Primitive, split_list
from simplisp.types.environment import Environment
