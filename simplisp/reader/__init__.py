from simplisp.reader.tokenizer import Token, TokenKind, tokenize
from simplisp.reader.parser import Parser, parse
