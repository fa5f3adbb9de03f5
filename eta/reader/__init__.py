from eta.reader.tokens import Token, TokenKind
from eta.reader.lexer import lex, tokenize
from eta.reader.parser import TokenStream, parse

__all__ = ["Token", "TokenKind", "lex", "tokenize", "TokenStream", "parse"]
