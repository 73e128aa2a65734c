from gust.lexer.lexer import ClassTokens, tokenize, unbalanced_at

__all__ = ["ClassTokens", "tokenize", "unbalanced_at"]
