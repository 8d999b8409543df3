"""
Core Package.

Contains the front-end pipeline:
- Tokenizer (`tokens`)
- AST node model (`nodes`)
- Recursive descent parser (`parser`)
"""
