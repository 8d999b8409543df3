"""
Utilities Package.

Console/logging setup and AST rendering helpers shared by the CLI.
"""
