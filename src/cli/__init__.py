"""CLI `forja`: adapta argumentos de linha de comando aos casos de uso.

Entrypoint em `cli.main:main`.
"""
